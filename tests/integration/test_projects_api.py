"""
Integration tests for the generic project resource.

Run with: python -m pytest tests/integration/test_projects_api.py
"""
from datetime import date

import pytest

from app.models.project import Project


def _count_projects(db_session):
    db_session.expire_all()
    return db_session.query(Project).count()


@pytest.mark.integration
def test_create_project_returns_201_with_location(client, admin_headers, db_session):
    response = client.post(
        "/api/projects",
        json={"title": "Kitchen", "description": "Redo the kitchen", "city": "Lyon", "date_send": "2001-01-01"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert response.headers["Location"] == f"/api/projects/{data['id']}"
    assert response.headers["X-monAppelOffreApp-alert"] == f"A new project is created with identifier {data['id']}"
    assert response.headers["X-monAppelOffreApp-params"] == str(data["id"])
    # the server dates the project, the client value is ignored
    assert data["date_send"] == date.today().isoformat()
    assert data["title"] == "Kitchen"
    assert data["project_pics"] == []
    assert data["project_activities"] == []
    assert _count_projects(db_session) == 1


@pytest.mark.integration
def test_create_project_with_id_is_rejected(client, admin_headers, db_session):
    response = client.post("/api/projects", json={"id": 42, "title": "Kitchen"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.headers["X-monAppelOffreApp-error"] == "error.idexists"
    assert response.headers["X-monAppelOffreApp-params"] == "project"
    assert "cannot already have an ID" in response.json()["detail"]
    assert _count_projects(db_session) == 0


@pytest.mark.integration
def test_update_without_id_creates(client, admin_headers, db_session):
    response = client.put("/api/projects", json={"title": "Garden", "date_send": "2001-01-01"}, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert response.headers["Location"] == f"/api/projects/{data['id']}"
    assert data["date_send"] == date.today().isoformat()
    assert _count_projects(db_session) == 1


@pytest.mark.integration
def test_update_existing_project(client, admin_headers):
    created = client.post("/api/projects", json={"title": "Kitchen"}, headers=admin_headers).json()

    response = client.put(
        "/api/projects",
        json={"id": created["id"], "title": "Bathroom", "description": "Tiles"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.headers["X-monAppelOffreApp-alert"] == f"A project is updated with identifier {created['id']}"
    data = response.json()
    assert data["id"] == created["id"]
    assert data["title"] == "Bathroom"
    assert data["description"] == "Tiles"
    # an update without date keeps the original one
    assert data["date_send"] == created["date_send"]

    fetched = client.get(f"/api/projects/{created['id']}", headers=admin_headers).json()
    assert fetched["title"] == "Bathroom"


@pytest.mark.integration
def test_update_unknown_id_inserts_row(client, admin_headers, db_session):
    response = client.put("/api/projects", json={"id": 999, "title": "Roof"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["id"] == 999

    fetched = client.get("/api/projects/999", headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json()["title"] == "Roof"
    assert fetched.json()["date_send"] == date.today().isoformat()


@pytest.mark.integration
def test_get_project(client, admin_headers):
    created = client.post("/api/projects", json={"title": "Kitchen", "postal_code": "69001"}, headers=admin_headers).json()

    response = client.get(f"/api/projects/{created['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.integration
def test_get_unknown_project_returns_404(client, admin_headers):
    response = client.get("/api/projects/12345", headers=admin_headers)

    assert response.status_code == 404


@pytest.mark.integration
def test_list_projects(client, admin_headers):
    for title in ("Kitchen", "Garden", "Roof"):
        client.post("/api/projects", json={"title": title}, headers=admin_headers)

    response = client.get("/api/projects", headers=admin_headers)

    assert response.status_code == 200
    assert [p["title"] for p in response.json()] == ["Kitchen", "Garden", "Roof"]


@pytest.mark.integration
def test_delete_project(client, admin_headers, db_session):
    created = client.post("/api/projects", json={"title": "Kitchen"}, headers=admin_headers).json()

    response = client.delete(f"/api/projects/{created['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert response.headers["X-monAppelOffreApp-alert"] == f"A project is deleted with identifier {created['id']}"
    assert response.content == b""
    assert client.get(f"/api/projects/{created['id']}", headers=admin_headers).status_code == 404
    assert _count_projects(db_session) == 0


@pytest.mark.integration
def test_delete_unknown_project_returns_200(client, admin_headers):
    response = client.delete("/api/projects/12345", headers=admin_headers)

    assert response.status_code == 200


@pytest.mark.integration
def test_projects_require_authentication(client):
    assert client.get("/api/projects").status_code == 401
    assert client.post("/api/projects", json={"title": "Kitchen"}).status_code == 401
    assert client.get("/api/projects", headers={"Authorization": "Bearer forged.token"}).status_code == 401
    non_ascii = {"Authorization": "Bearer abc.été".encode("latin-1")}
    assert client.get("/api/projects", headers=non_ascii).status_code == 401
