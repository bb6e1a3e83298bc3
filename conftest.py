"""
Pytest configuration and fixtures for the marketplace backend tests.

The application reads its settings at import time, so the test database,
web root and log directory are pointed at a temporary directory before any
``app`` module is imported.
"""

import os
import sys
import tempfile
import pytest
from pathlib import Path

backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

_test_root = Path(tempfile.mkdtemp(prefix="monappeloffre-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_test_root / 'test.db'}"
os.environ["WEB_ROOT"] = str(_test_root / "webapp")
os.environ["LOG_DIR"] = str(_test_root / "logs")
os.environ["SECRET_KEY"] = "test-secret"


@pytest.fixture(scope="session")
def backend_root():
    """Return the backend root directory."""
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from empty tables."""
    from app.core.db import Base, engine, init_db

    init_db()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    from app.core.db import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def web_root(tmp_path, monkeypatch):
    """
    Point WEB_ROOT at a per-test directory so uploaded photos do not leak
    between tests.
    """
    from app.core.config import settings

    root = tmp_path / "webapp"
    root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setattr(settings, "WEB_ROOT", str(root))
    return root


@pytest.fixture
def client(web_root):
    from fastapi.testclient import TestClient
    from app.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db_session):
    """Factory creating an activated user with password "secret"."""
    from app.core.security import hash_password
    from app.models.user import User

    def _make_user(login: str, activated: bool = True) -> User:
        user = User(
            login=login,
            email=f"{login}@example.com",
            hashed_password=hash_password("secret"),
            activated=activated,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    """Build the Authorization header for a user."""
    from app.core.security import create_access_token

    def _auth_headers(user) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.login)}"}

    return _auth_headers


@pytest.fixture
def admin_headers(make_user, auth_headers):
    """Headers of a user who is neither customer nor provider."""
    return auth_headers(make_user("admin"))


@pytest.fixture
def customer(db_session, make_user):
    from app.models.customer import Customer

    user = make_user("customer")
    c = Customer(
        user_id=user.id,
        phone="0102030405",
        street_number="12",
        street="rue de la Paix",
        complement_street="Bat. B",
        postal_code="75002",
        city="Paris",
    )
    db_session.add(c)
    db_session.commit()
    db_session.refresh(c)
    return c


@pytest.fixture
def customer_headers(customer, auth_headers):
    return auth_headers(customer.user)


@pytest.fixture
def activities(db_session):
    """Three activities: plumbing, painting, electricity."""
    from app.models.activity import Activity

    items = [Activity(name="plumbing"), Activity(name="painting"), Activity(name="electricity")]
    db_session.add_all(items)
    db_session.commit()
    for a in items:
        db_session.refresh(a)
    return items


# Pytest hooks
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
