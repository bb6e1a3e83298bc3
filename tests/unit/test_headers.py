"""
Unit tests for REST alert headers.
Run with: python -m pytest tests/unit/test_headers.py
"""
import pytest

from app.core.headers import entity_creation_alert, entity_update_alert, entity_deletion_alert, failure_alert


@pytest.mark.unit
def test_success_alerts():
    assert entity_creation_alert("project", 7) == {
        "X-monAppelOffreApp-alert": "A new project is created with identifier 7",
        "X-monAppelOffreApp-params": "7",
    }
    assert entity_update_alert("project", 7)["X-monAppelOffreApp-alert"] == "A project is updated with identifier 7"
    assert entity_deletion_alert("project", 7)["X-monAppelOffreApp-alert"] == "A project is deleted with identifier 7"


@pytest.mark.unit
def test_failure_alert():
    assert failure_alert("providerEligibility", "idexists") == {
        "X-monAppelOffreApp-error": "error.idexists",
        "X-monAppelOffreApp-params": "providerEligibility",
    }
