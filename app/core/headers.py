"""
Alert headers attached to REST responses.

The frontend reads these to display success and failure notifications:
``X-<app>-alert`` / ``X-<app>-error`` carry the message or error key and
``X-<app>-params`` carries the entity identifier (or entity name on failure).
"""

from typing import Dict

from app.core.config import settings


def create_alert(message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{settings.APP_NAME}-alert": message,
        f"X-{settings.APP_NAME}-params": param,
    }


def entity_creation_alert(entity_name: str, param) -> Dict[str, str]:
    return create_alert(f"A new {entity_name} is created with identifier {param}", str(param))


def entity_update_alert(entity_name: str, param) -> Dict[str, str]:
    return create_alert(f"A {entity_name} is updated with identifier {param}", str(param))


def entity_deletion_alert(entity_name: str, param) -> Dict[str, str]:
    return create_alert(f"A {entity_name} is deleted with identifier {param}", str(param))


def failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    return {
        f"X-{settings.APP_NAME}-error": f"error.{error_key}",
        f"X-{settings.APP_NAME}-params": entity_name,
    }
