from fastapi import HTTPException

from app.core.headers import failure_alert


def bad_request_alert(entity_name: str, error_key: str, message: str) -> HTTPException:
    """Build a 400 carrying the failure alert headers for ``entity_name``."""
    return HTTPException(status_code=400, detail=message, headers=failure_alert(entity_name, error_key))


def not_found(entity_label: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{entity_label} not found")
