from app.api.crud import build_crud_router
from app.repositories.activity import activity_repository
from app.schemas.activity import ActivityIn, ActivityRead

router = build_crud_router(
    path="activities",
    entity_name="activity",
    repository=activity_repository,
    schema_in=ActivityIn,
    schema_read=ActivityRead,
)
