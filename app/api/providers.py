from fastapi import APIRouter

from app.api.crud import build_crud_router
from app.repositories.provider import provider_repository, provider_activity_repository
from app.schemas.provider import ProviderIn, ProviderRead, ProviderActivityIn, ProviderActivityRead

router = APIRouter()
router.include_router(build_crud_router(
    path="providers",
    entity_name="provider",
    repository=provider_repository,
    schema_in=ProviderIn,
    schema_read=ProviderRead,
))
router.include_router(build_crud_router(
    path="provider-activities",
    entity_name="providerActivity",
    repository=provider_activity_repository,
    schema_in=ProviderActivityIn,
    schema_read=ProviderActivityRead,
))
