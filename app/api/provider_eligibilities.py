from app.api.crud import build_crud_router
from app.repositories.provider import provider_eligibility_repository
from app.schemas.provider_eligibility import ProviderEligibilityIn, ProviderEligibilityRead

router = build_crud_router(
    path="provider-eligibilities",
    entity_name="providerEligibility",
    repository=provider_eligibility_repository,
    schema_in=ProviderEligibilityIn,
    schema_read=ProviderEligibilityRead,
)
