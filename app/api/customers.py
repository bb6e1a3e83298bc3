from app.api.crud import build_crud_router
from app.repositories.customer import customer_repository
from app.schemas.customer import CustomerIn, CustomerRead

router = build_crud_router(
    path="customers",
    entity_name="customer",
    repository=customer_repository,
    schema_in=CustomerIn,
    schema_read=CustomerRead,
)
