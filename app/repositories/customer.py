from typing import Optional

from sqlalchemy.orm import Session

from app.models.customer import Customer
from app.repositories.base import CrudRepository


class CustomerRepository(CrudRepository[Customer]):

    def __init__(self):
        super().__init__(Customer)

    def find_by_user_id(self, db: Session, user_id: int) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.user_id == user_id).first()


customer_repository = CustomerRepository()
