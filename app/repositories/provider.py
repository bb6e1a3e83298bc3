from typing import List, Optional

from sqlalchemy.orm import Query, Session, selectinload

from app.models.provider import Provider, ProviderActivity
from app.models.provider_eligibility import ProviderEligibility
from app.repositories.base import CrudRepository


class ProviderRepository(CrudRepository[Provider]):

    def __init__(self):
        super().__init__(Provider)

    def _query(self, db: Session) -> Query:
        return db.query(Provider).options(
            selectinload(Provider.provider_activities).selectinload(ProviderActivity.activity)
        )

    def find_by_user_id(self, db: Session, user_id: int) -> Optional[Provider]:
        return self._query(db).filter(Provider.user_id == user_id).first()

    def activity_ids_of(self, db: Session, provider_id: int) -> List[int]:
        """Ids of the activities a provider offers, skipping dangling associations."""
        rows = db.query(ProviderActivity.activity_id).filter(
            ProviderActivity.provider_id == provider_id,
            ProviderActivity.activity_id.isnot(None),
        ).all()
        return [activity_id for (activity_id,) in rows]


class ProviderActivityRepository(CrudRepository[ProviderActivity]):

    def __init__(self):
        super().__init__(ProviderActivity)

    def _query(self, db: Session) -> Query:
        return db.query(ProviderActivity).options(selectinload(ProviderActivity.activity))


provider_repository = ProviderRepository()
provider_activity_repository = ProviderActivityRepository()
provider_eligibility_repository = CrudRepository(ProviderEligibility)
