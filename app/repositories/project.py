from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Query, Session, selectinload

from app.models.project import Project, ProjectActivity, ProjectPic
from app.repositories.base import CrudRepository


class ProjectRepository(CrudRepository[Project]):

    def __init__(self):
        super().__init__(Project)

    def _query(self, db: Session) -> Query:
        return db.query(Project).options(
            selectinload(Project.project_pics),
            selectinload(Project.project_activities).selectinload(ProjectActivity.activity),
        )

    def find_by_activities_in(self, db: Session, activity_ids: Iterable[int]) -> List[Project]:
        """Projects requiring at least one of ``activity_ids``, each listed once."""
        activity_ids = list(activity_ids)
        if not activity_ids:
            return []
        matching = select(ProjectActivity.project_id).where(ProjectActivity.activity_id.in_(activity_ids))
        return self._query(db).filter(Project.id.in_(matching)).order_by(Project.id).all()

    def find_by_customer(self, db: Session, customer_id: Optional[int]) -> List[Project]:
        if customer_id is None:
            return []
        return self._query(db).filter(Project.customer_id == customer_id).order_by(Project.id).all()


class ProjectPicRepository(CrudRepository[ProjectPic]):

    def __init__(self):
        super().__init__(ProjectPic)

    def find_by_project(self, db: Session, project_id: int) -> List[ProjectPic]:
        return db.query(ProjectPic).filter(ProjectPic.project_id == project_id).order_by(ProjectPic.id).all()


class ProjectActivityRepository(CrudRepository[ProjectActivity]):

    def __init__(self):
        super().__init__(ProjectActivity)

    def _query(self, db: Session) -> Query:
        return db.query(ProjectActivity).options(selectinload(ProjectActivity.activity))


project_repository = ProjectRepository()
project_pic_repository = ProjectPicRepository()
project_activity_repository = ProjectActivityRepository()
