"""
Generic data access shared by every entity.

``save`` follows upsert semantics: an entity without an id is inserted, an
entity with an id is merged, which updates the row when it exists and inserts
a row with that id otherwise.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Query, Session

from app.core.db import Base

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):

    def __init__(self, model: Type[ModelT]):
        self.model = model

    def _query(self, db: Session) -> Query:
        """Base query; subclasses add eager loading for their aggregates."""
        return db.query(self.model)

    def save(self, db: Session, entity: ModelT) -> ModelT:
        if entity.id is None:
            db.add(entity)
        else:
            entity = db.merge(entity)
        db.commit()
        return entity

    def find_one(self, db: Session, id: int) -> Optional[ModelT]:
        return self._query(db).filter(self.model.id == id).first()

    def find_all(self, db: Session) -> List[ModelT]:
        return self._query(db).order_by(self.model.id).all()

    def find_all_by_ids(self, db: Session, ids: List[int]) -> List[ModelT]:
        if not ids:
            return []
        return self._query(db).filter(self.model.id.in_(ids)).order_by(self.model.id).all()

    def delete(self, db: Session, id: int) -> Optional[ModelT]:
        """Delete the row if present and return what was deleted."""
        entity = db.get(self.model, id)
        if entity is not None:
            db.delete(entity)
            db.commit()
        return entity
