from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.user import User
from app.repositories.base import CrudRepository


class UserRepository(CrudRepository[User]):

    def __init__(self):
        super().__init__(User)

    def find_one_by_login(self, db: Session, login: str) -> Optional[User]:
        return db.query(User).filter(User.login == login).first()

    def exists_by_login_or_email(self, db: Session, login: str, email: str) -> bool:
        return db.query(User.id).filter(or_(User.login == login, User.email == email)).first() is not None


user_repository = UserRepository()
