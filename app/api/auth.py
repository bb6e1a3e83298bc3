import logging

from fastapi import APIRouter, Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.deps import get_db_dependency
from app.core.security import hash_password, verify_password, create_access_token, verify_access_token
from app.models.user import User
from app.repositories.user import user_repository
from app.schemas.user import UserCreate, UserRead, LoginRequest, Token

router = APIRouter()
security = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Security(security),
    db: Session = Depends(get_db_dependency)
) -> User:
    """Resolve the bearer token into the logged-in user, once per request."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    payload = verify_access_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user = user_repository.find_one_by_login(db, payload["sub"])
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


@router.post("/register", response_model=UserRead, status_code=201)
def register(payload: UserCreate, db: Session = Depends(get_db_dependency)):
    logger.debug(f"REST request to register user : {payload.login}")
    if user_repository.exists_by_login_or_email(db, payload.login, payload.email):
        raise HTTPException(status_code=409, detail="Login or email already in use")
    user = User(
        login=payload.login,
        email=payload.email,
        hashed_password=hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    try:
        user = user_repository.save(db, user)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Login or email already in use")
    return UserRead.model_validate(user)


@router.post("/authenticate", response_model=Token)
def authenticate(payload: LoginRequest, db: Session = Depends(get_db_dependency)):
    user = user_repository.find_one_by_login(db, payload.login)
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if not user.activated:
        raise HTTPException(status_code=403, detail="User is not activated")
    return Token(id_token=create_access_token(user.login))


@router.get("/account", response_model=UserRead)
def get_account(current_user: User = Depends(get_current_user)):
    return UserRead.model_validate(current_user)
