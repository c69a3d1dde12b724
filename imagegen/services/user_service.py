import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from imagegen.core.errors import AuthenticationError, ConflictError, NotFoundError
from imagegen.core.security import create_user_token, hash_password, verify_password
from imagegen.models.user import UserCreate, UserLogin, UserPublic, UserRead
from imagegen.repositories.user_repo import (
    get_user_by_email,
    get_user_by_email_or_username,
    create_user as repo_create_user,
    get_user as repo_get_user,
)
from imagegen.schemas.auth import AuthResponse

logger = logging.getLogger(__name__)

def register_user(db: Session, user_in: UserCreate) -> AuthResponse:
    existing = get_user_by_email_or_username(db, user_in.email, user_in.username)
    if existing:
        if existing.email == user_in.email:
            raise ConflictError("Email already registered")
        raise ConflictError("Username already registered")

    hashed = hash_password(user_in.password)

    try:
        user = repo_create_user(db, user_in, hashed)
    except IntegrityError:
        # lost a race against a concurrent registration
        db.rollback()
        raise ConflictError("Email or username already registered")

    logger.info("Registered user %s (%s)", user.id, user.username)
    return AuthResponse(user=UserRead.model_validate(user), token=create_user_token(user))

def authenticate_user(db: Session, credentials: UserLogin) -> AuthResponse:
    # exact, case-sensitive email match
    user = get_user_by_email(db, credentials.email)
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.info("Failed login for %s", credentials.email)
        raise AuthenticationError("Invalid email or password")
    return AuthResponse(user=UserRead.model_validate(user), token=create_user_token(user))

def get_public_user(db: Session, user_id: int) -> UserPublic:
    user = repo_get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserPublic.model_validate(user)
