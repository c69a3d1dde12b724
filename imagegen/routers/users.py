from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from imagegen.services.user_service import get_public_user
from imagegen.models.user import User, UserPublic, UserRead
from imagegen.database import get_db
from imagegen.core.security import get_current_user


router = APIRouter(prefix="/users", tags=["users"])

@router.get(
    "/me",
    response_model=UserRead,
    status_code=status.HTTP_200_OK,
)
def read_current_user(
    current_user: User = Depends(get_current_user),
):
    """
    Return the account behind the bearer token.
    """
    return UserRead.model_validate(current_user)

@router.get(
    "/{user_id}",
    response_model=UserPublic,
    status_code=status.HTTP_200_OK,
)
def read_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Public profile of a user by ID (no email).
    Raises 404 if not found.
    """
    return get_public_user(db, user_id)
