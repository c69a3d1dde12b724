# imagegen/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from imagegen.database import get_db
from imagegen.models.user import UserCreate, UserLogin
from imagegen.schemas.auth import AuthResponse
from imagegen.services.user_service import register_user, authenticate_user

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    user_in: UserCreate,
    db: Session = Depends(get_db),
):
    """
    Register a new user.
    - Rejects a taken email or username with 409
    - Hashes password
    - Returns the created user and a bearer token
    """
    return register_user(db, user_in)

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
):
    # a fresh token on every successful login
    return authenticate_user(db, credentials)
