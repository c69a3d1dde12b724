# imagegen/models/user.py
from typing import Annotated, Optional
from datetime import datetime, timezone

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from sqlmodel import SQLModel, Field

def _check_email(value: str) -> str:
    # syntax check only, the address is stored and matched exactly as sent
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc))
    return value

EmailAddress = Annotated[str, AfterValidator(_check_email)]

class UserBase(SQLModel):
    username: str = Field(index=True, nullable=False, unique=True)
    email: str = Field(index=True, nullable=False, unique=True)

class UserCreate(SQLModel):
    email: EmailAddress
    password: str = Field(min_length=8, description="Plain-text password")
    username: str = Field(min_length=3, max_length=50)

class UserLogin(SQLModel):
    email: EmailAddress
    password: str

class UserPublic(SQLModel):
    id: int
    username: str
    created_at: datetime

class UserRead(UserBase):
    id: int
    created_at: datetime

class User(UserBase, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str = Field(nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
