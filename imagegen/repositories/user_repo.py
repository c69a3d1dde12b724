from typing import Optional
from sqlalchemy import or_
from sqlmodel import Session, select
from imagegen.models.user import User, UserCreate

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    stmt = select(User).where(User.email == email)
    return db.exec(stmt).first()

def get_user_by_email_or_username(db: Session, email: str, username: str) -> Optional[User]:
    stmt = select(User).where(or_(User.email == email, User.username == username))
    return db.exec(stmt).first()

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)

def create_user(db: Session, user: UserCreate, password_hash: str) -> User:
    db_user = User(
        username=user.username,
        email=user.email,
        password_hash=password_hash,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
