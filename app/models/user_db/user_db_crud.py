from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.user_db.user_db import User
from app.schemas.users.user_base import UserCreate
from app.core.database import commit
from app.core.exceptions import NotFound, ValidationFailure
from app.core.security import hash_password
from typing import List


def create_user(db: Session, user: UserCreate):
    db_user = User(
        email=user.email,
        username=user.username,
        hashed_password=hash_password(user.password),
    )
    db.add(db_user)
    try:
        db.flush()
    except IntegrityError as e:
        # a concurrent registration won the unique email/username
        db.rollback()
        raise ValidationFailure("Email or username already registered") from e
    commit(db)
    db.refresh(db_user)
    return db_user


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str):
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def require_user(db: Session, user_id: int) -> User:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFound(f"User {user_id} not found")
    return user


def lock_users(db: Session, *user_ids: int) -> List[User]:
    """Row-lock the given users in id order so paired writers serialize (no-op on SQLite)."""
    return (
        db.query(User)
        .filter(User.id.in_(user_ids))
        .order_by(User.id)
        .with_for_update()
        .all()
    )


def count_users(db: Session) -> int:
    return db.query(User).count()


def get_all_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    return db.query(User).order_by(User.id).offset(skip).limit(limit).all()
