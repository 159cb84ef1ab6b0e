from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.security import get_current_user
from app.models.user_db.user_db import User
from app.models.user_db.user_db_crud import create_user, get_user_by_id, get_all_users, \
    count_users, get_user_by_email, get_user_by_username
from app.schemas.common.page_response import PageResponse
from app.schemas.users.user_base import UserCreate, UserOut


user_router = APIRouter(prefix="/users", tags=["Users"])


@user_router.post("", response_model=UserOut)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    if get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    if get_user_by_username(db, user.username):
        raise HTTPException(status_code=400, detail="Username already taken")
    return create_user(db, user)


@user_router.get("/", response_model=PageResponse[UserOut])
def list_users(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total = count_users(db)
    users = get_all_users(db, skip=skip, limit=size)

    has_next = (page * size) < total
    has_prev = page > 1

    return PageResponse[UserOut](
        page=page,
        size=size,
        total=total,
        has_next=has_next,
        has_prev=has_prev,
        items=[UserOut.model_validate(u) for u in users]
    )


@user_router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user


@user_router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
