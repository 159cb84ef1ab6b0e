from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.like_db.like_crud import record_like, get_likes_by_user_id
from app.schemas.likes.like_base import LikeCreate, LikeOut


like_router = APIRouter(prefix="/likes", tags=["Likes"])


@like_router.post("", response_model=LikeOut)
def create_like(payload: LikeCreate, db: Session = Depends(get_db)):
    return record_like(db, payload.sender_id, payload.receiver_id)


@like_router.get("/{user_id}", response_model=List[LikeOut])
def list_likes(user_id: int, db: Session = Depends(get_db)):
    return get_likes_by_user_id(db, user_id)
