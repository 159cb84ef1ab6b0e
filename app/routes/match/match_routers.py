from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.models.match_db.match_crud import get_matches_by_user_id
from app.schemas.match.match_base import MatchWithProfiles


match_router = APIRouter(prefix="/matches", tags=["Matching"])


@match_router.get("/{user_id}", response_model=List[MatchWithProfiles])
def list_matches(user_id: int, db: Session = Depends(get_db)):
    return get_matches_by_user_id(db, user_id)
