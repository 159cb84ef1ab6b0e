from pydantic import BaseModel
from datetime import datetime

from app.schemas.profiles.profile_base import ProfileWithUser


class MatchOut(BaseModel):
    id: int
    user_id_1: int
    user_id_2: int
    matched_at: datetime
    is_active: bool

    class Config:
        from_attributes = True


class MatchWithProfiles(MatchOut):
    profile1: ProfileWithUser
    profile2: ProfileWithUser
