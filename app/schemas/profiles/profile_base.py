from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from app.schemas.users.user_base import UserOut


class ProfileBase(BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(ge=18, le=120)
    location: str
    bio: str
    interests: List[str] = []
    disability_type: Optional[str] = None
    accessibility_needs: List[str] = []
    communication_preferences: List[str] = []
    photos: List[str] = []
    is_active: bool = True


class ProfileCreate(ProfileBase):
    user_id: int


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, ge=18, le=120)
    location: Optional[str] = None
    bio: Optional[str] = None
    interests: Optional[List[str]] = None
    disability_type: Optional[str] = None
    accessibility_needs: Optional[List[str]] = None
    communication_preferences: Optional[List[str]] = None
    photos: Optional[List[str]] = None
    is_active: Optional[bool] = None


class ProfileOut(ProfileBase):
    id: int
    user_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class ProfileWithUser(ProfileOut):
    user: UserOut
