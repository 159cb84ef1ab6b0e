from pydantic import BaseModel
from datetime import datetime


class LikeCreate(BaseModel):
    sender_id: int
    receiver_id: int


class LikeOut(LikeCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
