from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class BlockCreate(BaseModel):
    blocker_id: int
    blocked_id: int
    reason: Optional[str] = None


class BlockOut(BlockCreate):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
