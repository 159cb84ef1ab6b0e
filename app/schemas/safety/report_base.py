from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.services.report_status import ReportStatus


class ReportCreate(BaseModel):
    reporter_id: int
    reported_id: int
    reason: str = Field(min_length=1)
    description: Optional[str] = None


class ReportStatusUpdate(BaseModel):
    status: ReportStatus


class ReportOut(ReportCreate):
    id: int
    status: ReportStatus
    created_at: datetime

    class Config:
        from_attributes = True
