from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.safety_db.safety_crud import create_block, get_blocks_by_user_id, create_report, \
    get_reports_by_user_id, update_report_status
from app.schemas.safety.block_base import BlockCreate, BlockOut
from app.schemas.safety.report_base import ReportCreate, ReportOut, ReportStatusUpdate


block_router = APIRouter(prefix="/blocks", tags=["Safety"])
report_router = APIRouter(prefix="/reports", tags=["Safety"])


@block_router.post("", response_model=BlockOut)
def block_user(payload: BlockCreate, db: Session = Depends(get_db)):
    return create_block(db, payload)


@block_router.get("/{user_id}", response_model=List[BlockOut])
def list_blocks(user_id: int, db: Session = Depends(get_db)):
    return get_blocks_by_user_id(db, user_id)


@report_router.post("", response_model=ReportOut)
def report_user(payload: ReportCreate, db: Session = Depends(get_db)):
    return create_report(db, payload)


@report_router.get("/{user_id}", response_model=List[ReportOut])
def list_reports(user_id: int, db: Session = Depends(get_db)):
    return get_reports_by_user_id(db, user_id)


@report_router.put("/{report_id}/status", response_model=ReportOut)
def change_report_status(report_id: int, payload: ReportStatusUpdate, db: Session = Depends(get_db)):
    report = update_report_status(db, report_id, payload.status)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return report
