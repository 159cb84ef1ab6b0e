import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import commit
from app.core.exceptions import BlockedInteraction, ValidationFailure
from app.models.safety_db.block_db import Block
from app.models.safety_db.report_db import Report
from app.models.user_db.user_db_crud import require_user
from app.schemas.safety.block_base import BlockCreate
from app.schemas.safety.report_base import ReportCreate
from app.services.report_status import ReportStatus, can_transition

logger = logging.getLogger(__name__)


def create_block(db: Session, block: BlockCreate) -> Block:
    if block.blocker_id == block.blocked_id:
        raise ValidationFailure("Cannot block yourself")
    require_user(db, block.blocker_id)
    require_user(db, block.blocked_id)

    db_block = Block(
        blocker_id=block.blocker_id,
        blocked_id=block.blocked_id,
        reason=block.reason or None,
    )
    db.add(db_block)
    commit(db)
    db.refresh(db_block)
    logger.info(f"User {block.blocker_id} blocked user {block.blocked_id}")
    return db_block


def get_blocks_by_user_id(db: Session, user_id: int) -> List[Block]:
    return db.query(Block).filter(Block.blocker_id == user_id).order_by(Block.id).all()


def check_block(db: Session, blocker_id: int, blocked_id: int) -> Optional[Block]:
    return (
        db.query(Block)
        .filter(Block.blocker_id == blocker_id, Block.blocked_id == blocked_id)
        .first()
    )


def is_blocked_between(db: Session, user_a: int, user_b: int) -> bool:
    return bool(check_block(db, user_a, user_b) or check_block(db, user_b, user_a))


def ensure_not_blocked(db: Session, user_a: int, user_b: int) -> None:
    """Raise BlockedInteraction when block enforcement is on and either user blocked the other."""
    if settings.ENFORCE_BLOCKS and is_blocked_between(db, user_a, user_b):
        logger.info(f"Rejected interaction between blocked users {user_a} and {user_b}")
        raise BlockedInteraction()


def create_report(db: Session, report: ReportCreate) -> Report:
    if report.reporter_id == report.reported_id:
        raise ValidationFailure("Cannot report yourself")
    require_user(db, report.reporter_id)
    require_user(db, report.reported_id)

    db_report = Report(
        reporter_id=report.reporter_id,
        reported_id=report.reported_id,
        reason=report.reason,
        description=report.description or None,
        status=ReportStatus.pending.value,
    )
    db.add(db_report)
    commit(db)
    db.refresh(db_report)
    logger.info(f"Report {db_report.id} filed by user {report.reporter_id} against user {report.reported_id}")
    return db_report


def get_reports_by_user_id(db: Session, user_id: int) -> List[Report]:
    return db.query(Report).filter(Report.reporter_id == user_id).order_by(Report.id).all()


def get_report_by_id(db: Session, report_id: int) -> Optional[Report]:
    return db.query(Report).filter(Report.id == report_id).first()


def update_report_status(db: Session, report_id: int, status: ReportStatus) -> Optional[Report]:
    report = get_report_by_id(db, report_id)
    if not report:
        return None

    current = ReportStatus(report.status)
    if not can_transition(current, status):
        raise ValidationFailure(f"Cannot move report from {current.value} to {status.value}")

    report.status = status.value
    commit(db)
    db.refresh(report)
    return report
