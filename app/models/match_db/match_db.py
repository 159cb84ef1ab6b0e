from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from app.core.database import Base
from datetime import datetime


class Match(Base):
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    # order in which the reciprocal likes were discovered
    user_id_1 = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    user_id_2 = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    matched_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # normalized pair, smaller id first
    pair_low_id = Column(Integer, nullable=False)
    pair_high_id = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("pair_low_id", "pair_high_id", name="uq_match_pair"),
    )
