from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from app.core.database import Base
from datetime import datetime


class Like(Base):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("sender_id", "receiver_id", name="uq_like_sender_receiver"),
    )
