from typing import Iterable, List

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from app.core.database import commit
from app.core.exceptions import ValidationFailure
from app.models.message_db.message_db import Message
from app.models.safety_db.safety_crud import ensure_not_blocked
from app.models.user_db.user_db_crud import require_user
from app.schemas.messages.message_base import MessageCreate


def create_message(db: Session, message: MessageCreate) -> Message:
    if message.sender_id == message.receiver_id:
        raise ValidationFailure("Cannot send a message to yourself")

    require_user(db, message.sender_id)
    require_user(db, message.receiver_id)
    ensure_not_blocked(db, message.sender_id, message.receiver_id)

    db_message = Message(
        sender_id=message.sender_id,
        receiver_id=message.receiver_id,
        content=message.content,
        message_type=message.message_type.value,
        is_read=False,
    )
    db.add(db_message)
    commit(db)
    db.refresh(db_message)
    return db_message


def _newest_first(q):
    return q.order_by(Message.sent_at.desc(), Message.id.desc())


def get_messages_between_users(db: Session, user_id_1: int, user_id_2: int) -> List[Message]:
    q = db.query(Message).filter(
        or_(
            and_(Message.sender_id == user_id_1, Message.receiver_id == user_id_2),
            and_(Message.sender_id == user_id_2, Message.receiver_id == user_id_1),
        )
    )
    return _newest_first(q).all()


def get_conversations_by_user_id(db: Session, user_id: int) -> List[Message]:
    q = db.query(Message).filter(
        or_(Message.sender_id == user_id, Message.receiver_id == user_id)
    )
    return _newest_first(q).all()


def mark_message_as_read(db: Session, message_id: int) -> None:
    # unknown ids are ignored
    db.query(Message).filter(Message.id == message_id).update({Message.is_read: True})
    commit(db)


def summarize_conversations(messages: Iterable, user_id: int) -> List[dict]:
    """
    Group a newest-first message list into one thread per counterparty.

    Each thread keeps the first (most recent) message seen for that
    counterparty and counts the messages it sent to ``user_id`` that are
    still unread. Nothing is stored; callers recompute on every read.
    """
    threads: dict = {}
    for message in messages:
        other_id = message.receiver_id if message.sender_id == user_id else message.sender_id
        thread = threads.get(other_id)
        if thread is None:
            thread = {"user_id": other_id, "last_message": message, "unread_count": 0}
            threads[other_id] = thread
        if message.receiver_id == user_id and not message.is_read:
            thread["unread_count"] += 1

    return list(threads.values())
