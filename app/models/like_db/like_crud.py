import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import commit
from app.core.exceptions import DuplicateLike, ValidationFailure
from app.models.like_db.like_db import Like
from app.models.match_db.match_crud import check_match, create_match
from app.models.safety_db.safety_crud import ensure_not_blocked
from app.models.user_db.user_db_crud import lock_users, require_user

logger = logging.getLogger(__name__)


def check_like(db: Session, sender_id: int, receiver_id: int) -> Optional[Like]:
    return (
        db.query(Like)
        .filter(Like.sender_id == sender_id, Like.receiver_id == receiver_id)
        .first()
    )


def get_likes_by_user_id(db: Session, user_id: int) -> List[Like]:
    return db.query(Like).filter(Like.sender_id == user_id).order_by(Like.id).all()


def record_like(db: Session, sender_id: int, receiver_id: int) -> Like:
    """
    Persist a like and, when the receiver already liked the sender back,
    create the match for the pair.

    Only the like is returned; the match is a side effect visible through
    ``get_matches_by_user_id`` for both users. Both user rows are locked in
    id order first, so opposite likes on the same pair run one after the
    other and the second always sees the first; the unique pair constraint
    backs this up.
    """
    if sender_id == receiver_id:
        raise ValidationFailure("Cannot like your own profile")

    require_user(db, sender_id)
    require_user(db, receiver_id)
    lock_users(db, sender_id, receiver_id)
    ensure_not_blocked(db, sender_id, receiver_id)

    if check_like(db, sender_id, receiver_id):
        logger.info(f"Duplicate like from user {sender_id} to user {receiver_id}")
        raise DuplicateLike()

    like = Like(sender_id=sender_id, receiver_id=receiver_id)
    db.add(like)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Concurrent duplicate like from user {sender_id} to user {receiver_id}")
        raise DuplicateLike() from e

    if check_like(db, receiver_id, sender_id) and not check_match(db, sender_id, receiver_id):
        create_match(db, sender_id, receiver_id)

    commit(db)
    db.refresh(like)
    return like
