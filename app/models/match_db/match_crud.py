import logging
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.match_db.match_db import Match
from app.models.profile_db.profile_crud import get_profile_by_user_id
from app.schemas.match.match_base import MatchOut, MatchWithProfiles
from app.schemas.profiles.profile_base import ProfileWithUser

logger = logging.getLogger(__name__)


def check_match(db: Session, user_id_1: int, user_id_2: int) -> Optional[Match]:
    return (
        db.query(Match)
        .filter(
            or_(
                and_(Match.user_id_1 == user_id_1, Match.user_id_2 == user_id_2),
                and_(Match.user_id_1 == user_id_2, Match.user_id_2 == user_id_1),
            )
        )
        .first()
    )


def create_match(db: Session, user_id_1: int, user_id_2: int) -> Match:
    """Add a match inside a savepoint. The caller commits."""
    match = Match(
        user_id_1=user_id_1,
        user_id_2=user_id_2,
        pair_low_id=min(user_id_1, user_id_2),
        pair_high_id=max(user_id_1, user_id_2),
    )
    try:
        with db.begin_nested():
            db.add(match)
    except IntegrityError:
        # another writer matched this pair first
        logger.info(f"Match between users {user_id_1} and {user_id_2} already exists")
        return check_match(db, user_id_1, user_id_2)

    logger.info(f"Match {match.id} created between users {user_id_1} and {user_id_2}")
    return match


def get_matches_by_user_id(db: Session, user_id: int) -> List[MatchWithProfiles]:
    user_matches = (
        db.query(Match)
        .filter(or_(Match.user_id_1 == user_id, Match.user_id_2 == user_id))
        .order_by(Match.matched_at.desc(), Match.id.desc())
        .all()
    )

    result: List[MatchWithProfiles] = []
    for match in user_matches:
        profile1 = get_profile_by_user_id(db, match.user_id_1)
        profile2 = get_profile_by_user_id(db, match.user_id_2)

        if not (profile1 and profile2 and profile1.user and profile2.user):
            logger.warning(
                f"Skipping match {match.id}: missing profile or user for "
                f"users {match.user_id_1}/{match.user_id_2}"
            )
            continue

        result.append(
            MatchWithProfiles(
                **MatchOut.model_validate(match).model_dump(),
                profile1=ProfileWithUser.model_validate(profile1),
                profile2=ProfileWithUser.model_validate(profile2),
            )
        )

    return result
