from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.database import commit
from app.models.profile_db.profile_db import Profile
from app.models.user_db.user_db import User
from app.models.user_db.user_db_crud import require_user
from app.schemas.profiles.profile_base import ProfileCreate, ProfileUpdate


def create_profile(db: Session, profile: ProfileCreate) -> Profile:
    require_user(db, profile.user_id)

    db_profile = Profile(**profile.model_dump())
    db.add(db_profile)
    commit(db)
    db.refresh(db_profile)
    return db_profile


def get_profile_by_id(db: Session, profile_id: int) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def get_profile_by_user_id(db: Session, user_id: int) -> Optional[Profile]:
    # an active profile wins over older inactive ones
    return (
        db.query(Profile)
        .filter(Profile.user_id == user_id)
        .order_by(Profile.is_active.desc(), Profile.id)
        .first()
    )


def update_profile(db: Session, profile_id: int, updates: ProfileUpdate) -> Optional[Profile]:
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        return None

    for field, value in updates.model_dump(exclude_unset=True).items():
        # only disability_type is nullable
        if value is None and field != "disability_type":
            continue
        setattr(profile, field, value)

    commit(db)
    db.refresh(profile)
    return profile


def _active_profiles(db: Session, exclude_user_id: Optional[int]):
    q = (
        db.query(Profile)
        .join(User, Profile.user_id == User.id)
        .filter(Profile.is_active == True)  # noqa: E712
    )
    if exclude_user_id is not None:
        q = q.filter(User.id != exclude_user_id)
    return q


def get_profiles(db: Session, exclude_user_id: Optional[int] = None) -> List[Profile]:
    return (
        _active_profiles(db, exclude_user_id)
        .order_by(Profile.created_at.desc(), Profile.id.desc())
        .all()
    )


def search_profiles(db: Session, query: str, exclude_user_id: Optional[int] = None) -> List[Profile]:
    pattern = f"%{query}%"
    return (
        _active_profiles(db, exclude_user_id)
        .filter(
            or_(
                Profile.name.ilike(pattern),
                Profile.bio.ilike(pattern),
                Profile.location.ilike(pattern),
            )
        )
        .order_by(Profile.created_at.desc(), Profile.id.desc())
        .all()
    )
