from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.profile_db.profile_crud import create_profile, get_profile_by_id, get_profile_by_user_id, \
    update_profile, get_profiles, search_profiles
from app.schemas.profiles.profile_base import ProfileCreate, ProfileOut, ProfileUpdate, ProfileWithUser
from app.services.accessibility import AccessibilityNeed, CommunicationPreference, DisabilityType
from app.services.interests import Interest


profile_router = APIRouter(prefix="/profiles", tags=["Profiles"])


@profile_router.post("", response_model=ProfileOut)
def create_profile_route(profile: ProfileCreate, db: Session = Depends(get_db)):
    return create_profile(db, profile)


@profile_router.get("", response_model=List[ProfileWithUser])
def list_profiles(
    exclude_user_id: Optional[int] = Query(None),
    db: Session = Depends(get_db)
):
    return get_profiles(db, exclude_user_id)


@profile_router.get("/options")
def get_profile_options():
    # suggestions for the setup form; profiles may also carry free text
    return {
        "interests": [i.value for i in Interest],
        "disability_types": [d.value for d in DisabilityType],
        "accessibility_needs": [a.value for a in AccessibilityNeed],
        "communication_preferences": [c.value for c in CommunicationPreference],
    }


@profile_router.get("/search", response_model=List[ProfileWithUser])
def search_profiles_route(
    q: str = Query(""),
    exclude_user_id: Optional[int] = Query(None),
    db: Session = Depends(get_db)
):
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    return search_profiles(db, q.strip(), exclude_user_id)


@profile_router.get("/user/{user_id}", response_model=ProfileOut)
def get_profile_for_user(user_id: int, db: Session = Depends(get_db)):
    profile = get_profile_by_user_id(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@profile_router.get("/{profile_id}", response_model=ProfileOut)
def get_profile(profile_id: int, db: Session = Depends(get_db)):
    profile = get_profile_by_id(db, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@profile_router.put("/{profile_id}", response_model=ProfileOut)
def edit_profile(profile_id: int, updates: ProfileUpdate, db: Session = Depends(get_db)):
    profile = update_profile(db, profile_id, updates)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile
