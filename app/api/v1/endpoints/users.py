"""Profile administration endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.errors import ValidationFailed
from app.core.security import get_current_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.auth import ProfileCreate, ProfileRead
from app.services.order_policy import RESTAURANT_MANAGER, can_manage_platform, enforce
from app.services.profile_service import create_profile, get_profile

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=ProfileRead, status_code=status.HTTP_201_CREATED)
def create_user_profile(
    payload: ProfileCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Profile:
    """Assign a role to an identity-provider account; super admin only."""
    enforce(can_manage_platform(current_profile))
    subject_id = (payload.subject_id or "").strip()
    if not subject_id or not payload.role:
        raise ValidationFailed("subjectId and role are required")
    if payload.role == RESTAURANT_MANAGER and not payload.restaurant_id:
        raise ValidationFailed("restaurantId is required for restaurant managers")
    if get_profile(db, subject_id) is not None:
        raise ValidationFailed("Profile already exists")

    try:
        profile = create_profile(
            db,
            subject_id=subject_id,
            role=payload.role,
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            university_id=payload.university_id,
            campus_id=payload.campus_id,
            restaurant_id=payload.restaurant_id,
        )
    except ValueError as exc:
        raise ValidationFailed(str(exc)) from exc
    logger.info("Profile %s created with role %s by %s", subject_id, profile.role, current_profile.subject_id)
    return profile
