"""Profile lookups for authenticated callers."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import ProfileNotFound, RoleNotRecognized
from app.models.profile import USER_ROLES, Profile

logger = logging.getLogger(__name__)


def get_profile(db: Session, subject_id: str) -> Profile | None:
    return db.get(Profile, subject_id)


def load_profile(db: Session, subject_id: str) -> Profile:
    """Return the caller's profile or refuse with 403.

    A missing profile and an unknown role are both reported as forbidden so
    that callers cannot probe which accounts exist.
    """
    profile = get_profile(db=db, subject_id=subject_id)
    if profile is None:
        raise ProfileNotFound()
    if profile.role not in USER_ROLES:
        logger.warning("Profile %s has unrecognized role %r", subject_id, profile.role)
        raise RoleNotRecognized()
    return profile


def create_profile(
    db: Session,
    *,
    subject_id: str,
    role: str,
    email: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
    university_id: str | None = None,
    campus_id: str | None = None,
    restaurant_id: str | None = None,
) -> Profile:
    if role not in USER_ROLES:
        raise ValueError(f"Unsupported role: {role}")
    profile = Profile(
        subject_id=subject_id,
        role=role,
        email=email,
        first_name=first_name,
        last_name=last_name,
        university_id=university_id,
        campus_id=campus_id,
        restaurant_id=restaurant_id if role == "restaurantManager" else None,
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile
