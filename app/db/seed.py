"""Database seeding helpers."""

import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.services.profile_service import create_profile, get_profile

logger = logging.getLogger(__name__)


def ensure_super_admin_profile(session: Session) -> bool:
    """Ensure the configured super admin has a profile, in development only.

    Returns ``True`` when a profile for ``SUPER_ADMIN_SUBJECT_ID`` exists
    after the call.
    """
    subject_id = settings.super_admin_subject_id.strip()
    if settings.app_env != "dev" or not subject_id:
        return False

    if get_profile(session, subject_id) is not None:
        return True

    create_profile(
        session,
        subject_id=subject_id,
        role="superAdmin",
        email=settings.super_admin_email or None,
    )
    logger.info("[BOOTSTRAP] Seeded super admin profile for %s", subject_id)
    return True


def ensure_seed_data(session: Session) -> None:
    ensure_super_admin_profile(session)
