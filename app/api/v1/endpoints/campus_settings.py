"""Campus settings endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import get_current_profile
from app.db.session import get_db
from app.models.campus import CampusSetting
from app.models.profile import Profile
from app.schemas.campus_setting import CampusSettingRead, CampusSettingUpsert
from app.services.order_policy import can_manage_platform, can_view_campus_settings, enforce
from app.services.settings_service import get_campus_setting, list_campus_settings, upsert_campus_setting

router: APIRouter = APIRouter()


@router.get("", response_model=list[CampusSettingRead])
def get_all_campus_settings(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> list[CampusSetting]:
    enforce(can_manage_platform(current_profile))
    return list_campus_settings(db)


@router.post("", response_model=CampusSettingRead)
def save_campus_setting(
    payload: CampusSettingUpsert,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> CampusSetting:
    enforce(can_manage_platform(current_profile))
    return upsert_campus_setting(db, payload, updated_by=current_profile.email or current_profile.subject_id)


@router.get("/{campus_id}", response_model=CampusSettingRead)
def get_settings_for_campus(
    campus_id: str,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> CampusSetting:
    """Saved settings for the campus, or the configured defaults."""
    enforce(can_view_campus_settings(current_profile, campus_id))
    return get_campus_setting(db, campus_id)
