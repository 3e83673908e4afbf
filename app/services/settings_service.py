"""Campus settings helpers: delivery charge and payment details."""

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import ValidationFailed
from app.models.campus import CampusSetting
from app.schemas.campus_setting import CampusSettingUpsert


def default_campus_setting(campus_id: str) -> CampusSetting:
    """Unsaved settings row with configured defaults for campuses never set up."""
    return CampusSetting(
        campus_id=campus_id,
        delivery_charge_per_person=settings.default_delivery_charge_per_person,
        account_title=settings.default_account_title,
        bank_name=settings.default_bank_name,
        account_number=settings.default_account_number,
    )


def get_campus_setting(db: Session, campus_id: str) -> CampusSetting:
    setting = db.get(CampusSetting, campus_id)
    return setting if setting is not None else default_campus_setting(campus_id)


def list_campus_settings(db: Session) -> list[CampusSetting]:
    return db.query(CampusSetting).order_by(CampusSetting.campus_id.asc()).all()


def parse_delivery_charge(value: object) -> int:
    """Delivery charge as a positive whole number."""
    if value is None or isinstance(value, bool):
        raise ValidationFailed("deliveryChargePerPerson is required")
    try:
        charge = int(str(value).strip())
    except ValueError as exc:
        raise ValidationFailed("deliveryChargePerPerson must be a whole number") from exc
    if charge <= 0:
        raise ValidationFailed("deliveryChargePerPerson must be greater than 0")
    return charge


def upsert_campus_setting(db: Session, payload: CampusSettingUpsert, *, updated_by: str | None) -> CampusSetting:
    campus_id = (payload.campus_id or "").strip()
    if not campus_id:
        raise ValidationFailed("campusId is required")
    charge = parse_delivery_charge(payload.delivery_charge_per_person)
    account_title = (payload.account_title or "").strip()
    bank_name = (payload.bank_name or "").strip()
    account_number = (payload.account_number or "").strip()
    if not account_title or not bank_name or not account_number:
        raise ValidationFailed("accountTitle, bankName and accountNumber are required")

    setting = db.get(CampusSetting, campus_id)
    if setting is None:
        setting = CampusSetting(campus_id=campus_id)
        db.add(setting)
    setting.delivery_charge_per_person = charge
    setting.account_title = account_title
    setting.bank_name = bank_name
    setting.account_number = account_number
    setting.updated_by = updated_by
    db.commit()
    db.refresh(setting)
    return setting
