"""Campus settings schemas."""

from datetime import datetime
from typing import Any

from app.schemas.common import CamelModel


class CampusSettingUpsert(CamelModel):
    campus_id: str | None = None
    delivery_charge_per_person: Any = None
    account_title: str | None = None
    bank_name: str | None = None
    account_number: str | None = None


class CampusSettingRead(CamelModel):
    campus_id: str
    delivery_charge_per_person: int
    account_title: str
    bank_name: str
    account_number: str
    updated_at: datetime | None = None
    updated_by: str | None = None
