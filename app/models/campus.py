"""University, campus and campus settings models."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.utils.identifiers import new_record_id


class University(Base):
    __tablename__ = "universities"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_record_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class Campus(Base):
    """Campus belonging to a university; the delivery unit for orders."""

    __tablename__ = "campuses"
    __table_args__ = (
        UniqueConstraint("name", "university_id", name="uq_campus_name_university"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_record_id)
    university_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class CampusSetting(Base):
    """Per-campus delivery charge and payment details."""

    __tablename__ = "campus_settings"

    campus_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    delivery_charge_per_person: Mapped[int] = mapped_column(Integer, nullable=False)
    account_title: Mapped[str] = mapped_column(String(255), nullable=False)
    bank_name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_number: Mapped[str] = mapped_column(String(64), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    updated_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
