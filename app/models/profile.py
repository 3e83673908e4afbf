"""Caller profile model keyed by identity-provider subject id."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base

USER_ROLES = ("user", "campusAdmin", "superAdmin", "restaurantManager")


class Profile(Base):
    """Role and campus/restaurant assignment for an authenticated caller."""

    __tablename__ = "profiles"

    subject_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    role: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    university_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    campus_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    restaurant_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
