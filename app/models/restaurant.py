"""Restaurant ORM model."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.utils.identifiers import new_record_id


class Restaurant(Base):
    """Restaurant operating on one campus."""

    __tablename__ = "restaurants"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_record_id)
    campus_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    university_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    cuisine: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    open_time: Mapped[str] = mapped_column(String(16), nullable=False, default="10:00 AM")
    close_time: Mapped[str] = mapped_column(String(16), nullable=False, default="10:00 PM")
    is_24x7: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
