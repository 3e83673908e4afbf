"""Authenticated caller schemas."""

from app.schemas.common import CamelModel


class ProfileRead(CamelModel):
    """Profile of the authenticated caller."""

    subject_id: str
    role: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    university_id: str | None = None
    campus_id: str | None = None
    restaurant_id: str | None = None


class ProfileCreate(CamelModel):
    subject_id: str | None = None
    role: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    university_id: str | None = None
    campus_id: str | None = None
    restaurant_id: str | None = None
