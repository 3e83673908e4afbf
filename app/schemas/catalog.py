"""Menu item and mart item schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field

from app.schemas.common import CamelModel


class MenuItemCreate(CamelModel):
    """Payload for creating a menu item; price is validated by the endpoint."""

    restaurant_id: str | None = None
    campus_id: str | None = None
    name: str | None = None
    price: Any = None
    photo_url: str | None = Field(default=None, alias="photoURL")
    description: str | None = None
    is_available: bool | None = None


class MenuItemUpdate(CamelModel):
    name: str | None = None
    price: Any = None
    photo_url: str | None = Field(default=None, alias="photoURL")
    description: str | None = None
    is_available: bool | None = None


class MenuItemBulkCreate(CamelModel):
    restaurant_id: str | None = None
    campus_id: str | None = None
    items: list[dict[str, Any]] | None = None


class MenuItemBulkResult(CamelModel):
    inserted_count: int


class MenuItemRead(CamelModel):
    id: str
    restaurant_id: str
    campus_id: str
    university_id: str | None = None
    name: str
    price: float
    photo_url: str | None = Field(default=None, alias="photoURL")
    description: str | None = None
    is_available: bool
    created_at: datetime
    updated_at: datetime | None = None


class MartItemCreate(CamelModel):
    campus_id: str | None = None
    name: str | None = None
    price: Any = None
    photo_url: str | None = Field(default=None, alias="photoURL")
    description: str | None = None
    category: str | None = None
    stock: Any = None


class MartItemUpdate(CamelModel):
    name: str | None = None
    price: Any = None
    photo_url: str | None = Field(default=None, alias="photoURL")
    description: str | None = None
    category: str | None = None
    stock: Any = None


class MartItemRead(CamelModel):
    id: str
    campus_id: str
    name: str
    price: float
    photo_url: str | None = Field(default=None, alias="photoURL")
    description: str | None = None
    category: str
    stock: int
    created_at: datetime
    updated_at: datetime | None = None
