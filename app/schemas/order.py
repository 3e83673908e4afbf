"""Order API schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, coerce_scalar_to_text


class OrderSubmission(CamelModel):
    """Order as submitted by the checkout page.

    Every field is optional here; required fields are enforced by the order
    normalizer so that a missing field is reported as a 400, not a schema error.
    """

    university_id: str | None = None
    campus_id: str | None = None
    university_name: str | None = None
    campus_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: str | None = None
    gender: str | None = None
    persons: Any = None
    delivery_charge: Any = None
    item_total: Any = None
    grand_total: Any = None
    cart_items: str | list[dict[str, Any]] | None = None
    cart_items_formatted: str | None = None
    restaurant_names: list[Any] | None = None
    account_title: str | None = None
    bank_name: str | None = None
    screenshot_url: str | None = Field(default=None, alias="screenshotURL")
    special_instruction: str | None = None
    recaptcha_token: str | None = None

    @field_validator(
        "university_id",
        "campus_id",
        "first_name",
        "last_name",
        "phone",
        "account_title",
        "bank_name",
        mode="before",
    )
    @classmethod
    def _accept_numbers_as_text(cls, value: Any) -> Any:
        return coerce_scalar_to_text(value)


class OrderCreated(CamelModel):
    id: str


class OrderStatusUpdate(CamelModel):
    status: str | None = None


class OrderRead(CamelModel):
    """Stored order as returned to admins and restaurant managers."""

    id: str
    university_id: str | None = None
    university_name: str | None = None
    campus_id: str
    campus_name: str | None = None
    first_name: str
    last_name: str | None = None
    phone: str
    email: str | None = None
    gender: str
    persons: int | None = None
    delivery_charge: float | None = None
    item_total: float | None = None
    grand_total: float
    cart_items: str | None = None
    cart_items_array: list[dict[str, Any]] = Field(default_factory=list)
    restaurant_names: list[str] | None = None
    timestamp: str | None = None
    account_title: str | None = None
    bank_name: str | None = None
    screenshot_url: str | None = Field(default=None, alias="screenshotURL")
    special_instruction: str | None = None
    created_at: datetime
    status: str


class RestaurantOrderRead(OrderRead):
    """Order trimmed to one restaurant's line items."""

    cart_items: list[dict[str, Any]] | str | None = None
    items_total: float = 0.0
