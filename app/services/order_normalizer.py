"""Shape client order submissions into the stored order document."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from app.core.errors import ValidationFailed
from app.models.order import Order
from app.models.profile import Profile
from app.schemas.order import OrderSubmission
from app.utils.time import display_timestamp

GENDERS: frozenset[str] = frozenset({"male", "female"})


@dataclass(frozen=True)
class LegacyCartString:
    """Cart sent as a pre-formatted string only (older clients)."""

    text: str | None


@dataclass(frozen=True)
class StructuredCartItems:
    """Cart sent as line items, optionally with a display string."""

    items: list[dict[str, Any]] = field(default_factory=list)
    formatted: str | None = None


CartInput = Union[LegacyCartString, StructuredCartItems]


def parse_cart(cart_items: str | list[dict[str, Any]] | None, formatted: str | None = None) -> CartInput:
    if isinstance(cart_items, list):
        return StructuredCartItems(items=[dict(item) for item in cart_items], formatted=formatted or None)
    return LegacyCartString(text=formatted or cart_items or None)


def normalize_cart(cart: CartInput) -> tuple[str | None, list[dict[str, Any]]]:
    """Return ``(display string, structured items)``.

    String-only carts have no structured items, so restaurant views of those
    orders show the whole cart.
    """
    if isinstance(cart, StructuredCartItems):
        display = cart.formatted or json.dumps(cart.items, ensure_ascii=False, separators=(",", ":"))
        return display, cart.items
    return cart.text, []


def dedupe_restaurant_names(names: list[Any] | None) -> list[str] | None:
    """Trimmed, de-duplicated names in first-seen order; ``None`` when empty."""
    if not names:
        return None
    seen: list[str] = []
    for raw in names:
        if raw is None:
            continue
        name = str(raw).strip()
        if name and name not in seen:
            seen.append(name)
    return seen or None


def _text(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _to_int(value: Any) -> int | None:
    number = _to_decimal(value)
    if number is None or number != number.to_integral_value():
        return None
    return int(number)


def normalize_order(
    submission: OrderSubmission,
    *,
    profile: Profile,
    identity_email: str | None,
    now: datetime,
    tz_name: str,
) -> Order:
    """Build an unsaved ``Order`` from a submission already cleared by policy."""
    first_name = _text(submission.first_name)
    phone = _text(submission.phone)
    gender = (_text(submission.gender) or "").lower()
    grand_total_raw = submission.grand_total

    if not first_name or not phone or not gender or grand_total_raw is None or grand_total_raw == "":
        raise ValidationFailed()
    if gender not in GENDERS:
        raise ValidationFailed("gender must be 'male' or 'female'")
    grand_total = _to_decimal(grand_total_raw)
    if grand_total is None:
        raise ValidationFailed("grandTotal must be a number")

    display_cart, structured_cart = normalize_cart(
        parse_cart(submission.cart_items, _text(submission.cart_items_formatted))
    )

    return Order(
        university_id=_text(submission.university_id) or profile.university_id,
        university_name=_text(submission.university_name),
        campus_id=profile.campus_id,
        campus_name=_text(submission.campus_name),
        first_name=first_name,
        last_name=_text(submission.last_name),
        phone=phone,
        email=_text(submission.email) or identity_email or profile.email,
        gender=gender,
        persons=_to_int(submission.persons),
        delivery_charge=_to_decimal(submission.delivery_charge),
        item_total=_to_decimal(submission.item_total),
        grand_total=grand_total,
        cart_items=display_cart,
        cart_items_array=structured_cart,
        restaurant_names=dedupe_restaurant_names(submission.restaurant_names),
        timestamp=display_timestamp(now, tz_name),
        account_title=_text(submission.account_title),
        bank_name=_text(submission.bank_name),
        screenshot_url=_text(submission.screenshot_url),
        special_instruction=_text(submission.special_instruction),
        created_at=now,
        status="pending",
    )
