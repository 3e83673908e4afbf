"""Order submission pipeline and scoped order views."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from app.core.config import settings
from app.core.errors import NotFound, ValidationFailed
from app.core.security import Identity
from app.models.order import ORDER_STATUSES, Order
from app.models.profile import Profile
from app.models.restaurant import Restaurant
from app.schemas.order import OrderRead, OrderSubmission, RestaurantOrderRead
from app.services.audit_service import log_action, order_snapshot
from app.services.order_normalizer import normalize_order
from app.services.order_policy import (
    OrderScope,
    can_create_order,
    can_list_all,
    can_list_orders,
    can_update_status,
    can_view_restaurant_orders,
    enforce,
    is_restaurant_manager,
    order_list_scope,
    restaurant_scope,
    status_update_scope,
)
from app.services.order_store import OrderStore
from app.services.recaptcha import RecaptchaVerifier
from app.services.reference_service import find_by_identifier, get_by_identifier
from app.utils.identifiers import IdentifierLookup
from app.utils.time import utc_now

logger = logging.getLogger(__name__)


def submit_order(
    submission: OrderSubmission,
    *,
    identity: Identity,
    profile: Profile,
    store: OrderStore,
    recaptcha: RecaptchaVerifier,
    now: datetime | None = None,
) -> str:
    """Verify, authorize, normalize and insert one order; return its id."""
    recaptcha.verify(submission.recaptcha_token)
    denial = can_create_order(profile, submission.campus_id)
    if denial is not None:
        logger.info("Order refused for %s: %s", profile.subject_id, denial.code)
    enforce(denial)

    order = normalize_order(
        submission,
        profile=profile,
        identity_email=identity.email,
        now=now or utc_now(),
        tz_name=settings.order_timezone,
    )
    order_id = store.insert(order)
    log_action(store.db, actor=profile, action_type="order_created", order_id=order_id, after_snapshot=order_snapshot(order))
    return order_id


def list_orders(
    profile: Profile,
    store: OrderStore,
    *,
    campus_id: str | None = None,
    status: str | None = None,
    limit: int = 50,
) -> list[Order]:
    enforce(can_list_orders(profile, campus_id))
    return store.find(order_list_scope(profile, campus_id), status=status, limit=limit)


def list_all_orders(profile: Profile, store: OrderStore, *, limit: int = 1000) -> list[Order]:
    enforce(can_list_all(profile))
    return store.find(OrderScope(), limit=limit)


def update_order_status(profile: Profile, store: OrderStore, order_id: str, status: str | None) -> Order:
    enforce(can_update_status(profile))
    if not status:
        raise ValidationFailed("Missing status")
    if status not in ORDER_STATUSES:
        raise ValidationFailed(f"Unknown status: {status}")

    restaurant = None
    if is_restaurant_manager(profile):
        restaurant = find_by_identifier(store.db, Restaurant, profile.restaurant_id)
    scope = status_update_scope(profile, restaurant)
    lookup = IdentifierLookup.parse(order_id)

    current = store.find_one(lookup, scope)
    if current is None:
        raise NotFound("Order not found")
    before = order_snapshot(current)

    order = store.update_status(lookup, scope, status)
    log_action(
        store.db,
        actor=profile,
        action_type="order_status_updated",
        order_id=order.id,
        before_snapshot=before,
        after_snapshot=order_snapshot(order),
    )
    return order


def _item_matches(item: dict[str, Any], restaurant_ids: tuple[str, ...], restaurant_name: str | None) -> bool:
    item_id = item.get("restaurantId")
    if item_id is not None and str(item_id) in restaurant_ids:
        return True
    return bool(restaurant_name) and item.get("restaurantName") == restaurant_name


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def line_total(item: dict[str, Any]) -> float:
    return _as_float(item.get("price")) * _as_float(item.get("quantity"))


def restaurant_order_view(order: Order, scope: OrderScope) -> RestaurantOrderRead:
    """Order as one restaurant sees it.

    Structured carts are cut down to that restaurant's lines and re-totalled.
    String-only carts are returned whole with the order's item total.
    """
    fields = OrderRead.model_validate(order).model_dump()
    if order.cart_items_array:
        items = [
            item
            for item in order.cart_items_array
            if _item_matches(item, scope.restaurant_ids, scope.restaurant_name)
        ]
        fields.update(cart_items=items, cart_items_array=items, items_total=sum(line_total(item) for item in items))
    else:
        fields.update(items_total=float(order.item_total or 0))
    return RestaurantOrderRead(**fields)


def list_restaurant_orders(
    profile: Profile,
    store: OrderStore,
    restaurant_id: str,
    *,
    limit: int = 1000,
) -> list[RestaurantOrderRead]:
    enforce(can_view_restaurant_orders(profile, restaurant_id))
    restaurant = get_by_identifier(store.db, Restaurant, restaurant_id, "Restaurant")

    scope = restaurant_scope(restaurant_id, restaurant)
    return [restaurant_order_view(order, scope) for order in store.find(scope, limit=limit)]
