"""Access matrix for orders and campus-owned reference data.

Each predicate takes the caller's profile and returns ``None`` when the
operation is allowed, or a ``Denial`` naming why it is not. Scopes are always
derived from the profile; client-supplied campus or restaurant ids only pick
a narrower view for callers already entitled to it.

| Operation                 | Allowed                                          |
|---------------------------|--------------------------------------------------|
| create order              | user, campusAdmin, restaurantManager, own campus |
| list orders               | campusAdmin (own campus), superAdmin (any)       |
| list all orders           | superAdmin                                       |
| update order status       | campusAdmin, restaurantManager (never superAdmin)|
| list restaurant orders    | restaurantManager, own restaurant only           |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from app.core.errors import CampusMismatch, Forbidden
from app.utils.identifiers import IdentifierLookup

USER = "user"
CAMPUS_ADMIN = "campusAdmin"
SUPER_ADMIN = "superAdmin"
RESTAURANT_MANAGER = "restaurantManager"

ORDERING_ROLES: frozenset[str] = frozenset({USER, CAMPUS_ADMIN, RESTAURANT_MANAGER})
STATUS_UPDATE_ROLES: frozenset[str] = frozenset({CAMPUS_ADMIN, RESTAURANT_MANAGER})


class CallerProfile(Protocol):
    role: str
    campus_id: str | None
    restaurant_id: str | None


class RestaurantRecord(Protocol):
    id: str
    name: str


@dataclass(frozen=True)
class Denial:
    code: str
    message: str

    def to_error(self) -> Forbidden:
        if self.code == CampusMismatch.code:
            return CampusMismatch(self.message)
        return Forbidden(self.message, code=self.code)


@dataclass(frozen=True)
class OrderScope:
    """Restriction applied to order queries and updates; empty means global.

    A restaurant restriction matches orders linked to any of ``restaurant_ids``
    or, when set, to ``restaurant_name``.
    """

    campus_id: str | None = None
    restaurant_ids: tuple[str, ...] = ()
    restaurant_name: str | None = None

    @property
    def is_restaurant_scoped(self) -> bool:
        return bool(self.restaurant_ids) or bool(self.restaurant_name)


def enforce(denial: Denial | None) -> None:
    if denial is not None:
        raise denial.to_error()


def is_super_admin(profile: CallerProfile) -> bool:
    return profile.role == SUPER_ADMIN


def is_campus_admin(profile: CallerProfile) -> bool:
    return profile.role == CAMPUS_ADMIN


def is_restaurant_manager(profile: CallerProfile) -> bool:
    return profile.role == RESTAURANT_MANAGER


def can_create_order(profile: CallerProfile, campus_id: str | None) -> Denial | None:
    if profile.role not in ORDERING_ROLES:
        return Denial("forbidden", "Your role cannot place orders")
    if not profile.campus_id:
        return Denial("no_campus_assigned", "No campus assigned to user profile")
    if not campus_id or campus_id != profile.campus_id:
        return Denial(CampusMismatch.code, CampusMismatch.default_message)
    return None


def can_list_orders(profile: CallerProfile, requested_campus_id: str | None = None) -> Denial | None:
    if is_super_admin(profile):
        return None
    if is_campus_admin(profile) and profile.campus_id:
        if requested_campus_id and requested_campus_id != profile.campus_id:
            return Denial("forbidden", "You can only view orders for your assigned campus")
        return None
    return Denial("forbidden", "Campus admin or super admin only")


def can_list_all(profile: CallerProfile) -> Denial | None:
    if is_super_admin(profile):
        return None
    return Denial("forbidden", "Super admin only")


def can_update_status(profile: CallerProfile) -> Denial | None:
    if is_super_admin(profile):
        return Denial(
            "forbidden",
            "Super admins cannot update order status. Only campus admins and restaurant managers can update orders.",
        )
    if profile.role not in STATUS_UPDATE_ROLES:
        return Denial("forbidden", "Unauthorized")
    if is_campus_admin(profile) and not profile.campus_id:
        return Denial("no_campus_assigned", "No campus assigned to user profile")
    if is_restaurant_manager(profile) and not profile.restaurant_id:
        return Denial("no_restaurant_assigned", "No restaurant assigned to user profile")
    return None


def can_view_restaurant_orders(profile: CallerProfile, restaurant_id: str) -> Denial | None:
    if not is_restaurant_manager(profile):
        return Denial("forbidden", "Restaurant manager only")
    if not profile.restaurant_id or profile.restaurant_id != restaurant_id:
        return Denial("forbidden", "You can only access orders for your assigned restaurant")
    return None


def can_manage_platform(profile: CallerProfile) -> Denial | None:
    if is_super_admin(profile):
        return None
    return Denial("forbidden", "Super admin only")


def can_manage_campus(profile: CallerProfile, campus_id: str | None) -> Denial | None:
    """Writes to campus-owned records (restaurants, menu and mart items)."""
    if is_super_admin(profile):
        return None
    if is_campus_admin(profile) and profile.campus_id and profile.campus_id == campus_id:
        return None
    return Denial("forbidden", "Not allowed for this campus")


def can_view_campus_settings(profile: CallerProfile, campus_id: str) -> Denial | None:
    if is_campus_admin(profile) and profile.campus_id != campus_id:
        return Denial("forbidden", "You can only view settings for your assigned campus")
    return None


def order_list_scope(profile: CallerProfile, requested_campus_id: str | None = None) -> OrderScope:
    """Scope for the list-orders view; call after ``can_list_orders``."""
    if is_super_admin(profile):
        return OrderScope(campus_id=requested_campus_id or None)
    return OrderScope(campus_id=profile.campus_id)


def restaurant_scope(restaurant_ref: str, restaurant: RestaurantRecord | None = None) -> OrderScope:
    """Orders linked to a restaurant by either id encoding or, once resolved, by name."""
    ids = list(IdentifierLookup.parse(restaurant_ref).candidates)
    if restaurant is not None and restaurant.id not in ids:
        ids.append(restaurant.id)
    return OrderScope(restaurant_ids=tuple(ids), restaurant_name=restaurant.name if restaurant is not None else None)


def status_update_scope(profile: CallerProfile, restaurant: RestaurantRecord | None = None) -> OrderScope:
    """Scope for status updates; call after ``can_update_status``.

    Restaurant managers get the same scope as their restaurant order view.
    """
    if is_restaurant_manager(profile):
        return restaurant_scope(profile.restaurant_id, restaurant)
    return OrderScope(campus_id=profile.campus_id)
