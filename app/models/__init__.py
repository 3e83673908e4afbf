"""Application models package."""

from app.models.audit_log import AuditLog
from app.models.campus import Campus, CampusSetting, University
from app.models.catalog import MartItem, MenuItem
from app.models.order import ORDER_STATUSES, Order, OrderRestaurantLink
from app.models.profile import USER_ROLES, Profile
from app.models.restaurant import Restaurant

__all__ = [
    "AuditLog", "Campus", "CampusSetting", "University", "MartItem", "MenuItem", "Order", "OrderRestaurantLink",
    "ORDER_STATUSES", "Profile", "USER_ROLES", "Restaurant",
]
