"""Schema exports."""

from app.schemas.auth import ProfileCreate, ProfileRead
from app.schemas.campus_setting import CampusSettingRead, CampusSettingUpsert
from app.schemas.catalog import (
    MartItemCreate,
    MartItemRead,
    MartItemUpdate,
    MenuItemBulkCreate,
    MenuItemBulkResult,
    MenuItemCreate,
    MenuItemRead,
    MenuItemUpdate,
)
from app.schemas.order import OrderCreated, OrderRead, OrderStatusUpdate, OrderSubmission, RestaurantOrderRead
from app.schemas.reference import (
    CampusCreate,
    CampusRead,
    CampusUpdate,
    RestaurantCreate,
    RestaurantRead,
    RestaurantUpdate,
    UniversityCreate,
    UniversityRead,
    UniversityUpdate,
)

__all__ = [
    "ProfileCreate",
    "ProfileRead",
    "CampusSettingRead",
    "CampusSettingUpsert",
    "MartItemCreate",
    "MartItemRead",
    "MartItemUpdate",
    "MenuItemBulkCreate",
    "MenuItemBulkResult",
    "MenuItemCreate",
    "MenuItemRead",
    "MenuItemUpdate",
    "OrderCreated",
    "OrderRead",
    "OrderStatusUpdate",
    "OrderSubmission",
    "RestaurantOrderRead",
    "CampusCreate",
    "CampusRead",
    "CampusUpdate",
    "RestaurantCreate",
    "RestaurantRead",
    "RestaurantUpdate",
    "UniversityCreate",
    "UniversityRead",
    "UniversityUpdate",
]
