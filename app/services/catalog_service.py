"""Menu item and mart item helpers shared by the catalog endpoints."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.core.errors import ValidationFailed
from app.models.catalog import MartItem, MenuItem
from app.models.restaurant import Restaurant
from app.schemas.catalog import MartItemCreate, MartItemUpdate, MenuItemCreate, MenuItemUpdate
from app.services.reference_service import find_by_identifier, parse_positive_price
from app.utils.time import utc_now

logger = logging.getLogger(__name__)


def _clean(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _parse_stock(value: Any) -> int:
    if value is None or value == "":
        return 0
    try:
        stock = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationFailed("Stock must be a whole number") from exc
    if stock < 0:
        raise ValidationFailed("Stock cannot be negative")
    return stock


def list_menu_items(db: Session, restaurant_id: str | None = None, campus_id: str | None = None) -> list[MenuItem]:
    query = db.query(MenuItem)
    if restaurant_id:
        query = query.filter(MenuItem.restaurant_id == restaurant_id)
    if campus_id:
        query = query.filter(MenuItem.campus_id == campus_id)
    return query.order_by(MenuItem.name.asc(), MenuItem.id.asc()).all()


def resolve_menu_restaurant(db: Session, restaurant_id: str, campus_id: str) -> Restaurant:
    """Return the restaurant a menu item is filed under, checking it sits on ``campus_id``."""
    restaurant = find_by_identifier(db, Restaurant, restaurant_id)
    if restaurant is None:
        raise ValidationFailed("Restaurant not found")
    if restaurant.campus_id != campus_id:
        raise ValidationFailed("Restaurant does not belong to this campus")
    return restaurant


def build_menu_item(restaurant: Restaurant, raw: dict[str, Any]) -> MenuItem | None:
    """Menu item from a loose payload, or ``None`` when name or price is unusable."""
    name = _clean(raw.get("name"))
    price = parse_positive_price(raw.get("price"))
    if not name or price is None:
        return None
    is_available = raw.get("isAvailable", raw.get("is_available"))
    return MenuItem(
        restaurant_id=restaurant.id,
        campus_id=restaurant.campus_id,
        university_id=restaurant.university_id,
        name=name,
        price=price,
        photo_url=_clean(raw.get("photoURL", raw.get("photo_url"))) or None,
        description=_clean(raw.get("description")) or None,
        is_available=True if is_available is None else bool(is_available),
    )


def create_menu_item(db: Session, payload: MenuItemCreate) -> MenuItem:
    restaurant_id = _clean(payload.restaurant_id)
    campus_id = _clean(payload.campus_id)
    if not restaurant_id or not campus_id:
        raise ValidationFailed("restaurantId and campusId are required")
    restaurant = resolve_menu_restaurant(db, restaurant_id, campus_id)

    item = build_menu_item(restaurant, payload.model_dump())
    if item is None:
        raise ValidationFailed("Menu item needs a name and a price greater than 0")
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def bulk_create_menu_items(db: Session, restaurant: Restaurant, items: list[dict[str, Any]]) -> int:
    """Insert every usable item; invalid entries are skipped."""
    rows = [row for row in (build_menu_item(restaurant, raw) for raw in items if isinstance(raw, dict)) if row]
    if not rows:
        raise ValidationFailed("No valid menu items to insert")
    db.add_all(rows)
    db.commit()
    skipped = len(items) - len(rows)
    if skipped:
        logger.info("Bulk menu insert for %s skipped %s invalid items", restaurant.id, skipped)
    return len(rows)


def update_menu_item(db: Session, item: MenuItem, payload: MenuItemUpdate) -> MenuItem:
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "price" in changes:
        price = parse_positive_price(changes["price"])
        if price is None:
            raise ValidationFailed("Price must be greater than 0")
        changes["price"] = price
    if "name" in changes:
        changes["name"] = _clean(changes["name"])
        if not changes["name"]:
            raise ValidationFailed("Menu item name cannot be empty")
    for field, value in changes.items():
        setattr(item, field, value)
    item.updated_at = utc_now()
    db.commit()
    db.refresh(item)
    return item


def list_mart_items(db: Session, campus_id: str | None = None, category: str | None = None) -> list[MartItem]:
    query = db.query(MartItem)
    if campus_id:
        query = query.filter(MartItem.campus_id == campus_id)
    if category:
        query = query.filter(MartItem.category == category)
    return query.order_by(MartItem.name.asc(), MartItem.id.asc()).all()


def create_mart_item(db: Session, payload: MartItemCreate) -> MartItem:
    campus_id = _clean(payload.campus_id)
    name = _clean(payload.name)
    price = parse_positive_price(payload.price)
    if not campus_id or not name:
        raise ValidationFailed("campusId and name are required")
    if price is None:
        raise ValidationFailed("Price must be greater than 0")

    item = MartItem(
        campus_id=campus_id,
        name=name,
        price=price,
        photo_url=_clean(payload.photo_url) or None,
        description=_clean(payload.description) or None,
        category=_clean(payload.category),
        stock=_parse_stock(payload.stock),
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_mart_item(db: Session, item: MartItem, payload: MartItemUpdate) -> MartItem:
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "price" in changes:
        price = parse_positive_price(changes["price"])
        if price is None:
            raise ValidationFailed("Price must be greater than 0")
        changes["price"] = price
    if "stock" in changes:
        changes["stock"] = _parse_stock(changes["stock"])
    if "name" in changes:
        changes["name"] = _clean(changes["name"])
        if not changes["name"]:
            raise ValidationFailed("Mart item name cannot be empty")
    for field, value in changes.items():
        setattr(item, field, value)
    item.updated_at = utc_now()
    db.commit()
    db.refresh(item)
    return item
