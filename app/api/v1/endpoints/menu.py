"""Menu item endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.errors import ValidationFailed
from app.core.security import get_current_profile
from app.db.session import get_db
from app.models.catalog import MenuItem
from app.models.profile import Profile
from app.schemas.catalog import MenuItemBulkCreate, MenuItemBulkResult, MenuItemCreate, MenuItemRead, MenuItemUpdate
from app.services.catalog_service import (
    bulk_create_menu_items,
    create_menu_item,
    list_menu_items,
    resolve_menu_restaurant,
    update_menu_item,
)
from app.services.order_policy import can_manage_campus, enforce
from app.services.reference_service import get_by_identifier

router: APIRouter = APIRouter()


@router.get("", response_model=list[MenuItemRead])
def get_menu_items(
    restaurant_id: str | None = Query(default=None, alias="restaurantId"),
    campus_id: str | None = Query(default=None, alias="campusId"),
    db: Session = Depends(get_db),
) -> list[MenuItem]:
    return list_menu_items(db, restaurant_id=restaurant_id, campus_id=campus_id)


@router.post("", response_model=MenuItemRead, status_code=status.HTTP_201_CREATED)
def post_menu_item(
    payload: MenuItemCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> MenuItem:
    enforce(can_manage_campus(current_profile, payload.campus_id))
    return create_menu_item(db, payload)


@router.post("/bulk", response_model=MenuItemBulkResult, status_code=status.HTTP_201_CREATED)
def post_menu_items_bulk(
    payload: MenuItemBulkCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> MenuItemBulkResult:
    """Insert many items for one restaurant; entries without a name or positive price are skipped."""
    if not payload.restaurant_id or not payload.campus_id:
        raise ValidationFailed("restaurantId and campusId are required")
    enforce(can_manage_campus(current_profile, payload.campus_id))
    restaurant = resolve_menu_restaurant(db, payload.restaurant_id, payload.campus_id)
    inserted = bulk_create_menu_items(db, restaurant, payload.items or [])
    return MenuItemBulkResult(inserted_count=inserted)


@router.patch("/{item_id}", response_model=MenuItemRead)
def patch_menu_item(
    item_id: str,
    payload: MenuItemUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> MenuItem:
    item = get_by_identifier(db, MenuItem, item_id, "Menu item")
    enforce(can_manage_campus(current_profile, item.campus_id))
    return update_menu_item(db, item, payload)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_menu_item(
    item_id: str,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Response:
    item = get_by_identifier(db, MenuItem, item_id, "Menu item")
    enforce(can_manage_campus(current_profile, item.campus_id))
    db.delete(item)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
