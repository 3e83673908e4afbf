"""Mart item endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.security import get_current_profile
from app.db.session import get_db
from app.models.catalog import MartItem
from app.models.profile import Profile
from app.schemas.catalog import MartItemCreate, MartItemRead, MartItemUpdate
from app.services.catalog_service import create_mart_item, list_mart_items, update_mart_item
from app.services.order_policy import can_manage_campus, enforce
from app.services.reference_service import get_by_identifier

router: APIRouter = APIRouter()


@router.get("", response_model=list[MartItemRead])
def get_mart_items(
    campus_id: str | None = Query(default=None, alias="campusId"),
    category: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[MartItem]:
    return list_mart_items(db, campus_id=campus_id, category=category)


@router.post("", response_model=MartItemRead, status_code=status.HTTP_201_CREATED)
def post_mart_item(
    payload: MartItemCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> MartItem:
    enforce(can_manage_campus(current_profile, payload.campus_id))
    return create_mart_item(db, payload)


@router.patch("/{item_id}", response_model=MartItemRead)
def patch_mart_item(
    item_id: str,
    payload: MartItemUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> MartItem:
    item = get_by_identifier(db, MartItem, item_id, "Mart item")
    enforce(can_manage_campus(current_profile, item.campus_id))
    return update_mart_item(db, item, payload)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_mart_item(
    item_id: str,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Response:
    item = get_by_identifier(db, MartItem, item_id, "Mart item")
    enforce(can_manage_campus(current_profile, item.campus_id))
    db.delete(item)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
