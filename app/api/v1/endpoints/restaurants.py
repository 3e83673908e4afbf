"""Restaurant endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import ValidationFailed
from app.core.security import get_current_profile
from app.db.session import get_db
from app.models.campus import Campus
from app.models.profile import Profile
from app.models.restaurant import Restaurant
from app.schemas.reference import RestaurantCreate, RestaurantRead, RestaurantUpdate
from app.services.order_policy import can_manage_campus, enforce
from app.services.reference_service import find_by_identifier, get_by_identifier

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[RestaurantRead])
def list_restaurants(
    campus_id: str | None = Query(default=None, alias="campusId"),
    db: Session = Depends(get_db),
) -> list[Restaurant]:
    stmt = select(Restaurant).order_by(Restaurant.name)
    if campus_id:
        stmt = stmt.where(Restaurant.campus_id == campus_id)
    return list(db.scalars(stmt).all())


@router.get("/{restaurant_id}", response_model=RestaurantRead)
def get_restaurant(restaurant_id: str, db: Session = Depends(get_db)) -> Restaurant:
    return get_by_identifier(db, Restaurant, restaurant_id, "Restaurant")


@router.post("", response_model=RestaurantRead, status_code=status.HTTP_201_CREATED)
def create_restaurant(
    payload: RestaurantCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Restaurant:
    enforce(can_manage_campus(current_profile, payload.campus_id))
    campus = find_by_identifier(db, Campus, payload.campus_id)
    if campus is None:
        raise ValidationFailed("Campus not found")
    if campus.university_id != payload.university_id:
        raise ValidationFailed("Campus does not belong to this university")

    restaurant = Restaurant(
        campus_id=payload.campus_id,
        university_id=payload.university_id,
        name=payload.name.strip(),
        location=(payload.location or "").strip(),
        cuisine=(payload.cuisine or "").strip(),
        open_time=payload.open_time or "10:00 AM",
        close_time=payload.close_time or "10:00 PM",
        is_24x7=True if payload.is_24x7 is None else payload.is_24x7,
    )
    db.add(restaurant)
    db.commit()
    db.refresh(restaurant)
    logger.info("Restaurant %s created on campus %s", restaurant.id, restaurant.campus_id)
    return restaurant


@router.patch("/{restaurant_id}", response_model=RestaurantRead)
def update_restaurant(
    restaurant_id: str,
    payload: RestaurantUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Restaurant:
    restaurant = get_by_identifier(db, Restaurant, restaurant_id, "Restaurant")
    enforce(can_manage_campus(current_profile, restaurant.campus_id))

    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in changes:
        name = changes["name"].strip()
        if not name:
            raise ValidationFailed("Restaurant name cannot be empty")
        changes["name"] = name
    for field, value in changes.items():
        setattr(restaurant, field, value)
    db.commit()
    db.refresh(restaurant)
    return restaurant


@router.delete("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_restaurant(
    restaurant_id: str,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Response:
    restaurant = get_by_identifier(db, Restaurant, restaurant_id, "Restaurant")
    enforce(can_manage_campus(current_profile, restaurant.campus_id))
    db.delete(restaurant)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
