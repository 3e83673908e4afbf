"""Order endpoints."""

from fastapi import APIRouter, Depends, Query, status

from app.core.config import settings
from app.core.security import Identity, get_current_profile, get_identity
from app.models.order import Order
from app.models.profile import Profile
from app.schemas.order import OrderCreated, OrderRead, OrderStatusUpdate, OrderSubmission, RestaurantOrderRead
from app.services.order_service import (
    list_all_orders,
    list_orders,
    list_restaurant_orders,
    submit_order,
    update_order_status,
)
from app.services.order_store import OrderStore, get_order_store
from app.services.recaptcha import RecaptchaVerifier, get_recaptcha_verifier

router: APIRouter = APIRouter()


@router.post("", response_model=OrderCreated, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderSubmission,
    identity: Identity = Depends(get_identity),
    current_profile: Profile = Depends(get_current_profile),
    store: OrderStore = Depends(get_order_store),
    recaptcha: RecaptchaVerifier = Depends(get_recaptcha_verifier),
) -> OrderCreated:
    """Place an order for the caller's own campus."""
    order_id = submit_order(payload, identity=identity, profile=current_profile, store=store, recaptcha=recaptcha)
    return OrderCreated(id=order_id)


@router.get("", response_model=list[OrderRead])
def get_orders(
    campus_id: str | None = Query(default=None, alias="campusId"),
    status_value: str | None = Query(default=None, alias="status"),
    limit: int = Query(default=settings.orders_list_limit, ge=1),
    current_profile: Profile = Depends(get_current_profile),
    store: OrderStore = Depends(get_order_store),
) -> list[Order]:
    """Campus admins see their campus; super admins see every campus."""
    return list_orders(current_profile, store, campus_id=campus_id, status=status_value, limit=limit)


@router.get("/all", response_model=list[OrderRead])
def get_all_orders(
    limit: int = Query(default=settings.orders_all_limit, ge=1),
    current_profile: Profile = Depends(get_current_profile),
    store: OrderStore = Depends(get_order_store),
) -> list[Order]:
    return list_all_orders(current_profile, store, limit=limit)


@router.get("/restaurant/{restaurant_id}", response_model=list[RestaurantOrderRead])
def get_restaurant_orders(
    restaurant_id: str,
    limit: int = Query(default=settings.orders_all_limit, ge=1),
    current_profile: Profile = Depends(get_current_profile),
    store: OrderStore = Depends(get_order_store),
) -> list[RestaurantOrderRead]:
    """Orders containing the manager's restaurant, trimmed to its items."""
    return list_restaurant_orders(current_profile, store, restaurant_id, limit=limit)


@router.patch("/{order_id}", response_model=OrderRead)
def patch_order_status(
    order_id: str,
    payload: OrderStatusUpdate | None = None,
    current_profile: Profile = Depends(get_current_profile),
    store: OrderStore = Depends(get_order_store),
) -> Order:
    return update_order_status(current_profile, store, order_id, payload.status if payload else None)
