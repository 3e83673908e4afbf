"""Restaurant-scoped order view tests."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from app import main as main_module
from app.core.config import settings
from app.db import session as db_session
from app.db.base import Base
from app.main import app
from app.models import Order, Profile, Restaurant
from app.services.order_store import OrderStore

BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)
BISTRO_ID = "0b7f2d6e4c1a4f0e9d3b8a2c5e6f7a81"


def _prepare_db(tmp_path: Path, monkeypatch):
    engine = create_engine(f"sqlite:///{tmp_path / 'restaurant_orders.db'}", connect_args={"check_same_thread": False})
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    monkeypatch.setattr(main_module, "engine", engine)
    monkeypatch.setattr(main_module, "SessionLocal", testing_session_local)
    return testing_session_local


def _headers(subject: str) -> dict[str, str]:
    token = jwt.encode({"sub": subject}, settings.identity_jwt_key, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}


def _order(minutes: int, **fields) -> Order:
    return Order(
        campus_id="campus-a",
        first_name="Student",
        phone="0300",
        gender="male",
        grand_total=Decimal("1000"),
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **fields,
    )


def _seed(session_local) -> None:
    with session_local() as db:
        db.add_all(
            [
                Restaurant(id=BISTRO_ID, campus_id="campus-a", university_id="uni-1", name="Bistro"),
                Restaurant(id="cafe-legacy", campus_id="campus-a", university_id="uni-1", name="Cafe"),
                Profile(subject_id="bistro-manager", role="restaurantManager", campus_id="campus-a", restaurant_id=BISTRO_ID),
                Profile(subject_id="ghost-manager", role="restaurantManager", campus_id="campus-a", restaurant_id="closed-1"),
                Profile(subject_id="admin-a", role="campusAdmin", campus_id="campus-a"),
            ]
        )
        db.commit()

        store = OrderStore(db)
        store.insert(
            _order(
                0,
                cart_items="mixed",
                cart_items_array=[
                    {"name": "Pasta", "price": 300, "quantity": 2, "restaurantId": BISTRO_ID, "restaurantName": "Bistro"},
                    {"name": "Latte", "price": 200, "quantity": 1, "restaurantId": "cafe-legacy", "restaurantName": "Cafe"},
                ],
                item_total=Decimal("800"),
            )
        )
        store.insert(
            _order(
                10,
                cart_items="Soup x1 (Bistro)",
                cart_items_array=[],
                restaurant_names=["Bistro"],
                item_total=Decimal("250"),
            )
        )
        store.insert(
            _order(
                20,
                cart_items="Latte x3",
                cart_items_array=[{"name": "Latte", "price": 200, "quantity": 3, "restaurantId": "cafe-legacy"}],
                item_total=Decimal("600"),
            )
        )


def test_manager_sees_only_own_lines(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        response = client.get(f"/api/v1/orders/restaurant/{BISTRO_ID}", headers=_headers("bistro-manager"))

    assert response.status_code == 200
    orders = response.json()
    assert len(orders) == 2

    legacy, structured = orders
    assert legacy["cartItems"] == "Soup x1 (Bistro)"
    assert legacy["itemsTotal"] == 250.0

    assert [item["name"] for item in structured["cartItems"]] == ["Pasta"]
    assert [item["name"] for item in structured["cartItemsArray"]] == ["Pasta"]
    assert structured["itemsTotal"] == 600.0
    assert structured["grandTotal"] == 1000.0


def test_manager_cannot_view_another_restaurant(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        response = client.get("/api/v1/orders/restaurant/cafe-legacy", headers=_headers("bistro-manager"))

    assert response.status_code == 403


def test_campus_admin_cannot_use_restaurant_view(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        response = client.get(f"/api/v1/orders/restaurant/{BISTRO_ID}", headers=_headers("admin-a"))

    assert response.status_code == 403


def test_missing_restaurant_is_404(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        response = client.get("/api/v1/orders/restaurant/closed-1", headers=_headers("ghost-manager"))

    assert response.status_code == 404
    assert response.json()["detail"] == "Restaurant not found"


def test_manager_can_update_every_order_in_own_view(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)
    with session_local() as db:
        hyphenated_id = OrderStore(db).insert(
            _order(
                30,
                cart_items="Pasta x1",
                cart_items_array=[
                    {"name": "Pasta", "price": 300, "quantity": 1, "restaurantId": str(uuid.UUID(BISTRO_ID))}
                ],
                item_total=Decimal("300"),
            )
        )
        cafe_only_id = db.scalars(select(Order.id).where(Order.cart_items == "Latte x3")).one()

    with TestClient(app) as client:
        view = client.get(f"/api/v1/orders/restaurant/{BISTRO_ID}", headers=_headers("bistro-manager"))
        visible_ids = [order["id"] for order in view.json()]
        updates = [
            client.patch(f"/api/v1/orders/{order_id}", json={"status": "preparing"}, headers=_headers("bistro-manager"))
            for order_id in visible_ids
        ]
        foreign = client.patch(
            f"/api/v1/orders/{cafe_only_id}", json={"status": "cancelled"}, headers=_headers("bistro-manager")
        )

    assert view.status_code == 200
    assert len(visible_ids) == 3
    assert visible_ids[0] == hyphenated_id
    assert [response.status_code for response in updates] == [200, 200, 200]
    assert foreign.status_code == 404
    with session_local() as db:
        statuses = {order.id: order.status for order in db.scalars(select(Order))}
    assert all(statuses[order_id] == "preparing" for order_id in visible_ids)
    assert statuses[cafe_only_id] == "pending"
