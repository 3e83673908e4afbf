"""Scoped order listing tests."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app import main as main_module
from app.core.config import settings
from app.db import session as db_session
from app.db.base import Base
from app.main import app
from app.models import Order, Profile

BASE_TIME = datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)


def _prepare_db(tmp_path: Path, monkeypatch):
    engine = create_engine(f"sqlite:///{tmp_path / 'order_listing.db'}", connect_args={"check_same_thread": False})
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


def _order(order_id: str, campus_id: str, minutes: int, status: str = "pending") -> Order:
    return Order(
        id=order_id,
        campus_id=campus_id,
        first_name="Student",
        phone="0300",
        gender="male",
        grand_total=Decimal("300"),
        cart_items="Tea x2",
        cart_items_array=[],
        created_at=BASE_TIME + timedelta(minutes=minutes),
        status=status,
    )


def _seed(session_local) -> None:
    with session_local() as db:
        db.add_all(
            [
                Profile(subject_id="admin-a", role="campusAdmin", campus_id="campus-a"),
                Profile(subject_id="root", role="superAdmin"),
                Profile(subject_id="student-a", role="user", campus_id="campus-a"),
                Profile(subject_id="manager-1", role="restaurantManager", campus_id="campus-a", restaurant_id="r1"),
                _order("a-old", "campus-a", 0),
                _order("a-new", "campus-a", 30, status="delivered"),
                _order("a-mid", "campus-a", 15),
                _order("b-1", "campus-b", 20),
            ]
        )
        db.commit()


def test_campus_admin_sees_own_campus_newest_first(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        response = client.get("/api/v1/orders", headers=_headers("admin-a"))

    assert response.status_code == 200
    assert [order["id"] for order in response.json()] == ["a-new", "a-mid", "a-old"]
    assert all(order["campusId"] == "campus-a" for order in response.json())


def test_campus_admin_cannot_request_other_campus(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        response = client.get("/api/v1/orders", params={"campusId": "campus-b"}, headers=_headers("admin-a"))

    assert response.status_code == 403


def test_listing_filters_by_status_and_limit(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        pending = client.get("/api/v1/orders", params={"status": "pending"}, headers=_headers("admin-a"))
        limited = client.get("/api/v1/orders", params={"limit": 1}, headers=_headers("admin-a"))

    assert [order["id"] for order in pending.json()] == ["a-mid", "a-old"]
    assert [order["id"] for order in limited.json()] == ["a-new"]


def test_super_admin_lists_any_campus(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        everything = client.get("/api/v1/orders", headers=_headers("root"))
        campus_b = client.get("/api/v1/orders", params={"campusId": "campus-b"}, headers=_headers("root"))
        all_orders = client.get("/api/v1/orders/all", headers=_headers("root"))

    assert [order["id"] for order in everything.json()] == ["a-new", "b-1", "a-mid", "a-old"]
    assert [order["id"] for order in campus_b.json()] == ["b-1"]
    assert len(all_orders.json()) == 4


def test_other_roles_cannot_list(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        student = client.get("/api/v1/orders", headers=_headers("student-a"))
        manager = client.get("/api/v1/orders", headers=_headers("manager-1"))
        admin_all = client.get("/api/v1/orders/all", headers=_headers("admin-a"))

    assert student.status_code == 403
    assert manager.status_code == 403
    assert admin_all.status_code == 403


def test_listing_is_repeatable(tmp_path: Path, monkeypatch) -> None:
    session_local = _prepare_db(tmp_path, monkeypatch)
    _seed(session_local)

    with TestClient(app) as client:
        first = client.get("/api/v1/orders", headers=_headers("admin-a"))
        second = client.get("/api/v1/orders", headers=_headers("admin-a"))

    assert first.json() == second.json()
