"""University, campus and restaurant endpoint tests."""

import uuid
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
from app.models import Campus, Profile


def _prepare_db(tmp_path: Path, monkeypatch):
    engine = create_engine(f"sqlite:///{tmp_path / 'reference.db'}", connect_args={"check_same_thread": False})
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    monkeypatch.setattr(main_module, "engine", engine)
    monkeypatch.setattr(main_module, "SessionLocal", testing_session_local)
    with testing_session_local() as db:
        db.add_all(
            [
                Campus(id="campus-a", university_id="uni-1", name="Main Campus"),
                Profile(subject_id="root", role="superAdmin"),
                Profile(subject_id="admin-a", role="campusAdmin", campus_id="campus-a"),
                Profile(subject_id="student-a", role="user", campus_id="campus-a"),
            ]
        )
        db.commit()
    return testing_session_local


def _headers(subject: str) -> dict[str, str]:
    token = jwt.encode({"sub": subject}, settings.identity_jwt_key, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}


def test_university_lifecycle(tmp_path: Path, monkeypatch) -> None:
    _prepare_db(tmp_path, monkeypatch)

    with TestClient(app) as client:
        created = client.post("/api/v1/universities", json={"name": "  FAST  "}, headers=_headers("root"))
        university_id = created.json()["id"]
        renamed = client.patch(
            f"/api/v1/universities/{uuid.UUID(university_id)}", json={"name": "FAST NUCES"}, headers=_headers("root")
        )
        listed = client.get("/api/v1/universities")
        deleted = client.delete(f"/api/v1/universities/{university_id}", headers=_headers("root"))
        after = client.get("/api/v1/universities")

    assert created.status_code == 201
    assert created.json()["name"] == "FAST"
    assert renamed.status_code == 200
    assert [row["name"] for row in listed.json()] == ["FAST NUCES"]
    assert deleted.status_code == 204
    assert after.json() == []


def test_only_super_admin_writes_universities(tmp_path: Path, monkeypatch) -> None:
    _prepare_db(tmp_path, monkeypatch)

    with TestClient(app) as client:
        admin = client.post("/api/v1/universities", json={"name": "LUMS"}, headers=_headers("admin-a"))
        anonymous = client.post("/api/v1/universities", json={"name": "LUMS"})

    assert admin.status_code == 403
    assert anonymous.status_code == 401


def test_invalid_body_is_400(tmp_path: Path, monkeypatch) -> None:
    _prepare_db(tmp_path, monkeypatch)

    with TestClient(app) as client:
        response = client.post("/api/v1/universities", json={"name": ""}, headers=_headers("root"))

    assert response.status_code == 400
    assert response.json()["code"] == "validation_failed"


def test_campus_requires_known_university_and_unique_name(tmp_path: Path, monkeypatch) -> None:
    _prepare_db(tmp_path, monkeypatch)

    with TestClient(app) as client:
        university_id = client.post("/api/v1/universities", json={"name": "FAST"}, headers=_headers("root")).json()["id"]
        unknown = client.post(
            "/api/v1/campuses", json={"universityId": "nope", "name": "Lahore"}, headers=_headers("root")
        )
        created = client.post(
            "/api/v1/campuses", json={"universityId": university_id, "name": "Lahore"}, headers=_headers("root")
        )
        duplicate = client.post(
            "/api/v1/campuses", json={"universityId": university_id, "name": "Lahore"}, headers=_headers("root")
        )
        filtered = client.get("/api/v1/campuses", params={"universityId": university_id})
        other = client.get("/api/v1/campuses", params={"universityId": "someone-else"})

    assert unknown.status_code == 404
    assert created.status_code == 201
    assert created.json()["universityId"] == university_id
    assert duplicate.status_code == 400
    assert [row["name"] for row in filtered.json()] == ["Lahore"]
    assert other.json() == []


def test_campus_admin_manages_restaurants_on_own_campus(tmp_path: Path, monkeypatch) -> None:
    _prepare_db(tmp_path, monkeypatch)
    payload = {"campusId": "campus-a", "universityId": "uni-1", "name": "Bistro", "cuisine": "Italian"}

    with TestClient(app) as client:
        created = client.post("/api/v1/restaurants", json=payload, headers=_headers("admin-a"))
        restaurant_id = created.json()["id"]
        foreign = client.post(
            "/api/v1/restaurants", json={**payload, "campusId": "campus-b"}, headers=_headers("admin-a")
        )
        student = client.post("/api/v1/restaurants", json=payload, headers=_headers("student-a"))
        fetched = client.get(f"/api/v1/restaurants/{uuid.UUID(restaurant_id)}")
        updated = client.patch(
            f"/api/v1/restaurants/{restaurant_id}",
            json={"openTime": "09:00 AM", "is24x7": False},
            headers=_headers("admin-a"),
        )
        by_campus = client.get("/api/v1/restaurants", params={"campusId": "campus-a"})
        deleted = client.delete(f"/api/v1/restaurants/{restaurant_id}", headers=_headers("admin-a"))
        missing = client.get(f"/api/v1/restaurants/{restaurant_id}")

    assert created.status_code == 201
    assert created.json()["is24x7"] is True
    assert foreign.status_code == 403
    assert student.status_code == 403
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Bistro"
    assert updated.json()["openTime"] == "09:00 AM"
    assert updated.json()["is24x7"] is False
    assert [row["id"] for row in by_campus.json()] == [restaurant_id]
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_restaurant_requires_known_campus_of_same_university(tmp_path: Path, monkeypatch) -> None:
    _prepare_db(tmp_path, monkeypatch)
    payload = {"campusId": "campus-ghost", "universityId": "uni-1", "name": "Bistro"}

    with TestClient(app) as client:
        unknown = client.post("/api/v1/restaurants", json=payload, headers=_headers("root"))
        mismatched = client.post(
            "/api/v1/restaurants", json={**payload, "campusId": "campus-a", "universityId": "uni-2"}, headers=_headers("root")
        )
        listed = client.get("/api/v1/restaurants")

    assert unknown.status_code == 400
    assert unknown.json() == {"detail": "Campus not found", "code": "validation_failed"}
    assert mismatched.status_code == 400
    assert mismatched.json()["detail"] == "Campus does not belong to this university"
    assert listed.json() == []
