"""Campus endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ValidationFailed
from app.core.security import get_current_profile
from app.db.session import get_db
from app.models.campus import Campus, University
from app.models.profile import Profile
from app.schemas.reference import CampusCreate, CampusRead, CampusUpdate
from app.services.order_policy import can_manage_platform, enforce
from app.services.reference_service import get_by_identifier

router: APIRouter = APIRouter()


@router.get("", response_model=list[CampusRead])
def list_campuses(
    university_id: str | None = Query(default=None, alias="universityId"),
    db: Session = Depends(get_db),
) -> list[Campus]:
    stmt = select(Campus).order_by(Campus.name)
    if university_id:
        stmt = stmt.where(Campus.university_id == university_id)
    return list(db.scalars(stmt).all())


@router.post("", response_model=CampusRead, status_code=status.HTTP_201_CREATED)
def create_campus(
    payload: CampusCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Campus:
    enforce(can_manage_platform(current_profile))
    university = get_by_identifier(db, University, payload.university_id, "University")
    campus = Campus(university_id=university.id, name=payload.name.strip())
    db.add(campus)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ValidationFailed("Campus already exists for this university") from exc
    db.refresh(campus)
    return campus


@router.patch("/{campus_id}", response_model=CampusRead)
def update_campus(
    campus_id: str,
    payload: CampusUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Campus:
    enforce(can_manage_platform(current_profile))
    campus = get_by_identifier(db, Campus, campus_id, "Campus")
    if payload.name and payload.name.strip():
        campus.name = payload.name.strip()
    db.commit()
    db.refresh(campus)
    return campus


@router.delete("/{campus_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_campus(
    campus_id: str,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Response:
    enforce(can_manage_platform(current_profile))
    campus = get_by_identifier(db, Campus, campus_id, "Campus")
    db.delete(campus)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
