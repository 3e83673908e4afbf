"""University endpoints."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.security import get_current_profile
from app.db.session import get_db
from app.models.campus import University
from app.models.profile import Profile
from app.schemas.reference import UniversityCreate, UniversityRead, UniversityUpdate
from app.services.order_policy import can_manage_platform, enforce
from app.services.reference_service import get_by_identifier

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[UniversityRead])
def list_universities(db: Session = Depends(get_db)) -> list[University]:
    return list(db.scalars(select(University).order_by(University.name)).all())


@router.post("", response_model=UniversityRead, status_code=status.HTTP_201_CREATED)
def create_university(
    payload: UniversityCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> University:
    enforce(can_manage_platform(current_profile))
    university = University(name=payload.name.strip())
    db.add(university)
    db.commit()
    db.refresh(university)
    logger.info("University %s created by %s", university.id, current_profile.subject_id)
    return university


@router.patch("/{university_id}", response_model=UniversityRead)
def update_university(
    university_id: str,
    payload: UniversityUpdate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> University:
    enforce(can_manage_platform(current_profile))
    university = get_by_identifier(db, University, university_id, "University")
    if payload.name and payload.name.strip():
        university.name = payload.name.strip()
    db.commit()
    db.refresh(university)
    return university


@router.delete("/{university_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_university(
    university_id: str,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> Response:
    enforce(can_manage_platform(current_profile))
    university = get_by_identifier(db, University, university_id, "University")
    db.delete(university)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
