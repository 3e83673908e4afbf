"""Authenticated caller endpoints."""

from fastapi import APIRouter, Depends

from app.core.security import get_current_profile
from app.models.profile import Profile
from app.schemas.auth import ProfileRead

router: APIRouter = APIRouter()


@router.get("/me", response_model=ProfileRead)
def me(current_profile: Profile = Depends(get_current_profile)) -> Profile:
    return current_profile
