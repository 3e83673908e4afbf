"""API v1 router composition."""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, campus_settings, campuses, mart, menu, orders, restaurants, universities, users

api_router: APIRouter = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(universities.router, prefix="/universities", tags=["universities"])
api_router.include_router(campuses.router, prefix="/campuses", tags=["campuses"])
api_router.include_router(restaurants.router, prefix="/restaurants", tags=["restaurants"])
api_router.include_router(menu.router, prefix="/menu-items", tags=["menu"])
api_router.include_router(mart.router, prefix="/mart-items", tags=["mart"])
api_router.include_router(campus_settings.router, prefix="/campus-settings", tags=["campus-settings"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
