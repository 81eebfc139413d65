"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import air_history, auth, health_profiles, passport

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    passport.router, prefix="/passport", tags=["Exposure passport"]
)
api_router.include_router(
    health_profiles.router, prefix="/health-profiles", tags=["Health profiles"]
)
api_router.include_router(
    air_history.router, prefix="/air-history", tags=["Air quality history"]
)
