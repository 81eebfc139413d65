"""
Passport endpoints.

Profile upsert, exposure logging, the passport view and insights.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.exposure.insights import compute_insights
from app.schemas.exposure import (
    ExposureCreate,
    ExposureSummary,
    InsightsView,
    PassportView,
    ProfileResponse,
    ProfileUpsert,
)
from app.services.passport_service import PassportService

router = APIRouter()


@router.put("/profiles/{user_key}", summary="Create or patch a passport profile.", response_model=ProfileResponse, )
def ensure_profile(user_key: str, data: Optional[ProfileUpsert] = None, db: Session = Depends(get_db), ):
    data = data or ProfileUpsert()
    return PassportService(db).ensure_profile(user_key, data.nickname, data.home_city)


@router.post("/exposures", summary="Log an exposure and update streak and points.", response_model=ExposureSummary,
             status_code=status.HTTP_201_CREATED, )
def log_exposure(data: ExposureCreate, db: Session = Depends(get_db)):
    return PassportService(db).log_exposure(data)


@router.get("/{user_key}", summary="Get the passport view.", response_model=PassportView, )
def get_passport(user_key: str, limit: int = Query(6, ge=0, le=100, description="Exposures to return"),
                 db: Session = Depends(get_db), ):
    return PassportService(db).get_passport(user_key, limit)


@router.get("/{user_key}/insights", summary="Get the 7-day trend and clean streak.",
            response_model=Optional[InsightsView], )
def get_insights(user_key: str, db: Session = Depends(get_db)):
    return compute_insights(db, user_key)
