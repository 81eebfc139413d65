"""
Health profile endpoints.

CRUD keyed by ``user_key``; saving is an upsert.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.health_profile import (
    HealthConditionsUpdate,
    HealthProfileResponse,
    HealthProfileSave,
    HealthProfileSaveResult,
    HealthProfileStatus,
    OperationResult,
)
from app.services.health_profile_service import HealthProfileService

router = APIRouter()


@router.get("/{user_key}", summary="Get a health profile (null if none).",
            response_model=Optional[HealthProfileResponse], )
def get_health_profile(user_key: str, db: Session = Depends(get_db)):
    return HealthProfileService(db).get(user_key)


@router.get("/{user_key}/status", summary="Check whether the health profile exists and is complete.",
            response_model=HealthProfileStatus, )
def get_health_profile_status(user_key: str, db: Session = Depends(get_db)):
    return HealthProfileService(db).get_status(user_key)


@router.put("/{user_key}", summary="Create or replace a health profile.", response_model=HealthProfileSaveResult, )
def save_health_profile(user_key: str, data: HealthProfileSave, db: Session = Depends(get_db)):
    return HealthProfileService(db).save(user_key, data)


@router.patch("/{user_key}/conditions", summary="Update respiratory conditions of an existing profile.",
              response_model=OperationResult, )
def update_health_conditions(user_key: str, data: HealthConditionsUpdate, db: Session = Depends(get_db)):
    return HealthProfileService(db).update_conditions(user_key, data)


@router.delete("/{user_key}", summary="Delete a health profile.", response_model=OperationResult, )
def delete_health_profile(user_key: str, db: Session = Depends(get_db)):
    return HealthProfileService(db).delete(user_key)
