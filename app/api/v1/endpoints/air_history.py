"""
Air quality history endpoints: raw readings and aggregations.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.air_quality import (
    DailyAverage,
    HourlyAverage,
    LastReadingInfo,
    LocationComparison,
    ReadingCreate,
    ReadingResponse,
    RecentReading,
    StatsSummary,
    StoreReadingResult,
)
from app.services.air_history_service import AirHistoryService

router = APIRouter()


@router.post("/readings", summary="Store a reading (skipped if the location was recorded < 15 min ago).",
             response_model=StoreReadingResult, )
def store_reading(data: ReadingCreate, response: Response, db: Session = Depends(get_db)):
    reading, created = AirHistoryService(db).store_reading(data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return StoreReadingResult(id=reading.id, created=created)


@router.get("/{user_key}", summary="All readings of the last N days.", response_model=list[ReadingResponse], )
def get_user_history(user_key: str, days: Optional[int] = Query(None, ge=0), db: Session = Depends(get_db)):
    return AirHistoryService(db).get_user_history(user_key, days)


@router.get("/{user_key}/locations/{location_name}", summary="Readings of one location over the last N days.",
            response_model=list[ReadingResponse], )
def get_location_history(user_key: str, location_name: str, days: Optional[int] = Query(None, ge=0),
                         db: Session = Depends(get_db), ):
    return AirHistoryService(db).get_location_history(user_key, location_name, days)


@router.get("/{user_key}/daily", summary="Daily averages.", response_model=list[DailyAverage], )
def get_daily_averages(user_key: str, days: Optional[int] = Query(None, ge=0), db: Session = Depends(get_db)):
    return AirHistoryService(db).get_daily_averages(user_key, days)


@router.get("/{user_key}/compare", summary="Per-location comparison.", response_model=list[LocationComparison], )
def compare_locations(user_key: str, days: Optional[int] = Query(None, ge=0), db: Session = Depends(get_db)):
    return AirHistoryService(db).compare_locations(user_key, days)


@router.get("/{user_key}/summary", summary="24h / 7d / 30d / total statistics.", response_model=StatsSummary, )
def get_stats_summary(user_key: str, db: Session = Depends(get_db)):
    return AirHistoryService(db).get_stats_summary(user_key)


@router.get("/{user_key}/hourly", summary="Hourly averages.", response_model=list[HourlyAverage], )
def get_hourly_averages(user_key: str, hours: Optional[int] = Query(None, ge=0), db: Session = Depends(get_db)):
    return AirHistoryService(db).get_hourly_averages(user_key, hours)


@router.get("/{user_key}/recent", summary="Readings of the last N minutes (max 100).",
            response_model=list[RecentReading], )
def get_recent_readings(user_key: str, minutes: Optional[int] = Query(None, ge=0), db: Session = Depends(get_db)):
    return AirHistoryService(db).get_recent_readings(user_key, minutes)


@router.get("/{user_key}/last", summary="Timestamp of the last reading and whether a refresh is due.",
            response_model=Optional[LastReadingInfo], )
def get_last_reading_timestamp(user_key: str, db: Session = Depends(get_db)):
    return AirHistoryService(db).get_last_reading_timestamp(user_key)
