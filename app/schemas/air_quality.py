"""
Air quality history API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ReadingCreate(BaseModel):
    """Schema for storing an air quality reading."""

    user_key: str = Field(..., min_length=1, max_length=255)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    location_name: str = Field(..., max_length=255)
    aqi: float = Field(..., ge=0)
    risk_level: str
    source: str
    pm25: Optional[float] = None
    pm10: Optional[float] = None
    no2: Optional[float] = None
    o3: Optional[float] = None
    co: Optional[float] = None
    so2: Optional[float] = None


class ReadingResponse(BaseModel):
    id: int
    user_key: str
    lat: float
    lng: float
    location_name: str
    aqi: float
    pm25: Optional[float] = None
    pm10: Optional[float] = None
    no2: Optional[float] = None
    co: Optional[float] = None
    o3: Optional[float] = None
    so2: Optional[float] = None
    source: str
    risk_level: str
    timestamp: int
    date: str

    class Config:
        from_attributes = True


class RecentReading(ReadingResponse):
    display_time: str


class StoreReadingResult(BaseModel):
    id: int
    created: bool


class DailyAverage(BaseModel):
    date: str
    avg_aqi: int
    avg_pm25: Optional[int] = None
    avg_no2: Optional[float] = None
    readings: int


class LocationComparison(BaseModel):
    location_name: str
    avg_aqi: int
    avg_pm25: Optional[int] = None
    min_aqi: Optional[float] = None
    max_aqi: Optional[float] = None
    readings: int
    lat: float
    lng: float


class PeriodStats(BaseModel):
    count: int
    avg_aqi: int
    min_aqi: float
    max_aqi: float
    locations: int


class StatsSummary(BaseModel):
    last_24h: Optional[PeriodStats] = None
    last_7d: Optional[PeriodStats] = None
    last_30d: Optional[PeriodStats] = None
    total: Optional[PeriodStats] = None


class HourlyAverage(BaseModel):
    hour: str = Field(..., description="UTC hour bucket (YYYY-MM-DDTHH)")
    timestamp: int
    display_hour: str
    display_date: str
    avg_aqi: int
    min_aqi: Optional[float] = None
    max_aqi: Optional[float] = None
    avg_pm25: Optional[int] = None
    avg_no2: Optional[float] = None
    avg_co: Optional[float] = None
    avg_o3: Optional[int] = None
    avg_so2: Optional[int] = None
    readings: int


class LastReadingInfo(BaseModel):
    last_timestamp: int
    time_since_last_reading: int
    needs_refresh: bool
    next_refresh_in: int
