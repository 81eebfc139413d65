"""
Exposure scoring and passport API schemas.

Pydantic models for risk assessments, exposure logging, the passport
view and insights.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

RiskLevel = Literal["low", "moderate", "high"]

# 9999-12-31T23:59:59.999Z, the last instant datetime can represent
MAX_TIMESTAMP_MS = 253402300799999


# ---------------------------------------------------------------------------
# Risk scoring
# ---------------------------------------------------------------------------

class RiskAssessment(BaseModel):
    """Output of the risk scorer for one set of readings."""

    score: int = Field(..., ge=0, le=100, description="0 (worst) - 100 (clean air)")
    risk_level: RiskLevel
    tips: list[str] = Field(default_factory=list, description="Ordered advice, 2-5 entries")


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

class ProfileUpsert(BaseModel):
    """Schema for creating / patching a passport profile."""

    nickname: Optional[str] = Field(None, max_length=255)
    home_city: Optional[str] = Field(None, max_length=255)


class ProfileResponse(BaseModel):
    id: int
    user_key: str
    user_id: Optional[int] = None
    nickname: Optional[str] = None
    home_city: Optional[str] = None
    points: int
    streak: int
    best_streak: int
    last_active_date: str

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Exposures
# ---------------------------------------------------------------------------

class ExposureCreate(BaseModel):
    """Schema for logging an exposure."""

    user_key: str = Field(..., min_length=1, max_length=255)
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    location_name: str = Field(..., max_length=255)
    pm25: Optional[float] = Field(None, ge=0, description="PM2.5 (ug/m3)")
    no2: Optional[float] = Field(None, ge=0, description="NO2 (ug/m3)")
    co: Optional[float] = Field(None, ge=0, description="CO (mg/m3)")
    mode: Optional[str] = Field(None, max_length=50, description="Travel mode, e.g. walk, bike, metro")
    timestamp: Optional[int] = Field(None, ge=0, le=MAX_TIMESTAMP_MS,
                                     description="Epoch milliseconds (defaults to now)")


class ExposureResponse(BaseModel):
    id: int
    profile_id: int
    lat: float
    lon: float
    location_name: str
    timestamp: int
    pm25: Optional[float] = None
    no2: Optional[float] = None
    co: Optional[float] = None
    mode: Optional[str] = None
    risk_level: str
    tips: list[str]
    score: int

    class Config:
        from_attributes = True


class ExposureSummary(BaseModel):
    """Result of logging an exposure: updated counters plus the assessment."""

    exposure_id: int
    points: int
    streak: int
    best_streak: int
    score: int
    risk_level: str
    tips: list[str]


# ---------------------------------------------------------------------------
# Passport & insights
# ---------------------------------------------------------------------------

class PassportView(BaseModel):
    profile: Optional[ProfileResponse] = None
    exposures: list[ExposureResponse] = Field(default_factory=list)
    average_score: Optional[int] = Field(None, description="Rounded mean of the latest 50 scores")
    latest: Optional[ExposureResponse] = None


class TrendDay(BaseModel):
    day: str = Field(..., description="UTC calendar day (YYYY-MM-DD)")
    average: int
    samples: int


class InsightsView(BaseModel):
    profile: ProfileResponse
    trend: list[TrendDay] = Field(..., description="At most 7 days, ascending")
    clean_streak: int = Field(..., description="Most recent consecutive days with average >= threshold")
    sample_count: int
