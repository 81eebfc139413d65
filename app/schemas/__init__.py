"""Pydantic schemas for request/response validation."""

from app.schemas.user import (
    AuthResponse,
    LogoutRequest,
    LogoutResponse,
    SessionInfo,
    TokenResponse,
    UserLogin,
    UserPublic,
    UserSignup,
)
from app.schemas.exposure import (
    ExposureCreate,
    ExposureResponse,
    ExposureSummary,
    InsightsView,
    PassportView,
    ProfileResponse,
    ProfileUpsert,
    RiskAssessment,
    TrendDay,
)
from app.schemas.health_profile import (
    HealthConditionsUpdate,
    HealthProfileResponse,
    HealthProfileSave,
    HealthProfileSaveResult,
    HealthProfileStatus,
    OperationResult,
)
from app.schemas.air_quality import (
    DailyAverage,
    HourlyAverage,
    LastReadingInfo,
    LocationComparison,
    PeriodStats,
    ReadingCreate,
    ReadingResponse,
    RecentReading,
    StatsSummary,
    StoreReadingResult,
)

__all__ = [
    "AuthResponse",
    "LogoutRequest",
    "LogoutResponse",
    "TokenResponse",
    "SessionInfo",
    "UserLogin",
    "UserPublic",
    "UserSignup",
    "ExposureCreate",
    "ExposureResponse",
    "ExposureSummary",
    "InsightsView",
    "PassportView",
    "ProfileResponse",
    "ProfileUpsert",
    "RiskAssessment",
    "TrendDay",
    "HealthConditionsUpdate",
    "HealthProfileResponse",
    "HealthProfileSave",
    "HealthProfileSaveResult",
    "HealthProfileStatus",
    "OperationResult",
    "DailyAverage",
    "HourlyAverage",
    "LastReadingInfo",
    "LocationComparison",
    "PeriodStats",
    "ReadingCreate",
    "ReadingResponse",
    "RecentReading",
    "StatsSummary",
    "StoreReadingResult",
]
