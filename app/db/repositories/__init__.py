"""Database repositories."""

from app.db.repositories.user import AuthSessionRepository, UserRepository
from app.db.repositories.profile import ExposureRepository, ProfileRepository
from app.db.repositories.health_profile import HealthProfileRepository
from app.db.repositories.air_quality import AirQualityRepository

__all__ = [
    "UserRepository",
    "AuthSessionRepository",
    "ProfileRepository",
    "ExposureRepository",
    "HealthProfileRepository",
    "AirQualityRepository",
]
