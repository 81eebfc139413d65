"""SQLModel database models."""

from app.models.user import AuthSession, User
from app.models.profile import Exposure, Profile
from app.models.health_profile import HealthProfile
from app.models.air_quality import AirQualityReading

__all__ = [
    "User",
    "AuthSession",
    "Profile",
    "Exposure",
    "HealthProfile",
    "AirQualityReading",
]
