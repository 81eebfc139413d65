"""Business logic services."""

from app.services.auth_service import AuthService
from app.services.passport_service import PassportService
from app.services.health_profile_service import HealthProfileService
from app.services.air_history_service import AirHistoryService
from app.services.maintenance_service import MaintenanceService

__all__ = [
    "AuthService",
    "PassportService",
    "HealthProfileService",
    "AirHistoryService",
    "MaintenanceService",
]
