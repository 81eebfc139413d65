"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import AuthSession, User  # noqa: F401
from app.models.profile import Exposure, Profile  # noqa: F401
from app.models.health_profile import HealthProfile  # noqa: F401
from app.models.air_quality import AirQualityReading  # noqa: F401
