"""
Health profile service.

Upsert-style CRUD over health profiles keyed by ``user_key``.

``save`` creates the profile when missing, while ``update_conditions``
requires an existing one and never creates it.
"""

from typing import Optional

from sqlmodel import Session

from app.core.exceptions import NotFoundError
from app.core.logging import get_logger
from app.core.timeutils import now_ms
from app.db.repositories.health_profile import HealthProfileRepository
from app.models.health_profile import HealthProfile
from app.schemas.health_profile import (
    HealthConditionsUpdate,
    HealthProfileResponse,
    HealthProfileSave,
    HealthProfileSaveResult,
    HealthProfileStatus,
    OperationResult,
)

logger = get_logger(__name__)


def is_profile_complete(data: HealthProfileSave) -> bool:
    """Essential fields for recommendations: age, activity level and outdoor exposure."""
    return bool(data.age and data.activity_level and data.outdoor_exposure)


class HealthProfileService:
    """Service for health profile business logic."""

    def __init__(self, session: Session):
        self.repository = HealthProfileRepository(session)

    def get(self, user_key: str) -> Optional[HealthProfileResponse]:
        entry = self.repository.get_by_user_key(user_key)
        return HealthProfileResponse.model_validate(entry) if entry else None

    def get_status(self, user_key: str) -> HealthProfileStatus:
        entry = self.repository.get_by_user_key(user_key)
        if entry is None:
            return HealthProfileStatus(exists=False, is_complete=False)
        return HealthProfileStatus(exists=True, is_complete=entry.is_complete,
                                   profile=HealthProfileResponse.model_validate(entry), )

    def save(self, user_key: str, data: HealthProfileSave) -> HealthProfileSaveResult:
        """Create or fully replace the health profile of ``user_key``."""
        now = now_ms()
        fields = data.model_dump()
        is_complete = is_profile_complete(data)

        existing = self.repository.get_by_user_key(user_key)
        if existing is None:
            entry = self.repository.create(
                HealthProfile(user_key=user_key, created_at=now, updated_at=now, is_complete=is_complete, **fields))
            if entry is not None:
                logger.info("health_profile_created", user_key=user_key, is_complete=is_complete)
                return HealthProfileSaveResult(success=True, profile_id=entry.id, is_new=True)
            # Lost a concurrent create: fall through and update the winner
            existing = self.repository.get_by_user_key(user_key)

        for key, value in fields.items():
            setattr(existing, key, value)
        existing.updated_at = now
        existing.is_complete = is_complete
        existing = self.repository.update(existing)
        return HealthProfileSaveResult(success=True, profile_id=existing.id, is_new=False)

    def update_conditions(self, user_key: str, data: HealthConditionsUpdate) -> OperationResult:
        """Patch the respiratory condition fields of an existing profile.

        Raises:
            NotFoundError: If no health profile exists for ``user_key``
        """
        existing = self.repository.get_by_user_key(user_key)
        if existing is None:
            raise NotFoundError("Health profile not found. Please create a profile first.")

        existing.has_respiratory_condition = data.has_respiratory_condition
        existing.conditions = list(data.conditions)
        existing.condition_severity = data.condition_severity
        existing.medications = list(data.medications)
        existing.updated_at = now_ms()
        self.repository.update(existing)
        return OperationResult(success=True)

    def delete(self, user_key: str) -> OperationResult:
        existing = self.repository.get_by_user_key(user_key)
        if existing is None:
            return OperationResult(success=False, message="Profile not found")
        self.repository.delete(existing)
        logger.info("health_profile_deleted", user_key=user_key)
        return OperationResult(success=True)
