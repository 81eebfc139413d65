"""
Maintenance tasks.

One-off data repairs run from ``scripts/``.
"""

from sqlmodel import Session

from app.core.logging import get_logger
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.user import UserRepository

logger = get_logger(__name__)


class MaintenanceService:
    """Service for data repair jobs."""

    def __init__(self, session: Session):
        self.profiles = ProfileRepository(session)
        self.users = UserRepository(session)

    def fix_invalid_user_ids(self) -> dict[str, int]:
        """Clear ``user_id`` on profiles whose linked user does not exist.

        Returns:
            Dict with ``fixed_count`` and ``total_profiles``
        """
        profiles = self.profiles.get_all()
        fixed = 0
        for profile in profiles:
            if profile.user_id is not None and self.users.get_by_id(profile.user_id) is None:
                profile.user_id = None
                self.profiles.update(profile)
                fixed += 1

        logger.info("profiles_fixed", fixed_count=fixed, total_profiles=len(profiles))
        return { "fixed_count": fixed, "total_profiles": len(profiles) }
