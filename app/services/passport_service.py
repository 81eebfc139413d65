"""
Passport service.

Owns the profile lifecycle, exposure logging with streak/points
bookkeeping, and the passport view.
"""

from typing import Optional

from sqlmodel import Session

from app.core.exceptions import ValidationFailureError
from app.core.logging import get_logger
from app.core.mathutils import mean, round_int
from app.core.timeutils import day_key, now_ms
from app.db.repositories.profile import ExposureRepository, ProfileRepository
from app.exposure.risk import score as score_exposure
from app.exposure.streak import StreakState, apply_activity
from app.models.profile import Exposure, Profile
from app.schemas.exposure import (
    ExposureCreate,
    ExposureResponse,
    ExposureSummary,
    PassportView,
    ProfileResponse,
)

logger = get_logger(__name__)

# Window of the passport's average score
AVERAGE_WINDOW = 50


def user_id_from_key(user_key: str) -> Optional[int]:
    """Extract the user id from a ``user-<id>`` key, if it is one."""
    if not user_key.startswith("user-"):
        return None
    try:
        return int(user_key[len("user-"):])
    except ValueError:
        return None


class PassportService:
    """Service for passport business logic."""

    def __init__(self, session: Session):
        self.profiles = ProfileRepository(session)
        self.exposures = ExposureRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def ensure_profile(self, user_key: str, nickname: Optional[str] = None,
                       home_city: Optional[str] = None, ) -> Profile:
        """Create the profile if missing, otherwise patch it.

        Only non-empty ``nickname`` / ``home_city`` values overwrite, and
        ``user_id`` is backfilled from a ``user-<id>`` key only when unset.
        """
        derived_user_id = user_id_from_key(user_key)
        profile, created = self.profiles.get_or_create(
            Profile(user_key=user_key, user_id=derived_user_id, nickname=nickname or None,
                    home_city=home_city or None, ))
        if created:
            logger.info("profile_created", user_key=user_key)
            return profile

        changed = False
        if nickname:
            profile.nickname = nickname
            changed = True
        if home_city:
            profile.home_city = home_city
            changed = True
        if profile.user_id is None and derived_user_id is not None:
            profile.user_id = derived_user_id
            changed = True

        if changed:
            profile = self.profiles.update(profile)
        return profile

    def log_exposure(self, data: ExposureCreate) -> ExposureSummary:
        """Score an exposure, store it and advance the profile's counters."""
        profile, created = self.profiles.get_or_create(
            Profile(user_key=data.user_key, user_id=user_id_from_key(data.user_key)))
        if created:
            logger.info("profile_created", user_key=data.user_key)

        timestamp = data.timestamp if data.timestamp is not None else now_ms()
        today = day_key(timestamp)
        assessment = score_exposure(data.pm25, data.no2, data.co)

        state = apply_activity(StreakState(points=profile.points, streak=profile.streak,
                                           best_streak=profile.best_streak,
                                           last_active_date=profile.last_active_date, ), today, assessment.score, )

        profile.points = state.points
        profile.streak = state.streak
        profile.best_streak = state.best_streak
        profile.last_active_date = state.last_active_date

        # Exposure row and counters are committed together
        exposure = self.exposures.log(
            Exposure(profile_id=profile.id, lat=data.lat, lon=data.lon, location_name=data.location_name,
                     timestamp=timestamp, pm25=data.pm25, no2=data.no2, co=data.co, mode=data.mode,
                     risk_level=assessment.risk_level, tips=assessment.tips, score=assessment.score, ), profile)

        logger.info("exposure_logged", user_key=data.user_key, exposure_id=exposure.id, score=assessment.score,
                    streak=state.streak)

        return ExposureSummary(exposure_id=exposure.id, points=state.points, streak=state.streak,
                               best_streak=state.best_streak, score=assessment.score,
                               risk_level=assessment.risk_level, tips=assessment.tips, )

    def get_passport(self, user_key: str, limit: int = 6) -> PassportView:
        """Profile, its latest ``limit`` exposures and the recent average score."""
        if limit < 0:
            raise ValidationFailureError("must be >= 0", field="limit")

        profile = self.profiles.get_by_user_key(user_key)
        if profile is None:
            return PassportView(profile=None, exposures=[], average_score=None, latest=None)

        exposures = self.exposures.get_latest_by_profile(profile.id, limit)
        window = self.exposures.get_latest_by_profile(profile.id, AVERAGE_WINDOW)
        average_score = round_int(mean([e.score for e in window])) if window else None

        items = [ExposureResponse.model_validate(e) for e in exposures]
        return PassportView(profile=ProfileResponse.model_validate(profile), exposures=items,
                            average_score=average_score, latest=items[0] if items else None, )
