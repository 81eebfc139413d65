"""
Exposure insights: day-bucketed trend and clean-air streak.

The trend is built from the 30 most recent exposures of a profile:
scores are grouped by UTC day, averaged, sorted ascending and cut to the
last 7 days present.  The clean streak reads that same trend from the most
recent day backwards and counts days whose average stays at or above the
clean threshold, stopping at the first one that does not.

The trend list that is returned is never reordered in place; the streak is
computed over a reversed view.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional

from pydantic import BaseModel
from sqlmodel import Session

from app.core.mathutils import mean, round_int
from app.core.timeutils import day_key
from app.db.repositories.profile import ExposureRepository, ProfileRepository
from app.models.profile import Exposure
from app.schemas.exposure import InsightsView, ProfileResponse, TrendDay


class InsightsConfig(BaseModel):
    """Windows and threshold of the insights computation."""

    sample_limit: int = 30
    trend_days: int = 7
    clean_threshold: int = 70


DEFAULT_INSIGHTS_CONFIG = InsightsConfig()


# ======================================================================
# Pure helpers
# ======================================================================


def build_trend(exposures: Iterable[Exposure], max_days: int) -> list[TrendDay]:
    """Average score per UTC day, ascending, keeping the last ``max_days`` days."""
    by_day: dict[str, list[int]] = defaultdict(list)
    for exposure in exposures:
        by_day[day_key(exposure.timestamp)].append(exposure.score)

    trend = [TrendDay(day=day, average=round_int(mean(scores)), samples=len(scores))
             for day, scores in sorted(by_day.items())]
    return trend[-max_days:] if max_days > 0 else []


def clean_streak(trend: list[TrendDay], threshold: int) -> int:
    """Consecutive most-recent days with ``average >= threshold``."""
    length = 0
    for day in reversed(trend):
        if day.average < threshold:
            break
        length += 1
    return length


# ======================================================================
# Main entry point
# ======================================================================


def compute_insights(session: Session, user_key: str,
                     config: Optional[InsightsConfig] = None, ) -> Optional[InsightsView]:
    """Compute the insights view of a profile.

    Args:
        session: Database session.
        user_key: Profile owner key.
        config: Optional :class:`InsightsConfig` override.

    Returns:
        :class:`InsightsView`, or None if the profile does not exist.
    """
    cfg = config or DEFAULT_INSIGHTS_CONFIG

    profile = ProfileRepository(session).get_by_user_key(user_key)
    if profile is None:
        return None

    logs = ExposureRepository(session).get_latest_by_profile(profile.id, cfg.sample_limit)
    trend = build_trend(logs, cfg.trend_days)

    return InsightsView(profile=ProfileResponse.model_validate(profile), trend=trend,
                        clean_streak=clean_streak(trend, cfg.clean_threshold), sample_count=len(logs), )
