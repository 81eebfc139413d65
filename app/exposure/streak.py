"""
Streak and points bookkeeping.

Pure functions that compute how a profile's gamification counters change
when an exposure is logged on a given UTC day.

Rules
-----
- Same day as the last activity: streak unchanged.
- Exactly one calendar day after the last activity: streak + 1.
- Any other gap (including going back in time): streak restarts at 1.
- First activity ever: streak = 1.

Points only ever grow: +20 for a score >= 80, +12 for >= 60, +6 otherwise.
"""

from __future__ import annotations

from typing import NamedTuple

from app.core.timeutils import days_between

# (min score, points) checked in order
_POINT_TIERS: list[tuple[int, int]] = [(80, 20), (60, 12)]
_BASE_POINTS = 6


class StreakState(NamedTuple):
    points: int
    streak: int
    best_streak: int
    last_active_date: str


def next_streak(current: int, last_active_date: str, today: str) -> int:
    """Streak after activity on ``today`` given the previous state."""
    if last_active_date == today:
        return current
    if not last_active_date:
        return 1
    diff = days_between(last_active_date, today)
    if diff == 1:
        return current + 1
    return 1


def points_for_score(score: int) -> int:
    for min_score, points in _POINT_TIERS:
        if score >= min_score:
            return points
    return _BASE_POINTS


def apply_activity(state: StreakState, today: str, score: int) -> StreakState:
    """Fold one logged exposure into the counters.

    ``best_streak`` never drops below ``streak``.
    """
    streak = next_streak(state.streak, state.last_active_date, today)
    return StreakState(points=state.points + points_for_score(score), streak=streak,
                       best_streak=max(state.best_streak, streak), last_active_date=today, )
