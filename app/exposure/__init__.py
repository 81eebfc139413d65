"""Exposure scoring core: risk scorer, streak rules and insights."""

from app.exposure.insights import compute_insights
from app.exposure.risk import score
from app.exposure.streak import StreakState, apply_activity

__all__ = ["score", "StreakState", "apply_activity", "compute_insights"]
