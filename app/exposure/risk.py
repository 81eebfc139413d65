"""
Exposure risk scorer.

Turns a set of pollutant readings into a 0-100 score (100 = clean air), a
risk level and an ordered list of practical tips.

Model
-----
Each pollutant subtracts a capped penalty from 100:

    pm_penalty = min(pm25 / 2,   60)
    no_penalty = min(no2 / 2.5,  30)
    co_penalty = min(co * 8,     10)

    score = max(0, round(100 - pm_penalty - no_penalty - co_penalty))

Missing readings are replaced by a moderate baseline (PM2.5 30, NO2 20,
CO 0.5) rather than zero, so that logging nothing never scores better
than logging clean air.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.core.mathutils import round_int
from app.schemas.exposure import RiskAssessment

# ======================================================================
# Configuration
# ======================================================================

TIP_DELAY_WORKOUT = "Delay outdoor workouts or move them indoors."
TIP_WEAR_MASK = "Use an N95/FFP2 mask for long outdoor stays."
TIP_PREFER_TRANSIT = "Prefer metro or cycling lanes away from traffic bottlenecks."
TIP_GREEN_ROUTES = "Pick routes with parks or waterfronts—natural buffers can cut exposure by ~20%."
TIP_CLOSE_WINDOWS = "Keep windows closed during rush hour and use recirculation in cars."


class RiskConfig(BaseModel):
    """Constants of the scoring model."""

    default_pm25: float = 30.0
    default_no2: float = 20.0
    default_co: float = 0.5

    pm_divisor: float = 2.0
    pm_cap: float = 60.0
    no_divisor: float = 2.5
    no_cap: float = 30.0
    co_factor: float = 8.0
    co_cap: float = 10.0

    low_threshold: int = Field(75, description="score >= this is 'low' risk")
    moderate_threshold: int = Field(45, description="score >= this is 'moderate' risk")


DEFAULT_RISK_CONFIG = RiskConfig()


# ======================================================================
# Helpers
# ======================================================================


def _label_risk(score: int, cfg: RiskConfig) -> str:
    if score >= cfg.low_threshold:
        return "low"
    if score >= cfg.moderate_threshold:
        return "moderate"
    return "high"


def _build_tips(pm: float, no: float) -> list[str]:
    """Tips triggered by the (already defaulted) readings, in display order."""
    tips: list[str] = []
    if pm > 55 or no > 80:
        tips.append(TIP_DELAY_WORKOUT)
    if pm > 35:
        tips.append(TIP_WEAR_MASK)
    if no > 40:
        tips.append(TIP_PREFER_TRANSIT)
    tips.append(TIP_GREEN_ROUTES)
    tips.append(TIP_CLOSE_WINDOWS)
    return tips


# ======================================================================
# Main entry point
# ======================================================================


def score(pm25: Optional[float] = None, no2: Optional[float] = None, co: Optional[float] = None,
          config: Optional[RiskConfig] = None, ) -> RiskAssessment:
    """Score a set of pollutant readings.

    Args:
        pm25: PM2.5 concentration, or None if not measured.
        no2: NO2 concentration, or None if not measured.
        co: CO concentration, or None if not measured.
        config: Optional :class:`RiskConfig` override.

    Returns:
        :class:`RiskAssessment` with score, risk level and tips.
    """
    cfg = config or DEFAULT_RISK_CONFIG

    pm = cfg.default_pm25 if pm25 is None else pm25
    no = cfg.default_no2 if no2 is None else no2
    co_val = cfg.default_co if co is None else co

    pm_penalty = min(pm / cfg.pm_divisor, cfg.pm_cap)
    no_penalty = min(no / cfg.no_divisor, cfg.no_cap)
    co_penalty = min(co_val * cfg.co_factor, cfg.co_cap)

    value = max(0, round_int(100 - pm_penalty - no_penalty - co_penalty))

    return RiskAssessment(score=value, risk_level=_label_risk(value, cfg), tips=_build_tips(pm, no))
