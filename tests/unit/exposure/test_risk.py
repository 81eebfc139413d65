"""Tests for the exposure risk scorer.

Pure unit tests: no database involved.
"""

import pytest

from app.core.mathutils import round_half_up, round_int
from app.exposure.risk import (
    DEFAULT_RISK_CONFIG,
    TIP_CLOSE_WINDOWS,
    TIP_DELAY_WORKOUT,
    TIP_GREEN_ROUTES,
    TIP_PREFER_TRANSIT,
    TIP_WEAR_MASK,
    RiskConfig,
    _label_risk,
    score,
)


# ======================================================================
# Score formula
# ======================================================================


class TestScore:
    def test_park_scenario(self):
        """pm 20 / no2 10 / co 0.2 -> 100 - 10 - 4 - 1.6 = 84.4 -> 84."""
        result = score(pm25=20, no2=10, co=0.2)
        assert result.score == 84
        assert result.risk_level == "low"
        assert result.tips == [TIP_GREEN_ROUTES, TIP_CLOSE_WINDOWS]

    def test_missing_readings_use_baseline(self):
        assert score() == score(30, 20, 0.5)
        assert score().score == 73
        assert score().risk_level == "moderate"

    def test_partial_defaults(self):
        assert score(pm25=0) == score(0, 20, 0.5)
        assert score(no2=0) == score(30, 0, 0.5)
        assert score(co=0) == score(30, 20, 0)

    def test_zero_readings_are_not_defaulted(self):
        assert score(0, 0, 0).score == 100

    def test_penalties_are_capped(self):
        result = score(pm25=1000, no2=1000, co=1000)
        assert result.score == 0
        assert result.risk_level == "high"

    def test_rounds_half_up(self):
        """98.5 rounds to 99, not to the even 98."""
        assert score(pm25=3, no2=0, co=0).score == 99

    @pytest.mark.parametrize("pm25, no2, co", [
        (0, 0, 0),
        (12.5, 7, 0.1),
        (45, 60, 1.2),
        (500, 0, 0),
        (0, 500, 0),
        (0, 0, 50),
    ])
    def test_score_within_bounds(self, pm25, no2, co):
        assert 0 <= score(pm25, no2, co).score <= 100

    @pytest.mark.parametrize("field", ["pm25", "no2", "co"])
    def test_monotonically_non_increasing(self, field):
        base = {"pm25": 10.0, "no2": 10.0, "co": 0.1}
        previous = 101
        for step in range(0, 60):
            readings = dict(base)
            readings[field] = step * 5.0 if field != "co" else step * 0.25
            current = score(**readings).score
            assert current <= previous
            previous = current


# ======================================================================
# Risk level
# ======================================================================


class TestLabelRisk:
    @pytest.mark.parametrize("value, expected", [
        (100, "low"),
        (75, "low"),
        (74, "moderate"),
        (45, "moderate"),
        (44, "high"),
        (0, "high"),
    ])
    def test_thresholds(self, value, expected):
        assert _label_risk(value, DEFAULT_RISK_CONFIG) == expected

    @pytest.mark.parametrize("pm25, expected", [
        (50, "low"),        # 100 - 25 = 75
        (110, "moderate"),  # 100 - 55 = 45
        (112, "high"),      # 100 - 56 = 44
    ])
    def test_thresholds_through_score(self, pm25, expected):
        assert score(pm25=pm25, no2=0, co=0).risk_level == expected

    def test_custom_config(self):
        cfg = RiskConfig(low_threshold=90, moderate_threshold=80)
        assert score(20, 10, 0.2, config=cfg).risk_level == "moderate"


# ======================================================================
# Tips
# ======================================================================


class TestTips:
    def test_always_two_general_tips_last(self):
        tips = score(0, 0, 0).tips
        assert tips == [TIP_GREEN_ROUTES, TIP_CLOSE_WINDOWS]

    def test_all_tips_in_order(self):
        tips = score(pm25=60, no2=90, co=0).tips
        assert tips == [TIP_DELAY_WORKOUT, TIP_WEAR_MASK, TIP_PREFER_TRANSIT, TIP_GREEN_ROUTES, TIP_CLOSE_WINDOWS]

    def test_mask_only(self):
        assert score(pm25=40, no2=0, co=0).tips[0] == TIP_WEAR_MASK
        assert len(score(pm25=40, no2=0, co=0).tips) == 3

    def test_high_no2_triggers_delay_and_transit(self):
        tips = score(pm25=0, no2=81, co=0).tips
        assert tips[:2] == [TIP_DELAY_WORKOUT, TIP_PREFER_TRANSIT]

    def test_thresholds_are_strict(self):
        assert score(pm25=35, no2=40, co=0).tips == [TIP_GREEN_ROUTES, TIP_CLOSE_WINDOWS]


# ======================================================================
# Rounding helpers
# ======================================================================


class TestRounding:
    @pytest.mark.parametrize("value, expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (72.49, 72),
        (-0.5, 0),
    ])
    def test_round_int(self, value, expected):
        assert round_int(value) == expected

    def test_round_half_up_decimals(self):
        assert round_half_up(12.25, 1) == pytest.approx(12.3)
        assert round_half_up(0.125, 2) == pytest.approx(0.13)
