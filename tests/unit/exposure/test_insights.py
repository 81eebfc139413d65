"""Tests for the insights aggregator."""

import datetime

from app.exposure.insights import InsightsConfig, build_trend, clean_streak, compute_insights
from app.models.profile import Exposure
from app.schemas.exposure import ExposureCreate, TrendDay
from app.services.passport_service import PassportService


def _ms(day: int, hour: int = 12) -> int:
    dt = datetime.datetime(2026, 3, day, hour, tzinfo=datetime.timezone.utc)
    return int(dt.timestamp() * 1000)


def _exposure(day: int, score: int, hour: int = 12) -> Exposure:
    return Exposure(profile_id=1, lat=0.0, lon=0.0, location_name="x", timestamp=_ms(day, hour), risk_level="low",
                    tips=[], score=score)


def _trend(*averages: int) -> list[TrendDay]:
    return [TrendDay(day=f"2026-03-{i + 1:02d}", average=a, samples=1) for i, a in enumerate(averages)]


# ======================================================================
# build_trend
# ======================================================================


class TestBuildTrend:
    def test_groups_by_day_ascending(self):
        logs = [_exposure(3, 80), _exposure(1, 60), _exposure(3, 71, hour=8), _exposure(2, 90)]
        trend = build_trend(logs, 7)
        assert [t.day for t in trend] == ["2026-03-01", "2026-03-02", "2026-03-03"]
        assert trend[2].samples == 2
        assert trend[2].average == 76  # (80 + 71) / 2 = 75.5 rounds up

    def test_keeps_last_seven_days(self):
        logs = [_exposure(day, 50) for day in range(1, 11)]
        trend = build_trend(logs, 7)
        assert len(trend) == 7
        assert trend[0].day == "2026-03-04"
        assert trend[-1].day == "2026-03-10"

    def test_empty(self):
        assert build_trend([], 7) == []


# ======================================================================
# clean_streak
# ======================================================================


class TestCleanStreak:
    def test_counts_from_most_recent(self):
        assert clean_streak(_trend(90, 40, 70, 85), 70) == 2

    def test_most_recent_dirty(self):
        assert clean_streak(_trend(90, 90, 69), 70) == 0

    def test_all_clean(self):
        assert clean_streak(_trend(70, 71, 99), 70) == 3

    def test_does_not_reorder_trend(self):
        trend = _trend(90, 40, 85)
        before = [t.day for t in trend]
        clean_streak(trend, 70)
        assert [t.day for t in trend] == before


# ======================================================================
# compute_insights (database)
# ======================================================================


def _log(db, day: int, pm25: float, hour: int = 12):
    return PassportService(db).log_exposure(
        ExposureCreate(user_key="anon-1", lat=1.0, lon=2.0, location_name="Park", pm25=pm25, no2=0, co=0,
                       timestamp=_ms(day, hour)))


class TestComputeInsights:
    def test_no_profile(self, db):
        assert compute_insights(db, "nobody") is None

    def test_trend_and_clean_streak(self, db):
        _log(db, 1, pm25=10)    # 95
        _log(db, 2, pm25=100)   # 50
        _log(db, 3, pm25=20)    # 90
        _log(db, 4, pm25=40)    # 80

        view = compute_insights(db, "anon-1")
        assert view is not None
        assert [t.day for t in view.trend] == ["2026-03-01", "2026-03-02", "2026-03-03", "2026-03-04"]
        assert [t.average for t in view.trend] == [95, 50, 90, 80]
        assert view.clean_streak == 2
        assert view.sample_count == 4
        assert view.profile.user_key == "anon-1"

    def test_sample_window(self, db):
        for i in range(35):
            _log(db, 1 + i % 9, pm25=10, hour=i % 24)

        view = compute_insights(db, "anon-1", InsightsConfig(sample_limit=30))
        assert view.sample_count == 30
        assert len(view.trend) <= 7
        assert view.trend == sorted(view.trend, key=lambda t: t.day)
