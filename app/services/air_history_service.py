"""
Air quality history service.

Stores raw readings (de-duplicated per location over a 15 minute window)
and serves the aggregations behind the history graphs: per-day, per-hour
and per-location averages plus period summaries.

All buckets are UTC.  Pollutant averages skip readings where the
pollutant is missing or zero.
"""

from collections import defaultdict
from typing import Iterable, Optional

from sqlmodel import Session

from app.core.logging import get_logger
from app.core.mathutils import round_half_up, round_int
from app.core.timeutils import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, day_key, hour_key, now_ms, to_utc_datetime
from app.db.repositories.air_quality import AirQualityRepository
from app.models.air_quality import AirQualityReading
from app.schemas.air_quality import (
    DailyAverage,
    HourlyAverage,
    LastReadingInfo,
    LocationComparison,
    PeriodStats,
    ReadingCreate,
    RecentReading,
    StatsSummary,
)

logger = get_logger(__name__)

DEDUP_WINDOW_MS = 15 * MS_PER_MINUTE
REFRESH_INTERVAL_MS = MS_PER_HOUR
RECENT_READINGS_LIMIT = 100

DEFAULT_DAYS = 7
DEFAULT_HOURS = 24
DEFAULT_MINUTES = 60


# ======================================================================
# Aggregation helpers
# ======================================================================


def _avg(values: list[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def _present(readings: Iterable[AirQualityReading], field: str) -> list[float]:
    """Values of ``field`` that are set and non-zero."""
    return [getattr(r, field) for r in readings if getattr(r, field)]


def _rounded(value: Optional[float], ndigits: int = 0):
    if value is None:
        return None
    if ndigits == 0:
        return round_int(value)
    return round_half_up(value, ndigits)


def _period_stats(readings: list[AirQualityReading]) -> Optional[PeriodStats]:
    if not readings:
        return None
    aqis = [r.aqi for r in readings]
    return PeriodStats(count=len(readings), avg_aqi=round_int(sum(aqis) / len(aqis)), min_aqi=min(aqis),
                       max_aqi=max(aqis), locations=len({r.location_name for r in readings}), )


def _display_date(timestamp: int) -> str:
    dt = to_utc_datetime(timestamp)
    return f"{dt:%b} {dt.day}"


class AirHistoryService:
    """Service for air quality history business logic."""

    def __init__(self, session: Session):
        self.repository = AirQualityRepository(session)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def store_reading(self, data: ReadingCreate) -> tuple[AirQualityReading, bool]:
        """Store a reading unless the same location was recorded in the last 15 minutes.

        Returns:
            Tuple of (reading, created); on a duplicate the existing
            reading is returned with ``created=False``.
        """
        now = now_ms()
        recent = self.repository.get_by_location_since(data.user_key, data.location_name, now - DEDUP_WINDOW_MS)
        if recent:
            logger.debug("reading_deduplicated", user_key=data.user_key, location=data.location_name)
            return recent[0], False

        entry = AirQualityReading(**data.model_dump(), timestamp=now, date=day_key(now))
        return self.repository.create(entry), True

    # ------------------------------------------------------------------
    # Raw history
    # ------------------------------------------------------------------

    def get_location_history(self, user_key: str, location_name: str,
                             days: Optional[int] = None, ) -> list[AirQualityReading]:
        cutoff = now_ms() - (days or DEFAULT_DAYS) * MS_PER_DAY
        return self.repository.get_by_location_since(user_key, location_name, cutoff)

    def get_user_history(self, user_key: str, days: Optional[int] = None) -> list[AirQualityReading]:
        cutoff = now_ms() - (days or DEFAULT_DAYS) * MS_PER_DAY
        return self.repository.get_by_user_since(user_key, cutoff)

    def get_recent_readings(self, user_key: str, minutes: Optional[int] = None) -> list[RecentReading]:
        cutoff = now_ms() - (minutes or DEFAULT_MINUTES) * MS_PER_MINUTE
        readings = self.repository.get_by_user_since(user_key, cutoff, limit=RECENT_READINGS_LIMIT)
        return [RecentReading(**r.model_dump(), display_time=f"{to_utc_datetime(r.timestamp):%I:%M:%S %p}")
                for r in readings]

    def get_last_reading_timestamp(self, user_key: str) -> Optional[LastReadingInfo]:
        latest = self.repository.get_latest_by_user(user_key)
        if latest is None:
            return None

        elapsed = now_ms() - latest.timestamp
        return LastReadingInfo(last_timestamp=latest.timestamp, time_since_last_reading=elapsed,
                               needs_refresh=elapsed >= REFRESH_INTERVAL_MS,
                               next_refresh_in=max(0, REFRESH_INTERVAL_MS - elapsed), )

    # ------------------------------------------------------------------
    # Aggregations
    # ------------------------------------------------------------------

    def get_daily_averages(self, user_key: str, days: Optional[int] = None) -> list[DailyAverage]:
        readings = self.get_user_history(user_key, days)

        by_date: dict[str, list[AirQualityReading]] = defaultdict(list)
        for r in readings:
            by_date[r.date].append(r)

        return [
            DailyAverage(date=date, avg_aqi=round_int(sum(r.aqi for r in group) / len(group)),
                         avg_pm25=_rounded(_avg(_present(group, "pm25"))),
                         avg_no2=_rounded(_avg(_present(group, "no2")), 1), readings=len(group), )
            for date, group in sorted(by_date.items())
        ]

    def compare_locations(self, user_key: str, days: Optional[int] = None) -> list[LocationComparison]:
        # Oldest first so lat/lng come from the first reading seen
        readings = list(reversed(self.get_user_history(user_key, days)))

        by_location: dict[str, list[AirQualityReading]] = {}
        for r in readings:
            by_location.setdefault(r.location_name, []).append(r)

        result = []
        for name, group in by_location.items():
            aqis = [r.aqi for r in group]
            result.append(LocationComparison(location_name=name, avg_aqi=round_int(sum(aqis) / len(aqis)),
                                             avg_pm25=_rounded(_avg(_present(group, "pm25"))), min_aqi=min(aqis),
                                             max_aqi=max(aqis), readings=len(group), lat=group[0].lat,
                                             lng=group[0].lng, ))
        result.sort(key=lambda loc: loc.readings, reverse=True)
        return result

    def get_stats_summary(self, user_key: str) -> StatsSummary:
        now = now_ms()
        readings = self.repository.get_all_by_user(user_key)

        def since(window_ms: int) -> list[AirQualityReading]:
            return [r for r in readings if r.timestamp > now - window_ms]

        return StatsSummary(last_24h=_period_stats(since(MS_PER_DAY)), last_7d=_period_stats(since(7 * MS_PER_DAY)),
                            last_30d=_period_stats(since(30 * MS_PER_DAY)), total=_period_stats(readings), )

    def get_hourly_averages(self, user_key: str, hours: Optional[int] = None) -> list[HourlyAverage]:
        cutoff = now_ms() - (hours or DEFAULT_HOURS) * MS_PER_HOUR
        readings = list(reversed(self.repository.get_by_user_since(user_key, cutoff)))

        by_hour: dict[str, list[AirQualityReading]] = {}
        for r in readings:
            by_hour.setdefault(hour_key(r.timestamp), []).append(r)

        result = []
        for hour, group in by_hour.items():
            first = group[0].timestamp
            aqis = [r.aqi for r in group]
            result.append(HourlyAverage(hour=hour, timestamp=first,
                                        display_hour=f"{to_utc_datetime(first):%I:%M %p}",
                                        display_date=_display_date(first),
                                        avg_aqi=round_int(sum(aqis) / len(aqis)), min_aqi=min(aqis),
                                        max_aqi=max(aqis), avg_pm25=_rounded(_avg(_present(group, "pm25"))),
                                        avg_no2=_rounded(_avg(_present(group, "no2")), 1),
                                        avg_co=_rounded(_avg(_present(group, "co")), 2),
                                        avg_o3=_rounded(_avg(_present(group, "o3"))),
                                        avg_so2=_rounded(_avg(_present(group, "so2"))), readings=len(group), ))
        result.sort(key=lambda h: h.timestamp)
        return result
