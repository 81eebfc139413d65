"""
Air quality history repository.

Handles database operations for AirQualityReading model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.air_quality import AirQualityReading


class AirQualityRepository:
    """Repository for AirQualityReading database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: AirQualityReading) -> AirQualityReading:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_since(self, user_key: str, since: int, limit: Optional[int] = None, ) -> list[AirQualityReading]:
        """Readings of a user with ``timestamp > since``, newest first."""
        statement = (
            select(AirQualityReading)
            .where(AirQualityReading.user_key == user_key, AirQualityReading.timestamp > since, )
            .order_by(AirQualityReading.timestamp.desc(), AirQualityReading.id.desc())
        )
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def get_by_location_since(self, user_key: str, location_name: str, since: int, ) -> list[AirQualityReading]:
        """Readings of a user at one location with ``timestamp > since``, newest first."""
        statement = (
            select(AirQualityReading)
            .where(AirQualityReading.user_key == user_key, AirQualityReading.location_name == location_name,
                   AirQualityReading.timestamp > since, )
            .order_by(AirQualityReading.timestamp.desc(), AirQualityReading.id.desc())
        )
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_key: str) -> list[AirQualityReading]:
        statement = select(AirQualityReading).where(AirQualityReading.user_key == user_key)
        return list(self.session.exec(statement).all())

    def get_latest_by_user(self, user_key: str) -> Optional[AirQualityReading]:
        statement = (
            select(AirQualityReading)
            .where(AirQualityReading.user_key == user_key)
            .order_by(AirQualityReading.timestamp.desc(), AirQualityReading.id.desc())
            .limit(1)
        )
        return self.session.exec(statement).first()
