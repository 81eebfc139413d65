"""
Air quality history database model.

Raw readings recorded while the user browses locations; the source of
graphs and location comparisons.
"""

from typing import Optional

from sqlalchemy import BigInteger, Index
from sqlmodel import Field, SQLModel


class AirQualityReading(SQLModel, table=True):
    """A single stored air-quality sample."""

    __tablename__ = "air_quality_history"
    __table_args__ = (
        Index("ix_air_quality_history_user_key_location", "user_key", "location_name"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_key: str = Field(nullable=False, index=True, max_length=255)

    lat: float = Field(nullable=False)
    lng: float = Field(nullable=False)
    location_name: str = Field(nullable=False, max_length=255)

    aqi: float = Field(nullable=False)
    pm25: Optional[float] = Field(default=None)
    pm10: Optional[float] = Field(default=None)
    no2: Optional[float] = Field(default=None)
    co: Optional[float] = Field(default=None)
    o3: Optional[float] = Field(default=None)
    so2: Optional[float] = Field(default=None)

    source: str = Field(nullable=False, max_length=100)
    risk_level: str = Field(nullable=False, max_length=20)

    # Epoch milliseconds + UTC day key for grouping
    timestamp: int = Field(sa_type=BigInteger, nullable=False, index=True)
    date: str = Field(nullable=False, max_length=10, index=True)
