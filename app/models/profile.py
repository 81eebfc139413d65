"""
Passport profile and exposure database models.

A profile is keyed by an opaque ``user_key`` (``user-<id>`` for signed-in
users, anything else for anonymous ones) and carries the gamification
counters.  Exposures are its append-only history.
"""

from typing import Optional

from sqlalchemy import JSON, BigInteger, Column
from sqlmodel import Field, SQLModel


class Profile(SQLModel, table=True):
    """Exposure passport profile, one per ``user_key``."""

    __tablename__ = "profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_key: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Soft link to users.id (no FK: anonymous keys and stale links are allowed)
    user_id: Optional[int] = Field(default=None, index=True)

    nickname: Optional[str] = Field(default=None, max_length=255)
    home_city: Optional[str] = Field(default=None, max_length=255)

    # Gamification
    points: int = Field(default=0, nullable=False)
    streak: int = Field(default=0, nullable=False)
    best_streak: int = Field(default=0, nullable=False)
    last_active_date: str = Field(default="", max_length=10, nullable=False)


class Exposure(SQLModel, table=True):
    """One logged air-quality encounter.  Immutable once written."""

    __tablename__ = "exposures"

    id: Optional[int] = Field(default=None, primary_key=True)
    profile_id: int = Field(foreign_key="profiles.id", nullable=False, index=True)

    lat: float = Field(nullable=False)
    lon: float = Field(nullable=False)
    location_name: str = Field(nullable=False, max_length=255)
    timestamp: int = Field(sa_type=BigInteger, nullable=False, index=True)

    # Raw readings as supplied (None when not measured)
    pm25: Optional[float] = Field(default=None)
    no2: Optional[float] = Field(default=None)
    co: Optional[float] = Field(default=None)
    mode: Optional[str] = Field(default=None, max_length=50)

    # Computed by the risk scorer
    risk_level: str = Field(nullable=False, max_length=20)
    tips: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    score: int = Field(nullable=False)
