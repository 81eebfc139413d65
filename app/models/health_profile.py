"""
Health profile database model.

Respiratory health passport used for personalised recommendations.
Independent from :class:`Profile`; keyed only by ``user_key``.
"""

from typing import Optional

from sqlalchemy import JSON, BigInteger, Column
from sqlmodel import Field, SQLModel

from app.core.timeutils import now_ms


class HealthProfile(SQLModel, table=True):
    """Health profile, one per ``user_key``."""

    __tablename__ = "health_profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_key: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Basic profile
    name: Optional[str] = Field(default=None, max_length=255)
    age: Optional[str] = Field(default=None, max_length=20)  # child, teen, adult, senior
    gender: Optional[str] = Field(default=None, max_length=50)

    # Respiratory conditions
    has_respiratory_condition: bool = Field(default=False, nullable=False)
    conditions: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    condition_severity: Optional[str] = Field(default=None, max_length=20)  # mild, moderate, severe

    # Lifestyle
    activity_level: Optional[str] = Field(default=None, max_length=20)
    outdoor_exposure: Optional[str] = Field(default=None, max_length=20)  # low, medium, high
    smoking_status: Optional[str] = Field(default=None, max_length=20)

    # Living environment
    lives_near_traffic: Optional[bool] = Field(default=None)
    has_air_purifier: Optional[bool] = Field(default=None)

    # Other health factors
    is_pregnant: Optional[bool] = Field(default=None)
    has_heart_condition: Optional[bool] = Field(default=None)
    medications: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )

    # Meta (epoch milliseconds)
    created_at: int = Field(default_factory=now_ms, sa_type=BigInteger, nullable=False)
    updated_at: int = Field(default_factory=now_ms, sa_type=BigInteger, nullable=False)
    is_complete: bool = Field(default=False, nullable=False)
