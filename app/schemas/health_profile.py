"""
Health profile API schemas.

Pydantic models for the respiratory health passport.
"""

from typing import Optional

from pydantic import BaseModel, Field


# Shared properties
class HealthProfileBase(BaseModel):
    """Fields supplied by the client when saving a health profile."""

    name: Optional[str] = Field(None, max_length=255)
    age: Optional[str] = Field(None, description="child, teen, adult or senior")
    gender: Optional[str] = None

    has_respiratory_condition: bool = False
    conditions: list[str] = Field(default_factory=list, description="e.g. asthma, copd, allergies")
    condition_severity: Optional[str] = Field(None, description="mild, moderate or severe")

    activity_level: Optional[str] = Field(None, description="sedentary, light, moderate or active")
    outdoor_exposure: Optional[str] = Field(None, description="Daily outdoor time: low, medium or high")
    smoking_status: Optional[str] = Field(None, description="never, former or current")

    lives_near_traffic: Optional[bool] = None
    has_air_purifier: Optional[bool] = None

    is_pregnant: Optional[bool] = None
    has_heart_condition: Optional[bool] = None
    medications: list[str] = Field(default_factory=list, description="Respiratory medications")


# Request schemas
class HealthProfileSave(HealthProfileBase):
    """Schema for creating or replacing a health profile."""
    pass


class HealthConditionsUpdate(BaseModel):
    """Schema for the quick conditions update."""

    has_respiratory_condition: bool
    conditions: list[str] = Field(default_factory=list)
    condition_severity: Optional[str] = None
    medications: list[str] = Field(default_factory=list)


# Response schemas
class HealthProfileResponse(HealthProfileBase):
    id: int
    user_key: str
    created_at: int
    updated_at: int
    is_complete: bool

    class Config:
        from_attributes = True


class HealthProfileSaveResult(BaseModel):
    success: bool = True
    profile_id: int
    is_new: bool


class HealthProfileStatus(BaseModel):
    exists: bool
    is_complete: bool
    profile: Optional[HealthProfileResponse] = None


class OperationResult(BaseModel):
    success: bool
    message: Optional[str] = None
