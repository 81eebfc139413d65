"""
User and session API schemas.

Pydantic models for auth request/response validation.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


# Request schemas
class UserSignup(BaseModel):
    """Schema for account creation."""
    email: EmailStr
    password: str = Field(..., min_length=1, description="Account password")
    name: str = Field("", max_length=255, description="Display name (defaults to the email's local part)")


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class LogoutRequest(BaseModel):
    token: Optional[str] = None


# Response schemas
class UserPublic(BaseModel):
    """User data safe to return to clients (no password hash)."""
    id: int
    email: str
    name: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Returned by signup and login."""
    token: str
    expires_at: int = Field(..., description="Epoch milliseconds")
    user_key: str
    user: UserPublic


class SessionInfo(BaseModel):
    """Resolved session."""
    user: UserPublic
    user_key: str
    expires_at: int


class TokenResponse(AuthResponse):
    """OAuth2-compatible login response (for Swagger UI)."""
    access_token: str
    token_type: str = "bearer"


class LogoutResponse(BaseModel):
    ok: bool = True
