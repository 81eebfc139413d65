"""
User and session database models.

Accounts authenticate with email + password and hold any number of
opaque bearer sessions (one per device / login).
"""

from typing import Optional

from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel

from app.core.timeutils import now_ms


class User(SQLModel, table=True):
    """
    User model for authentication.

    ``email`` is stored trimmed and lower-cased.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    name: str = Field(nullable=False, max_length=255)
    password_hash: str = Field(nullable=False)

    # Epoch milliseconds
    created_at: int = Field(default_factory=now_ms, sa_type=BigInteger, nullable=False)


class AuthSession(SQLModel, table=True):
    """
    Bearer session issued on signup / login.

    Expired rows are only removed when their owner logs in again.
    """
    __tablename__ = "auth_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    token: str = Field(unique=True, index=True, max_length=255, nullable=False)
    expires_at: int = Field(sa_type=BigInteger, nullable=False)
