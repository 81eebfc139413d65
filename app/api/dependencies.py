"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.security import oauth2_scheme
from app.db.session import get_db
from app.schemas.user import SessionInfo
from app.services.auth_service import AuthService


def get_optional_session(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> Optional[
    SessionInfo]:
    """Resolve the bearer token to a session, or None when anonymous."""
    return AuthService(db).session(token)


def get_current_session(current: Optional[SessionInfo] = Depends(get_optional_session)) -> SessionInfo:
    """Require a valid session."""
    if current is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return current
