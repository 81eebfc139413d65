"""
Authentication endpoints.

Handles signup, login, session lookup and logout.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from app.api.dependencies import get_current_session, get_optional_session
from app.core.security import oauth2_scheme
from app.core.timeutils import now_ms
from app.db.session import get_db
from app.schemas.user import (AuthResponse, LogoutRequest, LogoutResponse, SessionInfo, TokenResponse, UserLogin,
                              UserSignup, )
from app.services.auth_service import AuthService

router = APIRouter()


@router.get("/ping", summary="Diagnostic ping.")
def ping():
    return { "status": "ok", "timestamp": now_ms() }


@router.post("/signup",
             summary="Create an account and open a session.",
             response_model=AuthResponse,
             status_code=status.HTTP_201_CREATED)
def signup(data: UserSignup, db: Session = Depends(get_db)):
    """
    Register a new user.

    Raises:
        HTTPException 409: If email already registered
    """
    return AuthService(db).signup(data.email, data.password, data.name)


@router.post("/login",
             summary="User login endpoint via JSON.",
             response_model=AuthResponse)
def login(data: UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate user via JSON body.

    Raises:
        HTTPException 404: If no account exists for the email
        HTTPException 401: If the password is wrong
    """
    return AuthService(db).login(data.email, data.password)


@router.post("/token",
             summary="User login endpoint via OAuth2 form (for Swagger UI).",
             response_model=TokenResponse)
def login_form(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    Authenticate user via OAuth2 form.

    Use email as username.
    """
    result = AuthService(db).login(form_data.username, form_data.password)
    return TokenResponse(**result.model_dump(), access_token=result.token)


@router.get("/session",
            summary="Resolve the bearer token; null when absent or expired.",
            response_model=Optional[SessionInfo])
def get_session(current: Optional[SessionInfo] = Depends(get_optional_session)):
    return current


@router.get("/me",
            summary="Current user (401 without a valid session).",
            response_model=SessionInfo)
def me(current: SessionInfo = Depends(get_current_session)):
    return current


@router.post("/logout",
             summary="Delete the session.",
             response_model=LogoutResponse)
def logout(data: Optional[LogoutRequest] = None, token: Optional[str] = Depends(oauth2_scheme),
           db: Session = Depends(get_db)):
    """Logs out the token in the body, or the bearer token when the body has none."""
    body_token = data.token if data else None
    return AuthService(db).logout(body_token or token)
