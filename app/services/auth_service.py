"""
Session auth service.

Business logic for signup, login, session lookup and logout.

State per user: anonymous -> (signup | login) -> authenticated(session)
-> (logout | expiry) -> anonymous.  A user may hold several live
sessions (one per device); expired ones are swept only when that user
logs in again.
"""

from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import AlreadyExistsError, InvalidCredentialsError, NotFoundError
from app.core.logging import get_logger
from app.core.security import generate_session_token, get_password_hash, needs_rehash, verify_password
from app.core.timeutils import now_ms
from app.db.repositories.user import AuthSessionRepository, UserRepository
from app.models.user import AuthSession, User
from app.schemas.user import AuthResponse, LogoutResponse, SessionInfo, UserPublic

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def user_key_for(user_id: int) -> str:
    """Profile key of a signed-in user."""
    return f"user-{user_id}"


class AuthService:
    """Service for account and session business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.users = UserRepository(session)
        self.sessions = AuthSessionRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def signup(self, email: str, password: str, name: str = "") -> AuthResponse:
        """
        Create an account and open a first session.

        Args:
            email: Account email (trimmed and lower-cased before use)
            password: Plain password
            name: Display name; the email's local part when empty

        Returns:
            Token, expiry, user key and public user data

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        email = normalize_email(email)
        if self.users.exists_by_email(email):
            raise AlreadyExistsError("Account already exists. Try signing in.")

        user = User(email=email, name=name or email.split("@")[0], password_hash=get_password_hash(password), )
        user = self.users.create(user)
        if user is None:
            logger.info("signup_race_lost", reason="email_taken")
            raise AlreadyExistsError("Account already exists. Try signing in.")
        logger.info("user_signed_up", user_id=user.id)

        return self._open_session(user)

    def login(self, email: str, password: str) -> AuthResponse:
        """
        Authenticate and open a new session.

        Only this user's expired sessions are removed; live sessions on
        other devices survive.

        Raises:
            NotFoundError: If no account exists for the email
            InvalidCredentialsError: If the password does not match
        """
        email = normalize_email(email)
        user = self.users.get_by_email(email)
        if not user:
            raise NotFoundError("No account found for that email")

        if not verify_password(password, user.password_hash):
            logger.warning("login_failed", user_id=user.id, reason="invalid_password")
            raise InvalidCredentialsError("Invalid password")

        if needs_rehash(user.password_hash):
            user.password_hash = get_password_hash(password)
            user = self.users.update(user)
            logger.info("password_rehashed", user_id=user.id)

        swept = self.sessions.delete_expired_for_user(user.id, now_ms())
        if swept:
            logger.info("expired_sessions_removed", user_id=user.id, count=swept)

        return self._open_session(user)

    def session(self, token: Optional[str]) -> Optional[SessionInfo]:
        """
        Resolve a session token.

        Returns None for a missing, unknown or expired token, or when the
        owning user no longer exists.  Expired rows are left in place.
        """
        if not token:
            return None

        record = self.sessions.get_by_token(token)
        if record is None or record.expires_at < now_ms():
            return None

        user = self.users.get_by_id(record.user_id)
        if user is None:
            return None

        return SessionInfo(user=UserPublic.model_validate(user), user_key=user_key_for(user.id),
                           expires_at=record.expires_at, )

    def logout(self, token: Optional[str]) -> LogoutResponse:
        """Delete the session if it exists.  Always succeeds."""
        if token:
            record = self.sessions.get_by_token(token)
            if record is not None:
                user_id = record.user_id
                self.sessions.delete(record)
                logger.info("user_logged_out", user_id=user_id)
        return LogoutResponse(ok=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _open_session(self, user: User) -> AuthResponse:
        auth_session = AuthSession(user_id=user.id, token=generate_session_token(),
                                   expires_at=now_ms() + settings.SESSION_TTL_MS, )
        auth_session = self.sessions.create(auth_session)

        return AuthResponse(token=auth_session.token, expires_at=auth_session.expires_at,
                            user_key=user_key_for(user.id), user=UserPublic.model_validate(user), )
