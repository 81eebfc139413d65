"""
User and session repositories.

Handles database operations for User and AuthSession models.  Emails are
expected already normalised (stripped and lower-cased) by the caller.
"""

from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.user import AuthSession, User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> Optional[User]:
        """Insert a new user.

        Returns:
            The created user, or None if the email was registered by a
            concurrent request first.
        """
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return None
        self.session.refresh(user)
        return user

    def update(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        statement = select(User.id).where(User.email == email).limit(1)
        return self.session.exec(statement).first() is not None


class AuthSessionRepository:
    """Repository for AuthSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, auth_session: AuthSession) -> AuthSession:
        self.session.add(auth_session)
        self.session.commit()
        self.session.refresh(auth_session)
        return auth_session

    def get_by_token(self, token: str) -> Optional[AuthSession]:
        return self.session.exec(select(AuthSession).where(AuthSession.token == token)).first()

    def get_all_by_user(self, user_id: int) -> list[AuthSession]:
        statement = select(AuthSession).where(AuthSession.user_id == user_id).order_by(AuthSession.expires_at)
        return list(self.session.exec(statement).all())

    def delete_expired_for_user(self, user_id: int, now: int) -> int:
        """Delete the user's sessions with ``expires_at < now``.

        Sessions of other users are never touched, expired or not.

        Returns:
            Number of deleted sessions
        """
        statement = delete(AuthSession).where(AuthSession.user_id == user_id, AuthSession.expires_at < now)
        result = self.session.execute(statement)
        self.session.commit()
        return result.rowcount

    def delete(self, auth_session: AuthSession) -> None:
        self.session.delete(auth_session)
        self.session.commit()
