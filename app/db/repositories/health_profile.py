"""
Health profile repository.

Handles database operations for HealthProfile model.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.models.health_profile import HealthProfile


class HealthProfileRepository:
    """Repository for HealthProfile database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user_key(self, user_key: str) -> Optional[HealthProfile]:
        statement = select(HealthProfile).where(HealthProfile.user_key == user_key)
        return self.session.exec(statement).first()

    def create(self, entry: HealthProfile) -> Optional[HealthProfile]:
        """Insert a new health profile.

        Returns:
            The created profile, or None if another request created the
            same ``user_key`` first.
        """
        self.session.add(entry)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return None
        self.session.refresh(entry)
        return entry

    def update(self, entry: HealthProfile) -> HealthProfile:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry: HealthProfile) -> None:
        self.session.delete(entry)
        self.session.commit()
