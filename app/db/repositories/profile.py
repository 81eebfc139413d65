"""
Profile and exposure repositories.

Handles database operations for the passport tables.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.models.profile import Exposure, Profile


class ProfileRepository:
    """Repository for Profile database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user_key(self, user_key: str) -> Optional[Profile]:
        statement = select(Profile).where(Profile.user_key == user_key)
        return self.session.exec(statement).first()

    def get_all(self) -> list[Profile]:
        return list(self.session.exec(select(Profile)).all())

    def get_or_create(self, profile: Profile) -> tuple[Profile, bool]:
        """Insert ``profile`` unless one with the same ``user_key`` exists.

        A concurrent insert of the same key loses on the unique constraint;
        the loser rolls back and returns the winner's row.

        Returns:
            Tuple of (profile, created)
        """
        existing = self.get_by_user_key(profile.user_key)
        if existing:
            return existing, False

        self.session.add(profile)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            existing = self.get_by_user_key(profile.user_key)
            if existing is None:
                raise
            return existing, False
        self.session.refresh(profile)
        return profile, True

    def update(self, profile: Profile) -> Profile:
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile


class ExposureRepository:
    """Repository for Exposure database operations."""

    def __init__(self, session: Session):
        self.session = session

    def log(self, entry: Exposure, profile: Profile) -> Exposure:
        """Insert ``entry`` and save the updated ``profile`` in one transaction.

        Nothing is persisted if the commit fails.
        """
        self.session.add(entry)
        self.session.add(profile)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self.session.refresh(entry)
        self.session.refresh(profile)
        return entry

    def get_latest_by_profile(self, profile_id: int, limit: int) -> list[Exposure]:
        """Most recent exposures of a profile, newest first."""
        statement = (
            select(Exposure)
            .where(Exposure.profile_id == profile_id)
            .order_by(Exposure.timestamp.desc(), Exposure.id.desc())
            .limit(limit)
        )
        return list(self.session.exec(statement).all())
