"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from app.core.config import settings

DATABASE_URL: str = settings.DATABASE_URL

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={ "check_same_thread": False })
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,          # Connection pool size
        max_overflow=10       # Max connections beyond pool_size
    )


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @app.get("/passport/{user_key}")
        def get_passport(user_key: str, db: Session = Depends(get_db)):
            return PassportService(db).get_passport(user_key)
    """
    with Session(engine) as session:
        yield session
