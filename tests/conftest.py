"""Shared fixtures: in-memory SQLite database and an API client bound to it."""

import os

# Must be set before app.core.config is first imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.db.session import get_db
from app.main import app as fastapi_app


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _override_get_db():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _override_get_db
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()
