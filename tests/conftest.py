"""Shared fixtures: a fresh in-memory database per test and an API client bound to it."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from scrumboard.config import Settings
from scrumboard.database import build_engine, build_session_factory, init_schema
from scrumboard.main import create_app

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def engine():
    engine = build_engine(TEST_DATABASE_URL)
    init_schema(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session(engine) -> Session:
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="development", API_PREFIX="/api")


@pytest.fixture
def client(engine, test_settings):
    app = create_app(test_settings, engine=engine, seed_default_board=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_commit():
    """A stand-in for ``Session.commit`` that fails the way a broken disk would."""

    def commit(*args, **kwargs):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    return commit
