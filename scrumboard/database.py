import logging
from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from scrumboard.exceptions import StorageError

logger = logging.getLogger(__name__)

# Base class for the ORM models
Base = declarative_base()


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on FK enforcement for every new SQLite connection so cascades apply."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record) -> None:  # pragma: no cover - SQLAlchemy callback
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for ``database_url``.

    File-backed SQLite databases get their parent directory created; the
    in-memory URL is pinned to a single shared connection.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        engine = create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    else:
        db_file = database_url.split("sqlite:///", 1)[-1]
        Path(db_file).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(database_url, connect_args=connect_args)

    _enable_sqlite_foreign_keys(engine)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_schema(engine: Engine) -> None:
    # Import models so their tables are registered on Base.metadata
    from scrumboard import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.debug("Database tables initialized")


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a session from the app's session factory."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def commit_or_rollback(db: Session, action: str) -> None:
    """Commit the session, or roll back and raise ``StorageError`` if the store fails.

    ``action`` describes the operation for the log; clients only ever see the
    generic storage message.
    """
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error %s", action)
        raise StorageError() from exc
