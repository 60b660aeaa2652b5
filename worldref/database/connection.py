"""Database connection and session management."""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from worldref.config import settings
from worldref.database.models.base import Base


def make_engine(database_url: str | None = None) -> Engine:
    """Create an engine for the given URL (defaults to settings)."""
    return create_engine(
        database_url or settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )


def init_db(engine: Engine) -> None:
    """Create the world tables.

    This is mainly for development/testing; the world database is
    normally owned by the game server.
    """
    Base.metadata.create_all(bind=engine)


@contextmanager
def get_db_session(database_url: str | None = None) -> Generator[Session, None, None]:
    """Get a read-only database session with automatic cleanup.

    Usage:
        with get_db_session() as db:
            graph = DatabaseObjectGraph(db)
    """
    engine = make_engine(database_url)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        engine.dispose()
