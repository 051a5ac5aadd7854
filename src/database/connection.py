"""
Blog Article Store - Database Connection Management

Provides engine, session management and the explicit schema sync step.
"""

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.config import get_settings
from src.database.models import Base

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine() -> Engine:
    """
    Get SQLAlchemy engine.

    The engine owns the connection pool, so it is created once per process.

    Returns:
        SQLAlchemy Engine instance.
    """
    settings = get_settings()

    if settings.uses_sqlite and not settings.database_url_override:
        # Ensure directory exists
        settings.sqlite_path.parent.mkdir(parents=True, exist_ok=True)

    return create_engine(
        settings.database_url,
        echo=settings.sql_echo,
        pool_pre_ping=True,
    )


def get_session_factory(engine: Engine | None = None) -> sessionmaker:
    """
    Get session factory for creating database sessions.

    Args:
        engine: Engine to bind. Defaults to the configured engine.

    Returns:
        sessionmaker instance.
    """
    return sessionmaker(bind=engine or get_engine(), autocommit=False, autoflush=False)


@contextmanager
def get_session(engine: Engine | None = None) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Automatically handles commit/rollback and session cleanup.

    Yields:
        SQLAlchemy Session instance.

    Example:
        with get_session() as session:
            envelope = ArticleRepository(session).search(page=1, keyword="python")
    """
    SessionLocal = get_session_factory(engine)
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine | None = None) -> None:
    """
    Initialize database tables.

    Creates the category and article tables if they don't exist; existing
    tables are left untouched. Call once at process startup.
    For production, use Alembic migrations instead.
    """
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info(f"Schema synchronized: {', '.join(Base.metadata.tables)}")


def drop_db(engine: Engine | None = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data. Use only for testing/development.
    """
    engine = engine or get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.warning("All tables dropped")
