"""
Shared fixtures for Blog Article Store tests.

Each test runs against a fresh in-memory SQLite database.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from src.database.connection import drop_db, init_db
from src.database.models import Category


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine with the schema in place."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create a session that is rolled back after the test."""
    session = Session(engine)
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def categories(session):
    """Create two categories: Python and Databases."""
    python = Category(name="Python")
    databases = Category(name="Databases")
    session.add_all([python, databases])
    session.flush()
    return python, databases
