"""
Blog Article Store - Database Module

Provides database connection, session management, and model exports.
"""

from src.database.models import ACTIVE, DELETED, Article, Base, Category
from src.database.connection import (
    drop_db,
    get_engine,
    get_session,
    init_db,
)

__all__ = [
    # Models
    "ACTIVE",
    "DELETED",
    "Article",
    "Base",
    "Category",
    # Connection
    "drop_db",
    "get_engine",
    "get_session",
    "init_db",
]
