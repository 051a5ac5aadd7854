"""
Blog Article Store - Category Repository

CRUD operations for Category entities.
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.database.models import Category


class CategoryRepository:
    """Repository for Category entity operations."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_all(self) -> Sequence[Category]:
        """Get all categories ordered by ID."""
        stmt = select(Category).order_by(Category.id)
        return self.session.scalars(stmt).all()

    def get_by_id(self, category_id: int) -> Category | None:
        return self.session.get(Category, category_id)

    def get_by_name(self, name: str) -> Category | None:
        stmt = select(Category).where(Category.name == name)
        return self.session.scalars(stmt).first()

    def create(self, category: Category) -> Category:
        """
        Create a new category.

        Args:
            category: Category instance to create.

        Returns:
            Created category with generated ID.
        """
        self.session.add(category)
        self.session.flush()
        return category

    def bulk_create(self, categories: list[Category]) -> list[Category]:
        """Create multiple categories at once."""
        self.session.add_all(categories)
        self.session.flush()
        return categories
