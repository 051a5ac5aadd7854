"""
Blog Article Store - SQLAlchemy Models

Defines Category and Article models. Articles are soft-deleted through the
``is_del`` flag and never removed physically.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    SmallInteger,
    String,
    Text,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


ACTIVE = 0
DELETED = 1


class Base(DeclarativeBase):
    """Base class for all models."""

    def to_dict(self, exclude: tuple[str, ...] = ()) -> dict[str, Any]:
        """
        Serialize mapped columns keyed by column name.

        Excluded columns are skipped without being accessed, so deferred
        columns are never loaded by serialization.

        Args:
            exclude: Column names to leave out.

        Returns:
            Dictionary of column name to value.
        """
        return {
            column.name: getattr(self, attr.key)
            for attr in self.__mapper__.column_attrs
            for column in attr.columns
            if column.name not in exclude
        }


class Category(Base):
    """Article category."""

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    articles: Mapped[list["Article"]] = relationship(
        "Article",
        back_populates="category",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"


class Article(Base):
    """
    Blog article.

    ``is_del`` is 0 for active rows and 1 for soft-deleted rows.
    """

    __tablename__ = "article"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    introduction: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tag: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cover: Mapped[str | None] = mapped_column(String(500), nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Foreign key (column keeps its camelCase name)
    category_id: Mapped[int] = mapped_column(
        "categoryId",
        Integer,
        ForeignKey("category.id"),
        nullable=False,
        index=True,
    )

    # Soft delete flag
    is_del: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=ACTIVE,
        server_default="0",
        index=True,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    category: Mapped["Category"] = relationship("Category", back_populates="articles")

    def __repr__(self) -> str:
        title = (self.title or "")[:30]
        return f"<Article(id={self.id}, category_id={self.category_id}, title={title}...)>"
