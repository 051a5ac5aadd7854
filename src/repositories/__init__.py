"""
Blog Article Store - Repository Layer

Provides data access abstractions for Articles and Categories.
"""

from src.repositories.article_repository import ArticleRepository
from src.repositories.category_repository import CategoryRepository
from src.repositories.pagination import PER_PAGE, PageMeta, PageResult

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
    "PER_PAGE",
    "PageMeta",
    "PageResult",
]
