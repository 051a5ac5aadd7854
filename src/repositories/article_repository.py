"""
Blog Article Store - Article Repository

Create, whitelist update, soft delete, paginated listing/search and detail
lookup for Article entities.
"""

import logging
from typing import Any, Mapping

from sqlalchemy import ColumnElement, func, select, update
from sqlalchemy.orm import Session, contains_eager, defer

from src.database.models import ACTIVE, DELETED, Article
from src.repositories.pagination import PageMeta, PageResult, paginate

logger = logging.getLogger(__name__)

# Fields callers may write, keyed by their external (column) name
WRITABLE_FIELDS: dict[str, str] = {
    "title": "title",
    "author": "author",
    "introduction": "introduction",
    "categoryId": "category_id",
    "is_del": "is_del",
    "tag": "tag",
    "cover": "cover",
    "content": "content",
}

SHOW_DELETED = "is_del"


def _pick(data: Mapping[str, Any], fields: Mapping[str, str]) -> dict[str, Any]:
    """Keep only allowed keys of data, renamed to model attribute names."""
    return {attr: data[key] for key, attr in fields.items() if key in data}


class ArticleRepository:
    """Repository for Article entity operations."""

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self.session = session

    # ===========================================
    # Writes
    # ===========================================

    def create_article(self, data: Mapping[str, Any]) -> Article:
        """
        Create a new article.

        Keys outside the writable fields are ignored. ``is_del`` is not
        defaulted here; the column default applies when it is absent.

        Args:
            data: Article fields keyed by column name.

        Returns:
            Created article with generated ID.
        """
        article = Article(**_pick(data, WRITABLE_FIELDS))
        self.session.add(article)
        self.session.flush()
        logger.info(f"Created article {article.id} in category {article.category_id}")
        return article

    def update_article(self, article_id: int, data: Mapping[str, Any]) -> int:
        """
        Update the whitelisted fields of an article.

        Args:
            article_id: ID of the article.
            data: Partial article fields; unknown keys are ignored.

        Returns:
            Number of affected rows (0 when the article does not exist).
        """
        return self._update(article_id, _pick(data, WRITABLE_FIELDS))

    def delete_article(self, article_id: int, data: Mapping[str, Any]) -> int:
        """
        Soft delete an article by writing its ``is_del`` flag.

        Args:
            article_id: ID of the article.
            data: Payload carrying ``is_del``; every other key is ignored.

        Returns:
            Number of affected rows (0 when the article does not exist).
        """
        return self._update(article_id, _pick(data, {"is_del": "is_del"}))

    def _update(self, article_id: int, values: dict[str, Any]) -> int:
        if not values:
            logger.debug(f"Nothing to write for article {article_id}")
            return 0

        stmt = (
            update(Article)
            .where(Article.id == article_id)
            .values({getattr(Article, attr): value for attr, value in values.items()})
            .execution_options(synchronize_session="evaluate")
        )
        affected = self.session.execute(stmt).rowcount
        logger.info(f"Updated article {article_id} fields={sorted(values)} affected={affected}")
        return affected

    # ===========================================
    # Queries
    # ===========================================

    def search(self, page: int | str = 1, keyword: str | None = "") -> dict[str, Any]:
        """
        Search active articles by title substring.

        The match is case-insensitive and wildcard characters in the keyword
        are matched literally.

        Args:
            page: 1-based page number.
            keyword: Title substring; empty matches every article.

        Returns:
            Envelope with the page rows (without content) and paging meta.
        """
        criteria = [Article.is_del == ACTIVE]
        if keyword:
            criteria.append(Article.title.icontains(keyword, autoescape=True))

        logger.debug(f"Searching articles page={page} keyword={keyword!r}")
        return self._page(criteria, page, exclude=("content",))

    def get_article_list(
        self,
        page: int | str = 1,
        category_id: int | str | None = None,
        title: str | None = None,
        include: str | None = None,
    ) -> dict[str, Any]:
        """
        List articles, filtered by category or exact title.

        At most one filter applies: ``category_id`` wins over ``title``.
        ``include="is_del"`` both returns soft-deleted rows and keeps the
        ``is_del`` field in each row.

        Args:
            page: 1-based page number.
            category_id: Category to filter by.
            title: Exact title to filter by.
            include: Pass "is_del" to show soft-deleted articles.

        Returns:
            Envelope with the page rows (without content) and paging meta.
        """
        show_deleted = include == SHOW_DELETED

        criteria = [Article.is_del.in_([ACTIVE, DELETED] if show_deleted else [ACTIVE])]
        predicate = self._list_filter(category_id, title)
        if predicate is not None:
            criteria.append(predicate)

        exclude = ("content",) if show_deleted else ("content", "is_del")
        logger.debug(
            f"Listing articles page={page} category_id={category_id} "
            f"title={title!r} show_deleted={show_deleted}"
        )
        return self._page(criteria, page, exclude=exclude)

    def get_article_detail(self, article_id: int) -> dict[str, Any] | None:
        """
        Get an active article with its category.

        Args:
            article_id: ID of the article.

        Returns:
            Article row including content (without ``is_del``), or None if
            not found or soft-deleted.
        """
        stmt = (
            select(Article)
            .join(Article.category)
            .options(contains_eager(Article.category))
            .where(Article.id == article_id, Article.is_del == ACTIVE)
            .execution_options(populate_existing=True)
        )
        article = self.session.scalars(stmt).first()
        if article is None:
            return None
        return self._serialize(article, exclude=("is_del",))

    @staticmethod
    def _list_filter(
        category_id: int | str | None,
        title: str | None,
    ) -> ColumnElement[bool] | None:
        """Pick the single list filter in priority order."""
        if category_id:
            return Article.category_id == int(category_id)
        if title:
            return Article.title == title
        return None

    def _page(
        self,
        criteria: list[ColumnElement[bool]],
        page: int | str,
        exclude: tuple[str, ...],
    ) -> dict[str, Any]:
        stmt = (
            select(Article)
            .join(Article.category)
            .options(
                contains_eager(Article.category),
                *[defer(getattr(Article, name)) for name in exclude],
            )
            .where(*criteria)
            .order_by(Article.id.desc())
            .execution_options(populate_existing=True)
        )
        count_stmt = (
            select(func.count(Article.id))
            .select_from(Article)
            .join(Article.category)
            .where(*criteria)
        )

        rows, count, page = paginate(self.session, stmt, count_stmt, page)
        return PageResult(
            meta=PageMeta(current_page=page, count=count),
            data=[self._serialize(article, exclude) for article in rows],
        ).to_dict()

    @staticmethod
    def _serialize(article: Article, exclude: tuple[str, ...]) -> dict[str, Any]:
        row = article.to_dict(exclude=exclude)
        row["category"] = article.category.to_dict()
        return row
