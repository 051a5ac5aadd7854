"""
Blog Article Store - Pagination

Fixed-size paging and the ``{code, data, meta}`` response envelope shared by
list-style queries.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Sequence

from sqlalchemy import Select
from sqlalchemy.orm import Session

PER_PAGE = 10


def page_offset(page: int | str | None) -> tuple[int, int]:
    """
    Normalize a 1-based page number and compute its row offset.

    Args:
        page: Page number, possibly a query-string value.

    Returns:
        Tuple of (page, offset).

    Raises:
        ValueError: If page is not an integer value.
    """
    page = max(int(page or 1), 1)
    return page, (page - 1) * PER_PAGE


@dataclass
class PageMeta:
    """Paging metadata for one result page."""

    current_page: int
    count: int
    per_page: int = PER_PAGE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.count / self.per_page)

    def to_dict(self) -> dict[str, int]:
        return {
            "current_page": self.current_page,
            "per_page": self.per_page,
            "count": self.count,
            "total": self.count,
            "total_pages": self.total_pages,
        }


@dataclass
class PageResult:
    """A page of serialized rows wrapped in the response envelope."""

    meta: PageMeta
    data: list[dict[str, Any]] = field(default_factory=list)
    code: int = 200

    def to_dict(self) -> dict[str, Any]:
        """Convert to the envelope returned to callers."""
        return {
            "code": self.code,
            "data": self.data,
            "meta": self.meta.to_dict(),
        }


def paginate(
    session: Session,
    stmt: Select,
    count_stmt: Select,
    page: int | str | None,
) -> tuple[Sequence[Any], int, int]:
    """
    Run a counted, paged query.

    Args:
        session: SQLAlchemy session instance.
        stmt: Ordered row query, without limit/offset.
        count_stmt: Query returning the total number of matching rows.
        page: Requested 1-based page.

    Returns:
        Tuple of (rows, count, page).
    """
    page, offset = page_offset(page)
    count = session.scalar(count_stmt) or 0
    rows = session.scalars(stmt.limit(PER_PAGE).offset(offset)).all()
    return rows, count, page
