"""
Blog Article Store - Database Init Script

Synchronizes the schema (creates missing tables, never drops existing ones)
and optionally seeds categories. Run once at process startup.
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import get_settings
from src.database.connection import drop_db, get_session, init_db
from src.database.models import Category
from src.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


def seed_categories(names: list[str]) -> int:
    """
    Create categories that do not exist yet.

    Args:
        names: Category names to ensure.

    Returns:
        Number of categories created.
    """
    with get_session() as session:
        repo = CategoryRepository(session)
        missing = [name for name in dict.fromkeys(names) if repo.get_by_name(name) is None]
        repo.bulk_create([Category(name=name) for name in missing])

    for name in missing:
        logger.info(f"Created category: {name}")
    return len(missing)


def main(argv: list[str] | None = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Initialize the article database schema")
    parser.add_argument(
        "--category",
        action="append",
        default=[],
        metavar="NAME",
        help="Category to create if missing (repeatable)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables before creating them (deletes all data)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.reset:
        response = input("Drop all tables and data? (y/N): ")
        if response.lower() != "y":
            print("Aborted.")
            return 1
        drop_db()

    init_db()

    if args.category:
        created = seed_categories(args.category)
        print(f"Created {created} categories.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
