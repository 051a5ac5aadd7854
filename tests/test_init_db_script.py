"""
Unit tests for the database init script.
"""

import pytest
from unittest.mock import patch

import init_db as init_db_script
from src.database.connection import get_session
from src.repositories.category_repository import CategoryRepository


@pytest.fixture
def bound_session(engine):
    """Route the script's sessions to the test engine."""
    with patch.object(init_db_script, "get_session", lambda: get_session(engine)):
        yield engine


def category_names(engine) -> list[str]:
    with get_session(engine) as session:
        return [c.name for c in CategoryRepository(session).get_all()]


class TestSeedCategories:
    """Tests for seed_categories."""

    def test_creates_each_name_once(self, bound_session):
        """Test that repeated names on the command line are created once."""
        created = init_db_script.seed_categories(["Python", "Databases", "Python"])

        assert created == 2
        assert category_names(bound_session) == ["Python", "Databases"]

    def test_skips_existing_categories(self, bound_session):
        """Test that seeding again only adds missing names."""
        init_db_script.seed_categories(["Python"])

        created = init_db_script.seed_categories(["Python", "Rust"])

        assert created == 1
        assert category_names(bound_session) == ["Python", "Rust"]

    def test_nothing_to_create(self, bound_session):
        """Test an empty name list."""
        assert init_db_script.seed_categories([]) == 0
        assert category_names(bound_session) == []


class TestMain:
    """Tests for the command-line entry point."""

    @patch.object(init_db_script, "seed_categories", return_value=1)
    @patch.object(init_db_script, "init_db")
    def test_syncs_schema_then_seeds(self, mock_init_db, mock_seed):
        """Test that categories are seeded after the schema sync."""
        assert init_db_script.main(["--category", "Python"]) == 0

        mock_init_db.assert_called_once_with()
        mock_seed.assert_called_once_with(["Python"])

    @patch.object(init_db_script, "drop_db")
    @patch.object(init_db_script, "init_db")
    @patch("builtins.input", return_value="n")
    def test_reset_aborts_without_confirmation(self, mock_input, mock_init_db, mock_drop_db):
        """Test that --reset drops nothing unless confirmed."""
        assert init_db_script.main(["--reset"]) == 1

        mock_drop_db.assert_not_called()
        mock_init_db.assert_not_called()
