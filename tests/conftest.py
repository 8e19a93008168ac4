from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def test_db_path(tmp_path) -> str:
    """Temporary SQLite database with all migrations applied."""
    db_path = str(tmp_path / "signup.db")
    SQLiteMigrator(db_path, str(PROJECT_ROOT / "migrations")).run_migrations()
    return db_path
