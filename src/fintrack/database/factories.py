"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyDatabase

DEFAULT_OWNER_ID = "local"


def create_sqlite_database(
    database_path: Optional[str] = None, owner_id: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create an owner-scoped SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FINTRACK_DB_PATH
            environment variable, then defaults to ~/.fintrack/fintrack.db
        owner_id: Owner the instance acts for. If None, checks FINTRACK_USER
            environment variable, then defaults to "local"

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("FINTRACK_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".fintrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "fintrack.db")

    if owner_id is None:
        owner_id = os.environ.get("FINTRACK_USER", DEFAULT_OWNER_ID)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url, owner_id=owner_id)
