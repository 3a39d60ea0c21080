"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from worklog.database.sqlalchemy_db import SQLAlchemyDatabase
from worklog.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DIR_NAME = ".worklog"
DEFAULT_FILE_NAME = "worklog.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file: explicit path, then WORKLOG_DB_PATH, then ~/.worklog/worklog.db.

    The parent directory is created when missing.
    """
    value = database_path or os.environ.get("WORKLOG_DB_PATH")
    if value:
        path = Path(value).expanduser()
    else:
        path = Path.home() / DEFAULT_DIR_NAME / DEFAULT_FILE_NAME

    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks WORKLOG_DB_PATH
            environment variable, then defaults to ~/.worklog/worklog.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    logger.debug("Using database %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
