"""Database layer for worklog application."""

from worklog.database.base import Database
from worklog.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
