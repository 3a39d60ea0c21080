#!/usr/bin/env python3
"""Migration script to add file assignment columns to the day_logs table.

Databases created before files could be assigned to projects and
categories have a day_logs table without these columns:
- file_project_map (JSON, nullable; NULL marks a legacy entry)
- file_category_map (JSON, default '{}')

Existing rows keep file_project_map NULL, so editing them later derives
the assignments from the day's projects.

Usage:
    python migrations/migrate_add_file_maps.py [--db-path PATH]
"""

import sys
from pathlib import Path

# Add src to path so we can import worklog modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import text, inspect
from worklog.database.factories import create_sqlite_database


def column_exists(engine, table_name: str, column_name: str) -> bool:
    """Check if a column exists in a table.

    Args:
        engine: SQLAlchemy engine
        table_name: Name of the table
        column_name: Name of the column

    Returns:
        True if column exists, False otherwise
    """
    inspector = inspect(engine)
    columns = [col["name"] for col in inspector.get_columns(table_name)]
    return column_name in columns


def migrate_database(database_path: str | None = None) -> list[str]:
    """Add the file assignment columns that are missing.

    Args:
        database_path: Path to database file. If None, uses default location.

    Returns:
        Names of the columns that were added

    Raises:
        RuntimeError: If the day_logs table does not exist
    """
    db = create_sqlite_database(database_path=database_path)
    db.connect()

    try:
        session = db.session_factory()
        try:
            engine = session.bind
        finally:
            session.close()

        inspector = inspect(engine)
        if "day_logs" not in inspector.get_table_names():
            raise RuntimeError("Table 'day_logs' does not exist. Please initialize the database schema first.")

        statements = {
            "file_project_map": "ALTER TABLE day_logs ADD COLUMN file_project_map JSON",
            "file_category_map": "ALTER TABLE day_logs ADD COLUMN file_category_map JSON NOT NULL DEFAULT '{}'",
        }
        missing = [name for name in statements if not column_exists(engine, "day_logs", name)]
        if not missing:
            print("Migration already applied: columns exist in day_logs table")
            return []

        print("Starting migration: adding file assignment columns...")
        with engine.begin() as conn:
            for name in missing:
                conn.execute(text(statements[name]))
                print(f"  Added column: {name}")

        print("Migration completed successfully!")
        return missing
    finally:
        db.disconnect()


def main():
    """Main entry point for migration script."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Migrate database to add file assignment columns"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        help="Path to database file (overrides WORKLOG_DB_PATH environment variable)",
    )
    args = parser.parse_args()

    try:
        migrate_database(database_path=args.db_path)
        return 0
    except Exception as e:
        print(f"\nMigration failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
