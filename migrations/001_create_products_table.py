"""
Migration: Create products table
Version: 001
Description: Creates the products table and the migrations tracking table
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import get_db
from app.schema import create_tables, drop_tables

MIGRATION_NAME = "001_create_products_table"


def upgrade(path=None):
    """Apply the migration."""
    with get_db(path) as conn:
        cursor = conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS _migrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        cursor.execute("SELECT 1 FROM _migrations WHERE name = ?", (MIGRATION_NAME,))
        if cursor.fetchone():
            print(f"Migration {MIGRATION_NAME} already applied. Skipping.")
            return

        create_tables(cursor)
        cursor.execute("INSERT INTO _migrations (name) VALUES (?)", (MIGRATION_NAME,))

    print(f"Migration {MIGRATION_NAME} applied successfully.")


def downgrade(path=None):
    """Revert the migration."""
    with get_db(path) as conn:
        cursor = conn.cursor()
        drop_tables(cursor)
        cursor.execute("DELETE FROM _migrations WHERE name = ?", (MIGRATION_NAME,))

    print(f"Migration {MIGRATION_NAME} reverted successfully.")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run database migration")
    parser.add_argument(
        "action",
        choices=["upgrade", "downgrade"],
        help="Migration action to perform"
    )

    args = parser.parse_args()

    if args.action == "upgrade":
        upgrade()
    elif args.action == "downgrade":
        downgrade()
