"""
Shared database schema definitions.
This module provides schema creation functions used by the store, the migration and tests.
"""


def create_tables(cursor):
    """
    Create all application tables.
    This function is idempotent - safe to call multiple times.
    """
    # No constraints beyond the key: price and quantity are stored as coerced
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            price REAL,
            quantity INTEGER,
            description TEXT
        )
    """)


def drop_tables(cursor):
    """
    Drop all application tables.
    """
    cursor.execute("DROP TABLE IF EXISTS products")
