"""
SQLite connection helpers.
"""

import sqlite3
from contextlib import contextmanager

from app.config import load_settings


def get_connection(path=None, check_same_thread=True):
    """
    Open a connection whose rows can be read by column name.
    Without a path, the configured DATABASE_PATH (environment or .env) is used.
    """
    conn = sqlite3.connect(path or load_settings().database_path, check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_db(path=None):
    """
    Yield a short-lived connection.
    Commits on success, rolls back on error, always closes.
    """
    conn = get_connection(path)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
