"""
Product persistence.

A single long-lived SQLite connection is shared by every request. FastAPI runs
synchronous endpoints on a thread pool, so access is serialized with a lock.
"""

import logging
import sqlite3
import threading
from typing import List, Optional

from app.database import get_connection
from app.schema import create_tables

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = ("id", "name", "price", "quantity", "description")


class StorageError(Exception):
    """Raised when a write to the products table fails."""
    pass


class ProductStore:
    """Owns the products table and the connection used to reach it."""

    def __init__(self, path: str):
        self.path = path
        self._conn = get_connection(path, check_same_thread=False)
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """Ensure the products table exists. Errors propagate to the caller."""
        with self._lock:
            cursor = self._conn.cursor()
            create_tables(cursor)
            self._conn.commit()
        logger.info("Product store ready at %s", self.path)

    def list_all(self) -> List[dict]:
        with self._lock:
            cursor = self._conn.cursor()
            cursor.execute(
                "SELECT id, name, price, quantity, description FROM products ORDER BY id"
            )
            rows = cursor.fetchall()
        return [{column: row[column] for column in PRODUCT_COLUMNS} for row in rows]

    def insert(
        self,
        name: Optional[str],
        price: Optional[float],
        description: Optional[str],
        quantity: Optional[int],
    ) -> int:
        """Insert a product and return the id assigned to it."""
        cursor = self._write(
            "INSERT INTO products (name, price, description, quantity) VALUES (?, ?, ?, ?)",
            (name, price, description, quantity),
        )
        if not cursor.lastrowid:
            raise StorageError("Insert did not assign a row id")
        return cursor.lastrowid

    def update_by_id(
        self,
        product_id: Optional[int],
        name: Optional[str],
        price: Optional[float],
        description: Optional[str],
        quantity: Optional[int],
    ) -> int:
        """Overwrite every mutable field of a product. Returns the rows affected."""
        cursor = self._write(
            "UPDATE products SET name = ?, price = ?, description = ?, quantity = ? WHERE id = ?",
            (name, price, description, quantity, product_id),
        )
        return cursor.rowcount

    def delete_by_id(self, product_id: Optional[int]) -> int:
        """Delete a product. Returns the rows affected."""
        cursor = self._write("DELETE FROM products WHERE id = ?", (product_id,))
        return cursor.rowcount

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _write(self, sql: str, params: tuple) -> sqlite3.Cursor:
        with self._lock:
            try:
                cursor = self._conn.cursor()
                cursor.execute(sql, params)
                self._conn.commit()
                return cursor
            except (sqlite3.Error, OverflowError) as e:
                self._conn.rollback()
                raise StorageError(str(e)) from e
