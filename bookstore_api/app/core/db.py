"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and ``SQLiteStore``, the ``Store`` implementation the
repositories use in production.  A new connection is opened for every
store call and closed right after, so no connection is ever shared
between requests.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .config import settings
from .store import Predicate, Store, check_kind


logger = logging.getLogger(__name__)


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS categories (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS books (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            author TEXT NOT NULL,
            description TEXT,
            value REAL NOT NULL DEFAULT 0,
            publish_date TEXT NOT NULL,
            category_id INTEGER NOT NULL,
            FOREIGN KEY(category_id) REFERENCES categories(id)
        );
        """,
    ),
    # Migration 2: indexes for the lookups the repositories perform
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_books_category_id ON books(category_id);
        CREATE INDEX IF NOT EXISTS idx_books_name ON books(name);
        CREATE INDEX IF NOT EXISTS idx_categories_name ON categories(name);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL is an absolute path, use it directly.  Otherwise resolve
    it relative to the project root.  ``:memory:`` is not supported
    because every call opens a fresh connection.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def _casefold(value: Any) -> str:
    return str(value if value is not None else "").casefold()


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name, and foreign key enforcement is switched on for the lifetime of
    the connection.  A ``casefold`` SQL function is registered so text
    matching folds case with Python's rules, including non-ASCII letters
    that SQLite's own ``LOWER`` leaves untouched.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.create_function("casefold", 1, _casefold, deterministic=True)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor, commits and closes the connection."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any migration from
    ``MIGRATIONS`` with a higher version.  New migrations must be
    appended with an incremented version number.
    """
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s to %s", version, db_path)
                current_version = version


# SQLite stores INTEGER as a signed 64-bit value; binding anything larger
# raises OverflowError, and no row can carry such an id anyway.
MIN_INTEGER = -2 ** 63
MAX_INTEGER = 2 ** 63 - 1


def _fits_integer(value: Any) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        return MIN_INTEGER <= value <= MAX_INTEGER
    return True


class SQLiteStore(Store):
    """``Store`` backed by an SQLite database file."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def init(self) -> "SQLiteStore":
        init_db(self.db_path)
        return self

    def find_all(self, kind: str) -> List[Dict[str, Any]]:
        check_kind(kind)
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(f"SELECT * FROM {kind} ORDER BY id ASC").fetchall()
        return [dict(row) for row in rows]

    def find_by_id(self, kind: str, entity_id: int) -> Optional[Dict[str, Any]]:
        check_kind(kind)
        if not _fits_integer(entity_id):
            return None
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT * FROM {kind} WHERE id = ?", (entity_id,)
            ).fetchone()
        return dict(row) if row else None

    def find_by_predicate(self, kind: str, predicate: Predicate) -> List[Dict[str, Any]]:
        columns = check_kind(kind)
        for column in predicate.columns():
            if column not in columns:
                raise ValueError(f"Unknown column {column!r} for {kind}")

        where_clauses: List[str] = []
        params: List[Any] = []
        for column, value in predicate.equals.items():
            if not _fits_integer(value):
                return []
            where_clauses.append(f"{column} = ?")
            params.append(value)
        for column, value in predicate.not_equals.items():
            if not _fits_integer(value):
                continue
            where_clauses.append(f"{column} != ?")
            params.append(value)
        if predicate.contains is not None:
            if not predicate.contains_in:
                return []
            needle = predicate.contains.casefold()
            matches = " OR ".join(
                f"instr(casefold({c}), ?) > 0" for c in predicate.contains_in
            )
            where_clauses.append(f"({matches})")
            params.extend([needle] * len(predicate.contains_in))

        query = f"SELECT * FROM {kind}"
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        query += " ORDER BY id ASC"
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(query, tuple(params)).fetchall()
        return [dict(row) for row in rows]

    def insert(self, kind: str, row: Dict[str, Any]) -> int:
        columns = [c for c in check_kind(kind) if c != "id"]
        placeholders = ", ".join("?" for _ in columns)
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"INSERT INTO {kind} ({', '.join(columns)}) VALUES ({placeholders})",
                tuple(row.get(c) for c in columns),
            )
            return cursor.lastrowid

    def replace(self, kind: str, row: Dict[str, Any]) -> bool:
        columns = [c for c in check_kind(kind) if c != "id"]
        assignments = ", ".join(f"{c} = ?" for c in columns)
        if not _fits_integer(row.get("id")):
            return False
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"UPDATE {kind} SET {assignments} WHERE id = ?",
                (*(row.get(c) for c in columns), row["id"]),
            )
            return cursor.rowcount > 0

    def delete(self, kind: str, entity_id: int) -> bool:
        check_kind(kind)
        if not _fits_integer(entity_id):
            return False
        with get_cursor(self.db_path) as cursor:
            cursor.execute(f"DELETE FROM {kind} WHERE id = ?", (entity_id,))
            return cursor.rowcount > 0
