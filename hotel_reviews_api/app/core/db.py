"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``).  It backs
``SQLiteEntityStore``; the in‑memory store does not touch it.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY NOT NULL,
            email TEXT,
            first_name TEXT,
            last_name TEXT,
            profile_image_url TEXT,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP NOT NULL
        );

        CREATE TABLE IF NOT EXISTS hotels (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            location TEXT NOT NULL,
            latitude TEXT NOT NULL,
            longitude TEXT NOT NULL,
            created_at TIMESTAMP NOT NULL
        );

        CREATE TABLE IF NOT EXISTS reviews (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id TEXT NOT NULL,
            hotel_id INTEGER NOT NULL,
            rating INTEGER NOT NULL,
            comment TEXT NOT NULL,
            video_url TEXT NOT NULL,
            created_at TIMESTAMP NOT NULL,
            likes INTEGER NOT NULL DEFAULT 0,
            comments INTEGER NOT NULL DEFAULT 0,
            FOREIGN KEY(user_id) REFERENCES users(id),
            FOREIGN KEY(hotel_id) REFERENCES hotels(id)
        );
        """,
    ),
    # Migration 2: indices for the aggregation queries
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_hotels_location ON hotels(location);
        CREATE INDEX IF NOT EXISTS idx_reviews_hotel_id ON reviews(hotel_id);
        CREATE INDEX IF NOT EXISTS idx_reviews_user_id ON reviews(user_id);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def _lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as dict‑like objects keyed by column name.  A
    ``py_lower`` SQL function is registered so case‑insensitive
    comparisons follow Python's ``str.lower`` rather than SQLite's
    ASCII‑only ``lower``.
    """
    conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    conn.create_function("py_lower", 1, _lower, deterministic=True)
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor, commits and closes the connection on exit."""
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new entries of
    ``MIGRATIONS``.  Append new migrations with an incremented version
    number.
    """
    with get_cursor(database_path) as cursor:
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
                current_version = version
