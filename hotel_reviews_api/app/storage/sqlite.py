"""
SQLite‑backed entity store.

Each operation opens its own connection, runs as a single unit of
work and closes the connection again, so callers never observe a
half‑applied write.  Ids come from ``AUTOINCREMENT`` columns, which
never reuse a value.  Foreign keys are declared but not enforced,
matching the in‑memory store.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.db import get_cursor, init_db
from ..schemas.hotel import HotelCreate, HotelRead
from ..schemas.review import ReviewCreate, ReviewRead
from ..schemas.user import UserRead, UserUpsert
from .base import EntityStore


logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, email, first_name, last_name, profile_image_url, created_at, updated_at"
_HOTEL_COLUMNS = "id, name, location, latitude, longitude, created_at"
_REVIEW_COLUMNS = (
    "id, user_id, hotel_id, rating, comment, video_url, created_at, likes, comments"
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLiteEntityStore(EntityStore):
    """``EntityStore`` persisted to a SQLite database file."""

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path
        init_db(database_path)
        logger.info("Using SQLite entity store at %s", database_path)

    def get_user(self, user_id: str) -> Optional[UserRead]:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        return UserRead(**dict(row)) if row else None

    def upsert_user(self, data: UserUpsert) -> UserRead:
        now = _now()
        with get_cursor(self.database_path) as cursor:
            cursor.execute(
                """
                INSERT INTO users (id, email, first_name, last_name, profile_image_url, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    email = excluded.email,
                    first_name = excluded.first_name,
                    last_name = excluded.last_name,
                    profile_image_url = excluded.profile_image_url,
                    updated_at = excluded.updated_at
                """,
                (
                    data.id,
                    data.email,
                    data.first_name,
                    data.last_name,
                    data.profile_image_url,
                    now,
                    now,
                ),
            )
            row = cursor.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?",
                (data.id,),
            ).fetchone()
        return UserRead(**dict(row))

    def list_hotels(self) -> List[HotelRead]:
        with get_cursor(self.database_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_HOTEL_COLUMNS} FROM hotels ORDER BY id"
            ).fetchall()
        return [HotelRead(**dict(row)) for row in rows]

    def get_hotel(self, hotel_id: int) -> Optional[HotelRead]:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                f"SELECT {_HOTEL_COLUMNS} FROM hotels WHERE id = ?",
                (hotel_id,),
            ).fetchone()
        return HotelRead(**dict(row)) if row else None

    def find_hotel_by_name_location(self, name: str, location: str) -> Optional[HotelRead]:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                f"""
                SELECT {_HOTEL_COLUMNS} FROM hotels
                WHERE py_lower(name) = ? AND py_lower(location) = ?
                ORDER BY id
                LIMIT 1
                """,
                (name.lower(), location.lower()),
            ).fetchone()
        return HotelRead(**dict(row)) if row else None

    def create_hotel(self, data: HotelCreate) -> HotelRead:
        with get_cursor(self.database_path) as cursor:
            cursor.execute(
                """
                INSERT INTO hotels (name, location, latitude, longitude, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (data.name, data.location, data.latitude, data.longitude, _now()),
            )
            row = cursor.execute(
                f"SELECT {_HOTEL_COLUMNS} FROM hotels WHERE id = ?",
                (cursor.lastrowid,),
            ).fetchone()
        return HotelRead(**dict(row))

    def list_reviews(self) -> List[ReviewRead]:
        with get_cursor(self.database_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_REVIEW_COLUMNS} FROM reviews ORDER BY id"
            ).fetchall()
        return [ReviewRead(**dict(row)) for row in rows]

    def create_review(self, data: ReviewCreate, user_id: str) -> ReviewRead:
        with get_cursor(self.database_path) as cursor:
            cursor.execute(
                """
                INSERT INTO reviews (user_id, hotel_id, rating, comment, video_url, created_at, likes, comments)
                VALUES (?, ?, ?, ?, ?, ?, 0, 0)
                """,
                (user_id, data.hotel_id, data.rating, data.comment, data.video_url, _now()),
            )
            row = cursor.execute(
                f"SELECT {_REVIEW_COLUMNS} FROM reviews WHERE id = ?",
                (cursor.lastrowid,),
            ).fetchone()
        return ReviewRead(**dict(row))
