"""
In‑memory entity store.

Keeps users, hotels and reviews in plain dictionaries for the lifetime
of the store object.  Nothing is persisted and nothing is locked; use
it for tests, prototyping and single‑process deployments where losing
data on restart is acceptable.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..schemas.hotel import HotelCreate, HotelRead
from ..schemas.review import ReviewCreate, ReviewRead
from ..schemas.user import UserRead, UserUpsert
from .base import EntityStore


class MemoryEntityStore(EntityStore):
    """Dictionary‑backed ``EntityStore``.

    Dictionaries preserve insertion order, which is also id order,
    so listings come back in creation order.
    """

    def __init__(self, initial_hotel_id: int = 1, initial_review_id: int = 1) -> None:
        self._users: Dict[str, UserRead] = {}
        self._hotels: Dict[int, HotelRead] = {}
        self._reviews: Dict[int, ReviewRead] = {}
        self._hotel_id_counter = initial_hotel_id
        self._review_id_counter = initial_review_id

    def get_user(self, user_id: str) -> Optional[UserRead]:
        return self._users.get(user_id)

    def upsert_user(self, data: UserUpsert) -> UserRead:
        now = datetime.now(timezone.utc)
        existing = self._users.get(data.id)
        user = UserRead(
            **data.model_dump(include=set(UserUpsert.model_fields)),
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self._users[data.id] = user
        return user

    def list_hotels(self) -> List[HotelRead]:
        return list(self._hotels.values())

    def get_hotel(self, hotel_id: int) -> Optional[HotelRead]:
        return self._hotels.get(hotel_id)

    def find_hotel_by_name_location(self, name: str, location: str) -> Optional[HotelRead]:
        name = name.lower()
        location = location.lower()
        for hotel in self._hotels.values():
            if hotel.name.lower() == name and hotel.location.lower() == location:
                return hotel
        return None

    def create_hotel(self, data: HotelCreate) -> HotelRead:
        hotel_id = self._hotel_id_counter
        hotel = HotelRead(
            **data.model_dump(include=set(HotelCreate.model_fields)),
            id=hotel_id,
            created_at=datetime.now(timezone.utc),
        )
        self._hotels[hotel_id] = hotel
        self._hotel_id_counter += 1
        return hotel

    def list_reviews(self) -> List[ReviewRead]:
        return list(self._reviews.values())

    def create_review(self, data: ReviewCreate, user_id: str) -> ReviewRead:
        review_id = self._review_id_counter
        review = ReviewRead(
            **data.model_dump(include=set(ReviewCreate.model_fields)),
            id=review_id,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            likes=0,
            comments=0,
        )
        self._reviews[review_id] = review
        self._review_id_counter += 1
        return review
