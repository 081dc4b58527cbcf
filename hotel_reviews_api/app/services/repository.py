"""
Repository facade over an entity store.

``Repository`` is the only object the HTTP layer talks to.  It passes
store reads and writes straight through and answers the derived
queries (hotels with reviews, top reviews, top destinations) with the
functions in ``aggregation``, so callers never need to know which is
which.  One repository is built per application in ``create_app``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..core.config import DEFAULT_DESTINATION_IMAGE_URL
from ..schemas.destination import Destination, HotelWithReviews
from ..schemas.hotel import HotelCreate, HotelRead
from ..schemas.review import ReviewCreate, ReviewRead, ReviewWithUser, ReviewWithUserAndHotel
from ..schemas.user import UserRead, UserUpsert
from ..storage.base import EntityStore
from . import aggregation


logger = logging.getLogger(__name__)


class Repository:
    """Entity store operations and aggregate queries behind one interface."""

    def __init__(
        self,
        store: EntityStore,
        destination_image_url: str = DEFAULT_DESTINATION_IMAGE_URL,
    ) -> None:
        self.store = store
        self.destination_image_url = destination_image_url

    # Users

    def get_user(self, user_id: str) -> Optional[UserRead]:
        return self.store.get_user(user_id)

    def upsert_user(self, data: UserUpsert) -> UserRead:
        user = self.store.upsert_user(data)
        logger.info("Upserted user %s", user.id)
        return user

    # Hotels

    def get_hotels(self) -> List[HotelRead]:
        return self.store.list_hotels()

    def get_hotel(self, hotel_id: int) -> Optional[HotelRead]:
        return self.store.get_hotel(hotel_id)

    def get_hotel_by_name(self, name: str, location: str) -> Optional[HotelRead]:
        return self.store.find_hotel_by_name_location(name, location)

    def get_or_create_hotel(self, data: HotelCreate) -> Tuple[HotelRead, bool]:
        """Return the hotel with this name and location, creating it if needed.

        The second element of the result is ``True`` when a new hotel
        was created.  Matching ignores case on both fields, and an
        existing hotel is returned unchanged.
        """
        existing = self.store.find_hotel_by_name_location(data.name, data.location)
        if existing is not None:
            logger.debug(
                "Hotel %r in %r already exists as %s", data.name, data.location, existing.id
            )
            return existing, False
        hotel = self.store.create_hotel(data)
        logger.info("Created hotel %s (%s, %s)", hotel.id, hotel.name, hotel.location)
        return hotel, True

    def create_hotel(self, data: HotelCreate) -> HotelRead:
        hotel, _ = self.get_or_create_hotel(data)
        return hotel

    def get_hotels_with_reviews(self) -> List[HotelWithReviews]:
        return aggregation.all_hotels_with_reviews(self.store)

    def get_hotel_with_reviews(self, hotel_id: int) -> Optional[HotelWithReviews]:
        hotel = self.store.get_hotel(hotel_id)
        if hotel is None:
            return None
        return aggregation.hotel_with_reviews(self.store, hotel)

    # Reviews

    def get_reviews(self) -> List[ReviewRead]:
        return self.store.list_reviews()

    def get_reviews_by_hotel(self, hotel_id: int) -> List[ReviewWithUser]:
        return aggregation.reviews_for_hotel(self.store, hotel_id)

    def get_top_reviews(self, limit: int = 10) -> List[ReviewWithUserAndHotel]:
        return aggregation.top_reviews(self.store, limit)

    def create_review(self, data: ReviewCreate, user_id: str) -> ReviewRead:
        review = self.store.create_review(data, user_id)
        logger.info(
            "User %s submitted review %s for hotel %s", user_id, review.id, review.hotel_id
        )
        return review

    @staticmethod
    def average_rating(reviews: Sequence[ReviewRead]) -> float:
        return aggregation.average_rating(reviews)

    # Destinations

    def get_top_destinations(self, limit: int = 10) -> List[Destination]:
        return aggregation.top_destinations(self.store, limit, self.destination_image_url)
