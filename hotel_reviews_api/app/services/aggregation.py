"""
Read models computed from an entity store.

Every function here is a read‑only projection of the store's current
contents: nothing is cached and nothing is written.  Sorting is done
in Python with ``sorted``, which is stable, so entries with equal
ratings or counts keep the order the store lists them in (creation
order for hotels and reviews, first appearance for locations).

Hydrating a review whose user or hotel is missing raises
``DataIntegrityError``; such reviews are never silently dropped.
"""

from __future__ import annotations

from typing import Dict, List, Sequence
from urllib.parse import quote

from ..core.config import DEFAULT_DESTINATION_IMAGE_URL
from ..core.exceptions import DataIntegrityError
from ..schemas.destination import Destination, HotelWithReviews
from ..schemas.hotel import HotelRead
from ..schemas.review import ReviewRead, ReviewWithUser, ReviewWithUserAndHotel
from ..schemas.user import UserRead
from ..storage.base import EntityStore


TOP_HOTELS_PER_DESTINATION = 3


def _user_for(store: EntityStore, review: ReviewRead) -> UserRead:
    user = store.get_user(review.user_id)
    if user is None:
        raise DataIntegrityError("User", review.user_id, review_id=review.id)
    return user


def _hotel_for(store: EntityStore, review: ReviewRead) -> HotelRead:
    hotel = store.get_hotel(review.hotel_id)
    if hotel is None:
        raise DataIntegrityError("Hotel", review.hotel_id, review_id=review.id)
    return hotel


def reviews_for_hotel(store: EntityStore, hotel_id: int) -> List[ReviewWithUser]:
    """Return a hotel's reviews, highest rating first, each with its author."""
    reviews = sorted(
        (review for review in store.list_reviews() if review.hotel_id == hotel_id),
        key=lambda review: review.rating,
        reverse=True,
    )
    return [
        ReviewWithUser(**review.model_dump(), user=_user_for(store, review))
        for review in reviews
    ]


def average_rating(reviews: Sequence[ReviewRead]) -> float:
    """Arithmetic mean of the reviews' ratings, or ``0`` for no reviews."""
    if not reviews:
        return 0.0
    return sum(review.rating for review in reviews) / len(reviews)


def hotel_with_reviews(store: EntityStore, hotel: HotelRead) -> HotelWithReviews:
    reviews = reviews_for_hotel(store, hotel.id)
    return HotelWithReviews(
        **hotel.model_dump(),
        reviews=reviews,
        average_rating=average_rating(reviews),
        review_count=len(reviews),
    )


def all_hotels_with_reviews(store: EntityStore) -> List[HotelWithReviews]:
    return [hotel_with_reviews(store, hotel) for hotel in store.list_hotels()]


def top_reviews(store: EntityStore, limit: int = 10) -> List[ReviewWithUserAndHotel]:
    """Return the ``limit`` best rated reviews with their author and hotel."""
    reviews = sorted(store.list_reviews(), key=lambda review: review.rating, reverse=True)
    return [
        ReviewWithUserAndHotel(
            **review.model_dump(),
            user=_user_for(store, review),
            hotel=_hotel_for(store, review),
        )
        for review in reviews[:limit]
    ]


def destination_image_url(location: str, template: str = DEFAULT_DESTINATION_IMAGE_URL) -> str:
    """Build a placeholder image URL for a location.

    ``quote`` keeps the same unreserved characters as JavaScript's
    ``encodeURIComponent`` so URLs match those the web client builds.
    """
    return template.format(query=quote(location, safe="!~*'()"))


def top_destinations(
    store: EntityStore,
    limit: int = 10,
    image_url_template: str = DEFAULT_DESTINATION_IMAGE_URL,
) -> List[Destination]:
    """Roll hotels up by location and rank the locations by review volume.

    Hotels are grouped on the exact ``location`` string.  A location
    whose hotels have no reviews at all is left out.  Each remaining
    destination lists up to three of its hotels, best average rating
    first, and destinations are ordered by total review count.
    """
    hotels_by_location: Dict[str, List[HotelRead]] = {}
    for hotel in store.list_hotels():
        hotels_by_location.setdefault(hotel.location, []).append(hotel)

    destinations: List[Destination] = []
    for location, location_hotels in hotels_by_location.items():
        hotels = [hotel_with_reviews(store, hotel) for hotel in location_hotels]
        total_reviews = sum(hotel.review_count for hotel in hotels)
        if total_reviews == 0:
            continue
        top_hotels = sorted(hotels, key=lambda hotel: hotel.average_rating, reverse=True)
        destinations.append(
            Destination(
                name=location,
                review_count=total_reviews,
                image_url=destination_image_url(location, image_url_template),
                top_hotels=top_hotels[:TOP_HOTELS_PER_DESTINATION],
            )
        )

    destinations.sort(key=lambda destination: destination.review_count, reverse=True)
    return destinations[:limit]
