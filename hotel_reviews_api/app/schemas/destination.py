"""
Read models computed from hotels and reviews.

Neither model is ever stored; both are rebuilt on every request by
``services.aggregation``.
"""

from typing import List

from .base import ApiModel
from .hotel import HotelRead
from .review import ReviewWithUser


class HotelWithReviews(HotelRead):
    """A hotel together with its reviews and their aggregate rating."""

    reviews: List[ReviewWithUser]
    average_rating: float
    review_count: int


class Destination(ApiModel):
    """A location rolled up over its hotels.

    ``name`` is the location string shared by the hotels, and
    ``top_hotels`` holds at most three of them, best rated first.
    """

    name: str
    review_count: int
    image_url: str
    top_hotels: List[HotelWithReviews]
