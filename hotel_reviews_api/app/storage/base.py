"""
Entity store contract.

An entity store owns three collections (users by id, hotels by id and
reviews by id) and the counters that assign hotel and review ids.  It
offers create/read/list operations only; nothing is updated in place
except users, which are upserted.

Implementations must:

* return ``None`` from lookups that find nothing;
* list hotels and reviews in creation order;
* assign hotel and review ids that are unique, positive and strictly
  increasing in creation order;
* not check that a review's user or hotel exists when it is written.

The aggregation functions in ``services.aggregation`` read through
this interface only, so a store can be swapped without touching them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.hotel import HotelCreate, HotelRead
from ..schemas.review import ReviewCreate, ReviewRead
from ..schemas.user import UserRead, UserUpsert


class EntityStore(ABC):
    """Abstract base class for user, hotel and review storage."""

    # Users

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserRead]:
        ...

    @abstractmethod
    def upsert_user(self, data: UserUpsert) -> UserRead:
        """Create or replace a user.

        ``created_at`` is kept from the existing record when there is
        one; ``updated_at`` is always set to the current time.
        """

    # Hotels

    @abstractmethod
    def list_hotels(self) -> List[HotelRead]:
        ...

    @abstractmethod
    def get_hotel(self, hotel_id: int) -> Optional[HotelRead]:
        ...

    @abstractmethod
    def find_hotel_by_name_location(self, name: str, location: str) -> Optional[HotelRead]:
        """Return the first hotel whose name and location both match, ignoring case."""

    @abstractmethod
    def create_hotel(self, data: HotelCreate) -> HotelRead:
        ...

    # Reviews

    @abstractmethod
    def list_reviews(self) -> List[ReviewRead]:
        ...

    @abstractmethod
    def create_review(self, data: ReviewCreate, user_id: str) -> ReviewRead:
        ...
