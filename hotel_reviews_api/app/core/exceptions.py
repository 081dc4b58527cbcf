"""
Exception classes for the hotel reviews core.

Lookups that find nothing return ``None`` rather than raising; the
only failure the core signals itself is a data‑integrity violation,
i.e. a review pointing at a user or hotel that does not exist.
"""

from typing import Any, Dict, Optional


class HotelReviewsError(Exception):
    """Base exception class for hotel reviews errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class DataIntegrityError(HotelReviewsError):
    """A review references a user or hotel that is missing from the store."""

    def __init__(self, entity: str, entity_id: Any, review_id: Optional[int] = None):
        super().__init__(
            f"{entity} {entity_id} not found",
            details={"entity": entity, "entity_id": entity_id, "review_id": review_id},
        )
        self.entity = entity
        self.entity_id = entity_id
        self.review_id = review_id
