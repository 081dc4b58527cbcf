"""
Pydantic schemas for hotel reviews.

A review carries a 1–5 rating, a comment and the URL of the review
video.  ``likes`` and ``comments`` counters start at zero.  The
``...With...`` variants are read models hydrated with the referenced
user and hotel.
"""

from datetime import datetime

from pydantic import Field, field_validator

from .base import ApiModel
from .hotel import HotelRead
from .user import UserRead


class ReviewCreate(ApiModel):
    """Schema for submitting a review."""

    hotel_id: int = Field(..., description="Identifier of the hotel being reviewed")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = Field(..., min_length=1)
    video_url: str = Field(..., min_length=1, description="URL of the review video")

    @field_validator("comment")
    @classmethod
    def strip_comment(cls, v: str) -> str:
        """Trim surrounding whitespace and reject blank comments."""
        v = v.strip()
        if not v:
            raise ValueError("Comment must not be blank")
        return v


class ReviewRead(ApiModel):
    """Schema for reading a review from the API."""

    id: int
    user_id: str
    hotel_id: int
    rating: int
    comment: str
    video_url: str
    created_at: datetime
    likes: int = 0
    comments: int = 0


class ReviewWithUser(ReviewRead):
    user: UserRead


class ReviewWithUserAndHotel(ReviewWithUser):
    hotel: HotelRead
