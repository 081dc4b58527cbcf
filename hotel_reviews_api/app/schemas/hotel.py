"""
Pydantic schemas for hotels.

Coordinates are kept as the strings the client submitted; the API
never does arithmetic on them.
"""

from datetime import datetime

from pydantic import Field

from .base import ApiModel


class HotelCreate(ApiModel):
    """Schema for creating a hotel."""

    name: str = Field(..., min_length=1, examples=["Grand Hotel"])
    location: str = Field(..., min_length=1, examples=["Paris"])
    latitude: str = Field(..., min_length=1, examples=["48.8566"])
    longitude: str = Field(..., min_length=1, examples=["2.3522"])


class HotelRead(HotelCreate):
    """Schema for reading a hotel from the API."""

    id: int
    created_at: datetime
