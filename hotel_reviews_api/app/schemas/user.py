"""
Pydantic models for user profiles.

Users are identified by a stable external id (the subject of the
login provider) and written through an idempotent upsert.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class UserUpsert(ApiModel):
    """Profile data for creating or refreshing a user."""

    id: str = Field(..., min_length=1, examples=["42"])
    email: Optional[str] = Field(None, examples=["user@example.com"])
    first_name: Optional[str] = Field(None, examples=["Ada"])
    last_name: Optional[str] = Field(None, examples=["Lovelace"])
    profile_image_url: Optional[str] = None


class UserRead(UserUpsert):
    """Schema for reading a user from the API."""

    created_at: datetime
    updated_at: datetime
