"""
Review endpoints for API v1.

Anyone can read the top‑rated reviews; submitting a review requires
authentication and the review is attributed to the token's user.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hotel_reviews_api.app.core.exceptions import DataIntegrityError
from hotel_reviews_api.app.core.security import get_current_user, get_repository
from hotel_reviews_api.app.schemas.review import (
    ReviewCreate,
    ReviewRead,
    ReviewWithUserAndHotel,
)
from hotel_reviews_api.app.schemas.user import UserRead
from hotel_reviews_api.app.services.repository import Repository


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/top",
    response_model=List[ReviewWithUserAndHotel],
    summary="List the best rated reviews",
)
async def top_reviews(
    limit: int = Query(10, ge=1, le=100),
    repository: Repository = Depends(get_repository),
) -> List[ReviewWithUserAndHotel]:
    try:
        return repository.get_top_reviews(limit)
    except DataIntegrityError:
        logger.exception("Error fetching top reviews")
        raise HTTPException(status_code=500, detail="Failed to fetch top reviews")


@router.post(
    "",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def create_review(
    data: ReviewCreate,
    repository: Repository = Depends(get_repository),
    current_user: UserRead = Depends(get_current_user),
) -> ReviewRead:
    """Create a review of an existing hotel on behalf of the current user."""
    if repository.get_hotel(data.hotel_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return repository.create_review(data, current_user.id)
