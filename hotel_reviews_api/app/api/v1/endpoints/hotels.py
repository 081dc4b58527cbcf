"""
Hotel endpoints for API v1.

Listing and detail views are public and include each hotel's reviews
and average rating.  Creating a hotel requires authentication; posting
a hotel that already exists (same name and location, ignoring case)
returns the stored hotel with status 200 instead of creating a copy.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from hotel_reviews_api.app.core.exceptions import DataIntegrityError
from hotel_reviews_api.app.core.security import get_current_user, get_repository
from hotel_reviews_api.app.schemas.destination import HotelWithReviews
from hotel_reviews_api.app.schemas.hotel import HotelCreate, HotelRead
from hotel_reviews_api.app.schemas.user import UserRead
from hotel_reviews_api.app.services.repository import Repository


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[HotelWithReviews], summary="List hotels")
async def list_hotels(
    repository: Repository = Depends(get_repository),
) -> List[HotelWithReviews]:
    try:
        return repository.get_hotels_with_reviews()
    except DataIntegrityError:
        logger.exception("Error fetching hotels")
        raise HTTPException(status_code=500, detail="Failed to fetch hotels")


@router.get("/{hotel_id}", response_model=HotelWithReviews, summary="Get a single hotel")
async def get_hotel(
    hotel_id: int,
    repository: Repository = Depends(get_repository),
) -> HotelWithReviews:
    try:
        hotel = repository.get_hotel_with_reviews(hotel_id)
    except DataIntegrityError:
        logger.exception("Error fetching hotel %s", hotel_id)
        raise HTTPException(status_code=500, detail="Failed to fetch hotel")
    if hotel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return hotel


@router.post(
    "",
    response_model=HotelRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add a hotel",
)
async def create_hotel(
    data: HotelCreate,
    response: Response,
    repository: Repository = Depends(get_repository),
    current_user: UserRead = Depends(get_current_user),
) -> HotelRead:
    """Create a hotel, or return the existing one with the same name and location."""
    hotel, created = repository.get_or_create_hotel(data)
    if not created:
        response.status_code = status.HTTP_200_OK
    return hotel
