"""
Destination endpoints for API v1.

A destination is a location rolled up over its hotels; only locations
with at least one review are listed.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from hotel_reviews_api.app.core.exceptions import DataIntegrityError
from hotel_reviews_api.app.core.security import get_repository
from hotel_reviews_api.app.schemas.destination import Destination
from hotel_reviews_api.app.services.repository import Repository


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/top",
    response_model=List[Destination],
    summary="List the most reviewed destinations",
)
async def top_destinations(
    limit: int = Query(10, ge=1, le=100),
    repository: Repository = Depends(get_repository),
) -> List[Destination]:
    try:
        return repository.get_top_destinations(limit)
    except DataIntegrityError:
        logger.exception("Error fetching top destinations")
        raise HTTPException(status_code=500, detail="Failed to fetch top destinations")
