"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import auth, destinations, hotels, reviews

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(hotels.router, prefix="/hotels", tags=["hotels"])
router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
router.include_router(destinations.router, prefix="/destinations", tags=["destinations"])
