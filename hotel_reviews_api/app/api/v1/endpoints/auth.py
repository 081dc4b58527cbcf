"""
Authentication endpoints for API v1.

``POST /auth/token`` is the login callback: the identity provider's
profile is upserted as a user and a bearer token for that user is
returned.  ``GET /auth/user`` returns the user behind a token.
"""

from fastapi import APIRouter, Depends

from hotel_reviews_api.app.core.config import Settings
from hotel_reviews_api.app.core.security import (
    create_access_token,
    get_current_user,
    get_repository,
    get_settings,
)
from hotel_reviews_api.app.schemas.user import UserRead, UserUpsert
from hotel_reviews_api.app.services.repository import Repository


router = APIRouter()


@router.post("/token")
async def issue_token(
    profile: UserUpsert,
    repository: Repository = Depends(get_repository),
    app_settings: Settings = Depends(get_settings),
) -> dict:
    """Store the submitted profile and return an access token for it.

    Logging in again with the same id refreshes the profile but keeps
    the user's original creation time.
    """
    user = repository.upsert_user(profile)
    token = create_access_token({"sub": user.id}, app_settings=app_settings)
    return {"access_token": token, "token_type": "bearer"}


@router.get("/user", response_model=UserRead)
async def read_current_user(current_user: UserRead = Depends(get_current_user)) -> UserRead:
    """Return the authenticated user."""
    return current_user
