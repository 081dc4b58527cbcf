"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables or a dedicated configuration service.
"""

import os
from dataclasses import dataclass


DEFAULT_DESTINATION_IMAGE_URL = "https://source.unsplash.com/random/400x250/?{query}"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Hotel Reviews API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Which entity store backs the repository: ``memory`` keeps data in
    # process memory and loses it on restart, ``sqlite`` persists it to
    # ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory")

    # Path to the SQLite database file.  If a relative path is provided,
    # it is resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "hotel_reviews.db")

    # Template used to build a destination's image URL.  ``{query}`` is
    # replaced with the percent‑encoded location name.
    destination_image_url: str = os.getenv("DESTINATION_IMAGE_URL", DEFAULT_DESTINATION_IMAGE_URL)

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
