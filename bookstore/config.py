"""Configuration management for the bookstore service."""
from __future__ import annotations

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = os.getenv("BOOKSTORE_LOG_LEVEL", "INFO").upper()

    # Ratings are whole numbers in [MIN_RATING, MAX_RATING]
    MIN_RATING: int = int(os.getenv("BOOKSTORE_MIN_RATING", "0"))
    MAX_RATING: int = int(os.getenv("BOOKSTORE_MAX_RATING", "5"))

    # Two averages closer than this rank as equal
    RATING_EPSILON: float = float(os.getenv("BOOKSTORE_RATING_EPSILON", "1e-9"))


settings = Settings()
