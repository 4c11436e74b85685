"""
Configuration Management for ScamShield

This file reads environment variables and makes them available to the app.
Think of it like a settings panel - all configuration in one place.

HOW IT WORKS:
1. When the app starts, this file reads from .env file (or system environment)
2. Every setting has a default, so the app starts even with no .env at all
3. Without HF_TOKEN the sentiment check is simply skipped (rule engine only)
4. Other files import 'settings' from here to access configuration
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic automatically:
    - Reads from .env file
    - Converts types (str to float, etc.)
    """

    # ===== Sentiment (auxiliary signal) =====

    # Hugging Face API token. Optional - if missing, aiScore is always 0
    HF_TOKEN: Optional[str] = None

    # Text classification model used for the negative-sentiment signal
    SENTIMENT_MODEL_URL: str = (
        "https://api-inference.huggingface.co/models/"
        "distilbert-base-uncased-finetuned-sst-2-english"
    )

    # Give up on the sentiment call after this many seconds
    SENTIMENT_TIMEOUT_SECONDS: float = 8.0

    # ===== Server =====

    PORT: int = 5000

    # Logging level (DEBUG, INFO, WARNING, ERROR)
    LOG_LEVEL: str = "INFO"

    class Config:
        # Tell Pydantic to read from .env file
        env_file = ".env"
        # Environment variable names are case-sensitive
        case_sensitive = True


# This decorator caches the settings so we don't read .env file repeatedly
@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached after the first call)."""
    return Settings()


# Usage in other files: from app.config import settings
settings = get_settings()
