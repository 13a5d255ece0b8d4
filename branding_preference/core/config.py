import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_LOCALE
from .preference_utils import get_formatted_locale


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Service configuration loaded from environment variables."""

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    # Stored in en-US form whichever separator the environment uses.
    DEFAULT_LOCALE: str = get_formatted_locale(os.getenv("DEFAULT_LOCALE", DEFAULT_LOCALE))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    @classmethod
    def log_level(cls) -> int:
        return logging.getLevelName(cls.LOG_LEVEL)

    @classmethod
    def validate(cls) -> None:
        if not isinstance(cls.log_level(), int):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {cls.LOG_LEVEL!r}")
        if not cls.DEFAULT_LOCALE:
            raise ValueError("DEFAULT_LOCALE environment variable must not be empty")
