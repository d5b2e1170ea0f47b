from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the listing feed.
    """

    # Browser settings
    HEADLESS: bool = True
    USER_AGENT: Optional[str] = None  # pin one UA instead of a random desktop one

    # Retries (upstream fetch only; the pipeline itself never retries)
    MAX_RETRIES: int = 3
    RETRY_BASE_DELAY: float = 2.0  # seconds
    RETRY_MAX_DELAY: float = 10.0  # seconds

    # Timeouts
    NAVIGATION_TIMEOUT: int = 30000  # ms

    # Upstream
    UPSTREAM_BASE_URL: str = "https://www.linkedin.com"

    # Search defaults
    DEFAULT_KEYWORD: str = "MSP technician"
    DEFAULT_LOCATION: str = "Remote"
    DEFAULT_RECENCY_DAYS: int = 7
    MIN_PAGE_SIZE: int = 1
    MAX_PAGE_SIZE: int = 50
    DEFAULT_PAGE_SIZE: int = 25

    # Output
    DESCRIPTION_MAX_CHARS: int = 500

    # Detail enrichment, one posting at a time
    ENRICH_TIMEOUT_SECONDS: float = 15.0
    ENRICH_MIN_DELAY: float = 0.5  # seconds
    ENRICH_MAX_DELAY: float = 1.5  # seconds

    # "scored" ranks by weighted vocabulary hits, "simple" keeps any required-term hit
    RELEVANCE_MODE: Literal["scored", "simple"] = "scored"

settings = Settings()
