"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ZIP_CODE_API_URL = "https://www.zipcodeapi.com/rest"


@dataclass(frozen=True)
class Settings:
    zip_code_api_key: str
    database_url: str
    zip_code_api_url: str = DEFAULT_ZIP_CODE_API_URL
    worker_port: int = 9000
    default_radius_units: str = "mile"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    zip_code_api_key = os.getenv("ZIP_CODE_API_KEY", "")
    zip_code_api_url = os.getenv("ZIP_CODE_API_URL") or DEFAULT_ZIP_CODE_API_URL
    database_url = os.getenv("DATABASE_URL", "")
    worker_port = int(os.getenv("WORKER_PORT", "9000"))
    default_radius_units = os.getenv("DEFAULT_RADIUS_UNITS", "mile").strip().lower() or "mile"

    if not database_url:
        logger.warning("DATABASE_URL is not set; partner clinic lookups will fail.")
    if not zip_code_api_key:
        logger.warning("ZIP_CODE_API_KEY is not configured; radius searches will fail.")

    return Settings(
        zip_code_api_key=zip_code_api_key,
        database_url=database_url,
        zip_code_api_url=zip_code_api_url.rstrip("/"),
        worker_port=worker_port,
        default_radius_units=default_radius_units,
    )
