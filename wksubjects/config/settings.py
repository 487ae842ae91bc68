"""Global settings and configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is the parent of the wksubjects package
BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()
load_dotenv(BASE_DIR / ".env")


def _env_int(key: str, default: int) -> int:
    """Read an integer setting, falling back to default if unparsable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


class Config:
    """Application-wide configuration."""

    # API
    # Get a personal token from the API settings page and store it in the
    # environment or .env file as WANIKANI_API_TOKEN. Never hardcode it.
    WANIKANI_API_TOKEN: str = os.environ.get("WANIKANI_API_TOKEN", "")
    WANIKANI_API_URL: str = os.environ.get(
        "WANIKANI_API_URL", "https://api.wanikani.com/v2"
    ).rstrip("/")
    WANIKANI_API_REVISION: str = os.environ.get("WANIKANI_API_REVISION", "20170710")
    USER_AGENT: str = "wksubjects/1.0"

    # Network
    TIMEOUT: int = _env_int("TIMEOUT", 60)

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Paths
    BASE_DIR: Path = BASE_DIR
    OUTPUT_DIR: str = os.environ.get("OUTPUT_DIR", str(BASE_DIR / "data" / "output"))
