"""
Configuration settings for the ProLegal client
"""

import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# API endpoints
API_BASE_URL = os.getenv("PROLEGAL_API_URL", "http://localhost:3000/api").rstrip("/")
PUBLIC_BASE_URL = os.getenv("PROLEGAL_PUBLIC_URL", "http://localhost:3000").rstrip("/")

# Auth
AUTH_TOKEN = os.getenv("PROLEGAL_AUTH_TOKEN")
TOKEN_FILE = Path(os.getenv("PROLEGAL_TOKEN_FILE", str(Path.home() / ".prolegal" / "token")))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be greater than 0, got: {raw!r}")
    return value


# Timeouts in seconds
API_TIMEOUT = _read_float("PROLEGAL_API_TIMEOUT", 30.0)
HEALTH_TIMEOUT = _read_float("PROLEGAL_HEALTH_TIMEOUT", 5.0)

logger.debug(f"API base URL: {API_BASE_URL}")
