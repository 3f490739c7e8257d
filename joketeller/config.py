# joketeller/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# The base URL for the jokeapi
BASE_URL = "https://v2.jokeapi.dev/"
DEFAULT_TIMEOUT = 5.0


@dataclass(frozen=True)
class Settings:
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    auth_key: Optional[str] = None


def normalize_base_url(url: Optional[str]) -> str:
    """Return url with exactly one trailing slash, or BASE_URL if blank."""
    url = (url or "").strip()
    if not url:
        return BASE_URL
    return url.rstrip("/") + "/"


def _read_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("JOKEAPI_TIMEOUT=%r is not a number; using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("JOKEAPI_TIMEOUT=%r must be positive; using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def get_settings() -> Settings:
    """
    Read settings from the environment (a .env file is loaded on package
    import):
    - JOKEAPI_BASE_URL: API origin, default https://v2.jokeapi.dev/
    - JOKEAPI_TIMEOUT: request timeout in seconds, default 5
    - JOKEAPI_AUTH_KEY: optional Authorization header value
    """
    return Settings(
        base_url=normalize_base_url(os.getenv("JOKEAPI_BASE_URL")),
        timeout=_read_timeout(os.getenv("JOKEAPI_TIMEOUT")),
        auth_key=os.getenv("JOKEAPI_AUTH_KEY") or None,
    )
