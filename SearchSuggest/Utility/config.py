"""Search API settings read from the environment."""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_API_ROOT = "http://localhost:9200"
DEFAULT_TIMEOUT = 10.0


def get_api_root() -> str:
    return os.environ.get("SEARCH_API_ROOT") or DEFAULT_API_ROOT


def get_api_token() -> Optional[str]:
    return os.environ.get("SEARCH_API_TOKEN") or None


def get_timeout() -> float:
    raw = os.environ.get("SEARCH_API_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Invalid SEARCH_API_TIMEOUT %r, using %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning("SEARCH_API_TIMEOUT must be positive, using %ss", DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout
