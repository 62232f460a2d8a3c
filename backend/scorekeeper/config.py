import logging
import os

from .scoring import SUPPORTED_SPORTS

logger = logging.getLogger(__name__)


def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "/api").strip()
    if not val.startswith("/"):
        val = "/" + val
    if len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def _default_sport(val):
    val = (val or "tennis").strip().lower()
    if val not in SUPPORTED_SPORTS:
        logger.warning("DEFAULT_SPORT %r is not supported; defaulting to tennis", val)
        return "tennis"
    return val


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))

DEFAULT_SPORT = _default_sport(os.getenv("DEFAULT_SPORT"))
