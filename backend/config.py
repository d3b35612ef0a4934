# backend/config.py
"""
Runtime configuration for the Customer Health Score service.

Everything is read from environment variables once, at import time, with
defaults suitable for local development:

- HEALTH_CACHE_TTL_SECONDS: how long a computed score is served from cache (5 min)
- HEALTH_CACHE_MAX_ENTRIES: cache capacity before half of it is evicted (100)
- LOG_LEVEL: root logging level (INFO)
"""

import logging
import os

# -----------------------------------------------------------------------------
# Result cache
# -----------------------------------------------------------------------------

CACHE_TTL_SECONDS = int(os.getenv("HEALTH_CACHE_TTL_SECONDS", "300"))
CACHE_MAX_ENTRIES = int(os.getenv("HEALTH_CACHE_MAX_ENTRIES", "100"))

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Install a root handler once. Safe to call repeatedly (startup hook, CLI);
    basicConfig is a no-op when the root logger already has handlers.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
