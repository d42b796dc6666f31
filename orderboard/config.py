"""Runtime configuration defaults for the remote order store and the board."""

from __future__ import annotations

import os

API_BASE_URL = "http://localhost:5000"
POLL_INTERVAL_SECONDS = 10.0
REQUEST_TIMEOUT_SECONDS = 10.0
TABLE_COUNT = 10
DEBUG_LOG_PATH = "/tmp/orderboard-debug.log"

_API_URL_ENV = "ORDERBOARD_API_URL"
_POLL_INTERVAL_ENV = "ORDERBOARD_POLL_INTERVAL"
_DEBUG_LOG_ENV = "ORDERBOARD_DEBUG_LOG"


def resolve_api_base_url() -> str:
    """Return the order-store base URL, honouring ORDERBOARD_API_URL."""
    override = os.environ.get(_API_URL_ENV, "").strip()
    return (override or API_BASE_URL).rstrip("/")


def resolve_poll_interval() -> float:
    """Return the poll period in seconds, honouring ORDERBOARD_POLL_INTERVAL."""
    override = os.environ.get(_POLL_INTERVAL_ENV, "").strip()
    if not override:
        return POLL_INTERVAL_SECONDS
    try:
        value = float(override)
    except ValueError:
        return POLL_INTERVAL_SECONDS
    return value if value > 0 else POLL_INTERVAL_SECONDS


def resolve_debug_log_path() -> str:
    override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return override or DEBUG_LOG_PATH
