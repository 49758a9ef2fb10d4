"""Process-wide logging setup applied once when the application is created."""

import logging

from .config import get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging() -> None:
    """Apply the configured log level and format to the root logger."""
    global _configured
    if _configured:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    # Motor/pymongo heartbeat chatter drowns out request logs at DEBUG
    logging.getLogger("pymongo").setLevel(max(level, logging.WARNING))
    _configured = True
