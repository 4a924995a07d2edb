"""
Logging for the itinerary export package.

Usage
-----
>>> from itinerary_export.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> logger = get_logger(__name__)
"""

from itinerary_export.monitoring.logging import (
    bind_export_context,
    clear_context,
    configure_logging,
    get_logger,
    sanitize_log_message,
)

__all__ = [
    "bind_export_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "sanitize_log_message",
]
