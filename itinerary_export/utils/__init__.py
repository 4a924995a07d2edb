"""Utility helper functions."""

from itinerary_export.utils.helpers import (
    escape_text,
    format_created_at,
    parse_created_at,
    suggested_filename,
    today_str,
)

__all__ = [
    "escape_text",
    "format_created_at",
    "parse_created_at",
    "suggested_filename",
    "today_str",
]
