from itinerary_export.configs.settings import (
    HTML_EXPORT_ERROR,
    INVALID_CREATED_AT_ERROR,
    INVALID_PAYLOAD_ERROR,
    MISSING_DESTINATION_ERROR,
    Settings,
    settings,
)

__all__ = [
    "HTML_EXPORT_ERROR",
    "INVALID_CREATED_AT_ERROR",
    "INVALID_PAYLOAD_ERROR",
    "MISSING_DESTINATION_ERROR",
    "Settings",
    "settings",
]
