"""Application settings and configuration constants.

This module contains the settings, constants, and user-facing messages
used by the itinerary export package.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Response constants ---
HTML_EXPORT_ERROR = "Failed to generate HTML. Please try again."
MISSING_DESTINATION_ERROR = "Itinerary destination is required."
INVALID_CREATED_AT_ERROR = "Itinerary creation date could not be parsed."
INVALID_PAYLOAD_ERROR = "Itinerary data is malformed."


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="ITINERARY_EXPORT_",
        extra="ignore",
    )

    APP_NAME: str = "Itinerary Export"
    BRAND_NAME: str = "TravelMate AI"

    # Environment
    ENVIRONMENT: Literal["development", "production"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/itinerary_export.log"

    # Rendering
    # strftime format for the generated-on date. "%x" follows LC_TIME, which stays
    # the C locale (01/15/24) unless the host calls locale.setlocale(LC_TIME, "").
    DATE_FORMAT: str = "%x"

    # Export file naming
    FILENAME_SUFFIX: str = "_Itinerary"
    HTML_EXTENSION: str = ".html"
    HTML_MIME_TYPE: str = "text/html"

    # Delivery
    DELIVERY_PROVIDER: Literal["local", "memory"] = "local"
    EXPORT_DIR: Path = Path("exports")


settings = Settings()
