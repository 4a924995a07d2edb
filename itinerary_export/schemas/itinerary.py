# itinerary_export/schemas/itinerary.py

"""
Schemas for generated travel itineraries.

These models are the in-memory shape of a trip plan handed to the document
renderer. They are frozen value objects: rendering never mutates them.

Field contracts are advisory. An activity title should be non-empty, day
numbers should be unique, and ``numberOfDays`` usually matches the number of
day entries, but none of this is enforced here. The renderer only refuses a
blank destination and an unparseable ``createdAt``.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from itinerary_export.configs.settings import INVALID_PAYLOAD_ERROR
from itinerary_export.errors import MalformedInputError


class Activity(BaseModel):
    """One scheduled event within a day."""

    model_config = ConfigDict(frozen=True)

    time: str = Field(..., description="Human-readable time of day", examples=["09:00 AM"])
    activity: str = Field(..., description="Short activity title", examples=["Louvre Visit"])
    description: str = Field(default="", description="Free-text detail, may be empty")
    location: str | None = Field(
        default=None,
        description="Place name; None when not specified",
        examples=["Louvre Museum"],
    )


class DayItinerary(BaseModel):
    """One day's schedule, activities in presentation order."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(..., description="1-based day index within the trip", examples=[1])
    activities: tuple[Activity, ...] = Field(
        default=(),
        description="Activities in presentation order",
    )


class ItineraryResponse(BaseModel):
    """
    A complete generated trip plan.

    Accepts the upstream camelCase keys as well as the Python field names.

    Example:
        >>> ItineraryResponse(
        ...     id="trip-1",
        ...     destination="Paris",
        ...     numberOfDays=2,
        ...     itinerary=[{"day": 1, "activities": []}],
        ...     createdAt="2024-01-15T00:00:00Z",
        ... )
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default="", description="Opaque identifier, unused by rendering")
    destination: str = Field(..., description="Display name of the trip's location")
    number_of_days: int = Field(
        ...,
        alias="numberOfDays",
        description="Advisory day count shown in the summary line",
    )
    itinerary: tuple[DayItinerary, ...] = Field(
        default=(),
        description="Days in presentation order",
    )
    created_at: str = Field(
        ...,
        alias="createdAt",
        description="Generation timestamp, parseable into a calendar date",
        examples=["2024-01-15T00:00:00Z"],
    )


def parse_itinerary(payload: Mapping[str, Any]) -> ItineraryResponse:
    """
    Build an itinerary from an upstream JSON payload.

    Args:
        payload: Mapping using the upstream camelCase keys.

    Returns:
        ItineraryResponse: The validated itinerary.

    Raises:
        MalformedInputError: If the payload does not have the itinerary shape.
    """
    try:
        return ItineraryResponse.model_validate(payload)
    except ValidationError as e:
        errors = e.errors()
        field = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
        raise MalformedInputError(INVALID_PAYLOAD_ERROR, field=field) from e
