from itinerary_export.schemas.itinerary import (
    Activity,
    DayItinerary,
    ItineraryResponse,
    parse_itinerary,
)

__all__ = [
    "Activity",
    "DayItinerary",
    "ItineraryResponse",
    "parse_itinerary",
]
