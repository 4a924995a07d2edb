# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from collections.abc import Callable
from typing import Any

import pytest

# Keep test runs off the developer's .env and export directory
# This must happen before itinerary_export is imported anywhere
os.environ["ITINERARY_EXPORT_DELIVERY_PROVIDER"] = "memory"
os.environ["ITINERARY_EXPORT_LOG_TO_FILE"] = "false"
os.environ["ITINERARY_EXPORT_DATE_FORMAT"] = "%x"

from itinerary_export.schemas.itinerary import Activity, DayItinerary, ItineraryResponse  # noqa: E402


@pytest.fixture
def paris_payload() -> dict[str, Any]:
    """Upstream payload for a two-day Paris trip."""
    return {
        "id": "trip-paris-001",
        "destination": "Paris",
        "numberOfDays": 2,
        "createdAt": "2024-01-15T00:00:00Z",
        "itinerary": [
            {
                "day": 1,
                "activities": [
                    {
                        "time": "09:00 AM",
                        "activity": "Louvre Visit",
                        "description": "See the Mona Lisa",
                        "location": "Louvre Museum",
                    },
                ],
            },
            {"day": 2, "activities": []},
        ],
    }


@pytest.fixture
def paris_itinerary(paris_payload: dict[str, Any]) -> ItineraryResponse:
    """Two-day Paris itinerary model."""
    return ItineraryResponse.model_validate(paris_payload)


@pytest.fixture
def make_itinerary() -> Callable[..., ItineraryResponse]:
    """Factory building itineraries from per-day activity counts."""

    def _make(
        activity_counts: list[int],
        destination: str = "Lisbon",
        created_at: str = "2024-03-02T10:30:00Z",
    ) -> ItineraryResponse:
        days = [
            DayItinerary(
                day=index + 1,
                activities=[
                    Activity(
                        time=f"{8 + n:02d}:00 AM",
                        activity=f"Day {index + 1} stop {n + 1}",
                        description=f"Description {index + 1}.{n + 1}",
                    )
                    for n in range(count)
                ],
            )
            for index, count in enumerate(activity_counts)
        ]
        return ItineraryResponse(
            id="trip-factory",
            destination=destination,
            number_of_days=len(activity_counts),
            itinerary=days,
            created_at=created_at,
        )

    return _make
