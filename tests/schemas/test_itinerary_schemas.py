"""Tests for itinerary_export/schemas/itinerary.py."""

from typing import Any

import pytest
from pydantic import ValidationError

from itinerary_export.errors import MalformedInputError
from itinerary_export.schemas.itinerary import (
    Activity,
    DayItinerary,
    ItineraryResponse,
    parse_itinerary,
)


class TestActivity:
    """Tests for the Activity schema."""

    def test_location_defaults_to_none(self) -> None:
        """Test that an omitted location means not specified, not empty."""
        activity = Activity(time="09:00 AM", activity="Breakfast")
        assert activity.location is None
        assert activity.description == ""

    def test_empty_title_is_accepted(self) -> None:
        """Test that the non-empty title contract is advisory."""
        activity = Activity(time="09:00 AM", activity="   ", description="")
        assert activity.activity == "   "

    def test_is_frozen(self) -> None:
        """Test that activities cannot be mutated."""
        activity = Activity(time="09:00 AM", activity="Breakfast")
        with pytest.raises(ValidationError):
            activity.activity = "Lunch"  # type: ignore[misc]


class TestDayItinerary:
    """Tests for the DayItinerary schema."""

    def test_preserves_activity_order(self) -> None:
        """Test that activities keep the order they were supplied in."""
        day = DayItinerary(
            day=3,
            activities=[
                {"time": "08:00 PM", "activity": "Dinner"},
                {"time": "07:00 AM", "activity": "Sunrise hike"},
            ],
        )
        assert [a.activity for a in day.activities] == ["Dinner", "Sunrise hike"]

    def test_activities_default_empty(self) -> None:
        """Test that a day without activities is valid."""
        assert DayItinerary(day=1).activities == ()


class TestItineraryResponse:
    """Tests for the ItineraryResponse schema."""

    def test_accepts_camel_case_keys(self, paris_payload: dict[str, Any]) -> None:
        """Test that upstream camelCase keys populate the Python fields."""
        itinerary = ItineraryResponse.model_validate(paris_payload)
        assert itinerary.number_of_days == 2
        assert itinerary.created_at == "2024-01-15T00:00:00Z"
        assert len(itinerary.itinerary) == 2

    def test_accepts_field_names(self) -> None:
        """Test that snake_case field names are accepted too."""
        itinerary = ItineraryResponse(
            destination="Rome",
            number_of_days=1,
            created_at="2024-05-01",
        )
        assert itinerary.number_of_days == 1
        assert itinerary.itinerary == ()
        assert itinerary.id == ""

    def test_day_count_mismatch_is_not_validated(self) -> None:
        """Test that numberOfDays is advisory and may disagree with the days."""
        itinerary = ItineraryResponse(
            destination="Rome",
            numberOfDays=5,
            itinerary=[{"day": 1, "activities": []}],
            createdAt="2024-05-01",
        )
        assert itinerary.number_of_days == 5
        assert len(itinerary.itinerary) == 1

    def test_duplicate_and_unsorted_days_are_kept(self) -> None:
        """Test that day numbers are neither deduplicated nor sorted."""
        itinerary = ItineraryResponse(
            destination="Rome",
            numberOfDays=2,
            itinerary=[{"day": 2}, {"day": 1}, {"day": 2}],
            createdAt="2024-05-01",
        )
        assert [d.day for d in itinerary.itinerary] == [2, 1, 2]

    def test_is_frozen(self, paris_itinerary: ItineraryResponse) -> None:
        """Test that the itinerary cannot be mutated."""
        with pytest.raises(ValidationError):
            paris_itinerary.destination = "Lyon"  # type: ignore[misc]

    def test_serializes_with_aliases(self, paris_itinerary: ItineraryResponse) -> None:
        """Test that dumping by alias restores the upstream keys."""
        data = paris_itinerary.model_dump(by_alias=True)
        assert data["numberOfDays"] == 2
        assert data["createdAt"] == "2024-01-15T00:00:00Z"


class TestParseItinerary:
    """Tests for parse_itinerary."""

    def test_valid_payload(self, paris_payload: dict[str, Any]) -> None:
        """Test that a valid payload parses into the model."""
        itinerary = parse_itinerary(paris_payload)
        assert itinerary.destination == "Paris"
        assert itinerary.itinerary[0].activities[0].location == "Louvre Museum"

    def test_missing_destination_raises_malformed_input(
        self,
        paris_payload: dict[str, Any],
    ) -> None:
        """Test that a missing required key is reported as malformed input."""
        del paris_payload["destination"]
        with pytest.raises(MalformedInputError) as exc_info:
            parse_itinerary(paris_payload)
        assert exc_info.value.field == "destination"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_wrong_nested_type_reports_location(self, paris_payload: dict[str, Any]) -> None:
        """Test that nested errors carry a dotted field path."""
        paris_payload["itinerary"][0]["day"] = "first"
        with pytest.raises(MalformedInputError) as exc_info:
            parse_itinerary(paris_payload)
        assert exc_info.value.field == "itinerary.0.day"
