"""Render generated travel itineraries into standalone HTML documents."""

from itinerary_export.errors import DeliveryError, ExportError, MalformedInputError
from itinerary_export.schemas import Activity, DayItinerary, ItineraryResponse, parse_itinerary
from itinerary_export.services import (
    DeliveryAdapter,
    HtmlExportService,
    InMemoryDelivery,
    ItineraryDocumentBuilder,
    LocalFileDelivery,
    export_to_html,
    render_itinerary,
)
from itinerary_export.utils import suggested_filename

__all__ = [
    "Activity",
    "DayItinerary",
    "DeliveryAdapter",
    "DeliveryError",
    "ExportError",
    "HtmlExportService",
    "InMemoryDelivery",
    "ItineraryDocumentBuilder",
    "ItineraryResponse",
    "LocalFileDelivery",
    "MalformedInputError",
    "export_to_html",
    "parse_itinerary",
    "render_itinerary",
    "suggested_filename",
]
