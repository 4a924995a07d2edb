from itinerary_export.services.delivery import (
    DeliveredDocument,
    DeliveryAdapter,
    InMemoryDelivery,
    LocalFileDelivery,
    get_delivery_adapter,
)
from itinerary_export.services.export import HtmlExportService, export_to_html
from itinerary_export.services.html_document_builder import (
    ItineraryDocumentBuilder,
    render_itinerary,
)

__all__ = [
    "DeliveredDocument",
    "DeliveryAdapter",
    "HtmlExportService",
    "InMemoryDelivery",
    "ItineraryDocumentBuilder",
    "LocalFileDelivery",
    "export_to_html",
    "get_delivery_adapter",
    "render_itinerary",
]
