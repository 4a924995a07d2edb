# itinerary_export/services/export.py

"""
HTML export of generated itineraries.

Rendering always completes before delivery starts: a document that fails to
render is never handed to the delivery adapter, and nothing partial is saved.
"""

from itinerary_export.configs.settings import HTML_EXPORT_ERROR, settings
from itinerary_export.errors import DeliveryError, MalformedInputError
from itinerary_export.monitoring import bind_export_context, clear_context, get_logger
from itinerary_export.schemas.itinerary import ItineraryResponse
from itinerary_export.services.delivery import DeliveryAdapter, get_delivery_adapter
from itinerary_export.services.html_document_builder import ItineraryDocumentBuilder
from itinerary_export.utils.helpers import suggested_filename

logger = get_logger(__name__)

EXPORT_CONTEXT_KEYS = ("destination", "itinerary_id")


class HtmlExportService:
    """Render itineraries to standalone HTML and hand them to a delivery adapter."""

    def __init__(
        self,
        adapter: DeliveryAdapter | None = None,
        builder: ItineraryDocumentBuilder | None = None,
    ) -> None:
        self.adapter = adapter if adapter is not None else get_delivery_adapter()
        self.builder = builder if builder is not None else ItineraryDocumentBuilder()

    def create_html_content(self, itinerary: ItineraryResponse) -> str:
        """
        Render the itinerary document.

        Raises:
            MalformedInputError: If the itinerary cannot be rendered faithfully.
        """
        return self.builder.build_document(itinerary)

    def filename_for(self, itinerary: ItineraryResponse) -> str:
        """Suggested download filename for the itinerary document."""
        return suggested_filename(
            itinerary.destination,
            suffix=settings.FILENAME_SUFFIX,
            extension=settings.HTML_EXTENSION,
        )

    def export_to_html(self, itinerary: ItineraryResponse) -> str:
        """
        Render the itinerary and deliver it as an HTML file.

        Args:
            itinerary: The trip plan to export.

        Returns:
            str: The filename the document was delivered under.

        Raises:
            MalformedInputError: If rendering fails; no delivery is attempted.
            DeliveryError: If the adapter fails to save the document.
        """
        bind_export_context(destination=itinerary.destination, itinerary_id=itinerary.id)
        try:
            return self._render_and_deliver(itinerary)
        finally:
            clear_context(*EXPORT_CONTEXT_KEYS)

    def _render_and_deliver(self, itinerary: ItineraryResponse) -> str:
        try:
            content = self.create_html_content(itinerary)
        except MalformedInputError as e:
            logger.warning("Itinerary rejected", reason=e.detail, field=e.field)
            raise

        filename = self.filename_for(itinerary)
        logger.debug("Itinerary rendered", filename=filename, size=len(content))

        try:
            self.adapter.save(content, filename, settings.HTML_MIME_TYPE)
        except Exception as e:
            logger.exception("Error generating HTML", filename=filename)
            raise DeliveryError(HTML_EXPORT_ERROR, cause=e) from e

        logger.info("Itinerary exported", filename=filename)
        return filename


def export_to_html(
    itinerary: ItineraryResponse,
    adapter: DeliveryAdapter | None = None,
) -> str:
    """Render and deliver an itinerary, returning the delivered filename."""
    return HtmlExportService(adapter=adapter).export_to_html(itinerary)
