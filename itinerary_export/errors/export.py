"""
Export-related error classes.

This module defines the exceptions raised while rendering an itinerary
document and handing it to a delivery adapter.
"""

from itinerary_export.configs.settings import HTML_EXPORT_ERROR, INVALID_PAYLOAD_ERROR
from itinerary_export.errors.base import BaseAppError


class ExportError(BaseAppError):
    """Base exception for itinerary export errors."""

    def __init__(self, detail: str = HTML_EXPORT_ERROR) -> None:
        super().__init__(detail=detail)


class MalformedInputError(ExportError):
    """Raised when itinerary data cannot be rendered faithfully."""

    def __init__(
        self,
        detail: str = INVALID_PAYLOAD_ERROR,
        field: str | None = None,
    ) -> None:
        super().__init__(detail=detail)
        self.field = field


class DeliveryError(ExportError):
    """Raised when the delivery adapter fails to save a rendered document."""

    def __init__(
        self,
        detail: str = HTML_EXPORT_ERROR,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(detail=detail)
        self.cause = cause
