from itinerary_export.errors.base import BASE_EXCEPTION, BaseAppError
from itinerary_export.errors.export import DeliveryError, ExportError, MalformedInputError

__all__ = [
    "BASE_EXCEPTION",
    "BaseAppError",
    "DeliveryError",
    "ExportError",
    "MalformedInputError",
]
