"""
Delivery adapters package.

This package provides delivery backends for rendered documents,
with support for the local filesystem and in-memory capture.
"""

from itinerary_export.configs.settings import settings
from itinerary_export.services.delivery.base import DeliveryAdapter
from itinerary_export.services.delivery.local import LocalFileDelivery
from itinerary_export.services.delivery.memory import DeliveredDocument, InMemoryDelivery


def get_delivery_adapter() -> DeliveryAdapter:
    """
    Get the configured delivery adapter.

    Returns the implementation selected by the DELIVERY_PROVIDER setting.

    Returns:
        DeliveryAdapter: Configured delivery adapter instance
    """
    if settings.DELIVERY_PROVIDER == "memory":
        return InMemoryDelivery()
    return LocalFileDelivery()


__all__ = [
    "DeliveredDocument",
    "DeliveryAdapter",
    "InMemoryDelivery",
    "LocalFileDelivery",
    "get_delivery_adapter",
]
