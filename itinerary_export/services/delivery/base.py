"""
Base delivery protocol for rendered itinerary documents.

This module defines the interface for delivery backends, allowing for
different strategies (write to disk, keep in memory, upload, etc.).
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class DeliveryAdapter(Protocol):
    """
    Protocol defining the interface for delivery adapters.

    An adapter makes a rendered document available to the user as a file.
    It either returns normally or raises; any resource it acquires while
    saving must be released before it returns, on both paths.
    """

    @abstractmethod
    def save(self, content: str, filename: str, mime_type: str) -> None:
        """
        Make a document available to the user as a file.

        Args:
            content: The rendered document text
            filename: Suggested filename, without any directory part
            mime_type: MIME type of the document (e.g., "text/html")
        """
        ...
