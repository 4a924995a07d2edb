"""In-memory delivery, for hosts that want the document back as bytes."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DeliveredDocument:
    """A document handed to an in-memory adapter."""

    filename: str
    mime_type: str
    content: bytes


@dataclass
class InMemoryDelivery:
    """Keep delivered documents as encoded bytes instead of writing them anywhere."""

    encoding: str = "utf-8"
    documents: list[DeliveredDocument] = field(default_factory=list)

    def save(self, content: str, filename: str, mime_type: str) -> None:
        """Record the document encoded with the adapter's encoding."""
        self.documents.append(
            DeliveredDocument(
                filename=filename,
                mime_type=mime_type,
                content=content.encode(self.encoding),
            ),
        )

    @property
    def last(self) -> DeliveredDocument | None:
        """Most recently delivered document, or None before the first save."""
        return self.documents[-1] if self.documents else None
