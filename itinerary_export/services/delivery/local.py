"""
Local filesystem delivery implementation.

Rendered documents are written under the configured export directory.
Each file is written to a temporary sibling first and renamed into place,
so a reader never sees a half-written document.
"""

from os import replace
from pathlib import Path
from tempfile import NamedTemporaryFile

from itinerary_export.configs.settings import settings
from itinerary_export.errors import BASE_EXCEPTION, DeliveryError
from itinerary_export.monitoring import get_logger

logger = get_logger(__name__)


class LocalFileDelivery:
    """
    Local filesystem delivery implementation.

    Suitable for command-line tools, tests, and any host where "download"
    means writing a file next to the user's other exports.
    """

    def __init__(self, directory: Path | str | None = None, encoding: str = "utf-8") -> None:
        """Initialize local delivery with the export directory."""
        self.directory = Path(directory) if directory is not None else settings.EXPORT_DIR
        self.encoding = encoding

    def _ensure_directory(self) -> None:
        """Ensure the export directory exists."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, filename: str) -> Path:
        """
        Get the target path for a filename.

        Args:
            filename: Suggested filename

        Returns:
            Path: Full path inside the export directory

        Raises:
            DeliveryError: If the filename would escape the export directory
        """
        name = Path(filename).name
        if not filename or name != filename or name in {".", ".."}:
            mssg = f"Refusing to save to unsafe filename: {filename!r}"
            raise DeliveryError(mssg)
        return self.directory / name

    def save(self, content: str, filename: str, mime_type: str) -> None:
        """
        Write a document to the export directory.

        Args:
            content: The rendered document text
            filename: Suggested filename
            mime_type: MIME type of the document
        """
        file_path = self._get_file_path(filename)
        self._ensure_directory()

        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                dir=self.directory,
                prefix=f".{file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(content)
            replace(tmp_path, file_path)
        except BASE_EXCEPTION as e:
            logger.warning("Document save failed", path=str(file_path), error=str(e))
            raise
        finally:
            # No-op after a successful rename
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

        logger.debug(
            "Document saved",
            path=str(file_path),
            mime_type=mime_type,
            size=len(content),
        )
