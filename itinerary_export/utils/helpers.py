from contextlib import suppress
from datetime import datetime
from email.utils import parsedate_to_datetime
from html import escape
from re import compile as re_compile

from itinerary_export.configs.settings import INVALID_CREATED_AT_ERROR
from itinerary_export.errors import MalformedInputError

WHITESPACE_RUN = re_compile(r"\s+")

# Non-ISO creation timestamps, tried in order
CREATED_AT_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def today_str() -> str:
    """Return the current local date and time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def escape_text(value: object) -> str:
    """
    Escape untrusted text for insertion into HTML.

    Neutralises ``&``, ``<``, ``>``, ``"`` and ``'`` so the text can never
    alter the document structure. ``html.unescape`` restores the original.

    Args:
        value: The text (or any value, rendered with ``str``) to escape.

    Returns:
        str: The escaped text.
    """
    return escape(str(value), quote=True)


def suggested_filename(
    destination: str,
    suffix: str = "_Itinerary",
    extension: str = ".html",
) -> str:
    """
    Derive the download filename for an itinerary document.

    Every run of whitespace in the destination becomes a single underscore.

    Examples:
    --------
    >>> suggested_filename("New York City")
    'New_York_City_Itinerary.html'
    """
    return f"{WHITESPACE_RUN.sub('_', destination)}{suffix}{extension}"


def _parse_timestamp(value: str) -> datetime:
    """Try ISO 8601, then RFC 2822, then the fixed ``CREATED_AT_FORMATS``."""
    with suppress(ValueError):
        return datetime.fromisoformat(value)
    with suppress(TypeError, ValueError):
        return parsedate_to_datetime(value)
    for date_format in CREATED_AT_FORMATS:
        with suppress(ValueError):
            return datetime.strptime(value, date_format)  # noqa: DTZ007
    mssg = f"Unrecognised timestamp: {value!r}"
    raise ValueError(mssg)


def parse_created_at(created_at: str) -> datetime:
    """
    Parse an itinerary creation timestamp.

    Accepts ISO 8601 date and date-time strings (including a trailing ``Z``),
    RFC 2822 dates such as ``Mon, 15 Jan 2024 00:00:00 GMT``, and the
    slash and month-name forms listed in ``CREATED_AT_FORMATS``.

    Raises:
        MalformedInputError: If the value is not a parseable timestamp.
    """
    try:
        return _parse_timestamp(created_at.strip())
    except (AttributeError, TypeError, ValueError) as e:
        raise MalformedInputError(INVALID_CREATED_AT_ERROR, field="createdAt") from e


def format_created_at(created_at: str, date_format: str = "%x") -> str:
    """Format the calendar date written in ``created_at``, without time zone conversion."""
    return parse_created_at(created_at).strftime(date_format)
