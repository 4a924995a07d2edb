"""
Structured logging for itinerary exports.

This module provides structured logging using structlog with:
- Pretty console output for development
- JSON output for production
- Control character escaping, so untrusted itinerary text cannot forge log lines

Examples
--------
>>> from itinerary_export.monitoring import get_logger
>>> logger = get_logger("my_module")
>>> logger.info("Itinerary exported", destination="Paris")
"""

from logging import INFO, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    merge_contextvars,
    unbind_contextvars,
)
from structlog.dev import ConsoleRenderer, RichTracebackFormatter
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    ExtraAdder,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from itinerary_export.configs.settings import settings
from itinerary_export.utils.helpers import today_str

# Characters to sanitize to prevent log injection
CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: Any) -> str:
    r"""
    Remove control characters and sanitize log messages.

    Args:
        message: Raw log message that might contain injection attempts.

    Returns:
        Sanitized message with control characters escaped or removed.

    Examples:
    --------
    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return str(message).translate(CONTROL_CHARS)


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add a local timestamp to the log entry."""
    event_dict["timestamp"] = today_str()
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """
    Sanitize every string value of the event dictionary.

    Rendered tracebacks are left intact.

    Args:
        logger: The wrapped logger instance.
        method_name: The name of the logging method being called.
        event_dict: The event dictionary being built.

    Returns:
        Sanitized event dictionary.
    """
    for key, value in event_dict.items():
        if isinstance(value, str) and key != "exception":
            event_dict[key] = sanitize_log_message(value)
    return event_dict


def get_renderer(*, colors: bool = True) -> Processor:
    """
    Get the final structlog renderer based on environment.

    Args:
        colors: Whether to enable colors in ConsoleRenderer.

    Returns:
        Console renderer for development, JSON renderer otherwise.
    """
    if settings.ENVIRONMENT == "development":
        return ConsoleRenderer(
            colors=colors,
            pad_level=False,
            exception_formatter=RichTracebackFormatter(),
        )
    return JSONRenderer()


def build_formatter(*, colors: bool = True) -> ProcessorFormatter:
    """
    Build the stdlib formatter shared by structlog and foreign log records.

    Args:
        colors: Whether to enable colors in the console renderer.

    Returns:
        ProcessorFormatter applying timestamping, sanitization and rendering.
    """
    return ProcessorFormatter(
        processors=[
            ProcessorFormatter.remove_processors_meta,
            add_timestamp,
            sanitize_event_dict,
            get_renderer(colors=colors),
        ],
        foreign_pre_chain=[add_log_level, ExtraAdder()],
    )


def configure_logging() -> None:
    """Configure structured logging for the package."""
    # Clear any existing root handlers to prevent duplicates
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = StreamHandler()
    console_handler.setFormatter(build_formatter(colors=True))
    root.addHandler(console_handler)
    configure_file_logging()


def configure_file_logging() -> None:
    """Attach a rotating file handler when file logging is enabled."""
    if not settings.LOG_TO_FILE:
        return

    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
    )
    file_handler.setLevel(INFO)

    # Colors disabled for clean text log
    file_handler.setFormatter(build_formatter(colors=False))
    root.addHandler(file_handler)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: The name of the logger (typically __name__).

    Returns:
        Configured structlog BoundLogger instance.
    """
    return struct_logger(name)



def bind_export_context(**context: Any) -> None:
    """
    Bind export details to the current logging context.

    Args:
        **context: Key/value pairs added to every subsequent log entry.

    Examples:
    --------
    >>> bind_export_context(destination="Paris", itinerary_id="abc-123")
    >>> logger.info("Rendering")  # Will include destination and itinerary_id
    """
    bind_contextvars(**context)


def clear_context(*keys: str) -> None:
    """
    Clear bound context variables.

    Args:
        *keys: Keys to unbind. All context is cleared when none are given.

    Examples
    --------
    >>> clear_context("destination", "itinerary_id")
    """
    if keys:
        unbind_contextvars(*keys)
    else:
        clear_contextvars()
