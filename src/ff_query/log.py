"""
Scoped structlog loggers used to emit debug SQL.

A Query accepts any object with a ``debug(event, **kwargs)`` method as its
logger; these are the implementations shipped with the package.
"""

import sys
from typing import Any, Protocol

import structlog
from structlog.stdlib import BoundLogger
from structlog.testing import LogCapture
from structlog.types import Processor

from .exceptions import ConfigurationError
from .settings import get_settings


class SupportsDebug(Protocol):
    """Anything a Query can hand its interpolated SQL to."""

    def debug(self, event: str, **kwargs: Any) -> None: ...


class QueryLogger:
    """
    Logger with its own context and processor chain, rendering to the console.

    Each instance configures its own structlog logger, so creating one never
    touches global structlog configuration.
    """

    def __init__(
        self,
        name: str,
        context: dict[str, Any] | None = None,
        colors: bool = True,
        stream=None,
    ):
        """
        Initialize a scoped logger.

        Args:
            name: Logger name/scope identifier
            context: Initial context dictionary
            colors: Whether to use colored console output
            stream: Output stream (default: sys.stderr)
        """
        self.name = name
        self.colors = colors
        self.stream = stream or sys.stderr
        self._context = dict(context or {})
        self._context["logger"] = name

        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=self.stream),
            wrapper_class=BoundLogger,
            processors=self._get_default_processors(),
        ).bind(**self._context)

    def _get_default_processors(self) -> list[Processor]:
        """Processor chain; overridden by subclasses for other renderers."""
        return [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=self.colors),
        ]

    def _clone(self, context: dict[str, Any]) -> "QueryLogger":
        return self.__class__(self.name, context=context, colors=self.colors, stream=self.stream)

    def bind(self, **kwargs: Any) -> "QueryLogger":
        """Return a new logger with additional context."""
        return self._clone({**self._context, **kwargs})

    def unbind(self, *keys: str) -> "QueryLogger":
        """Return a new logger without the given context keys."""
        return self._clone({k: v for k, v in self._context.items() if k not in keys})

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._logger.error(event, **kwargs)

    @property
    def context(self) -> dict[str, Any]:
        """Get the current logger context."""
        return self._context.copy()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, context={self._context!r})"


class JSONQueryLogger(QueryLogger):
    """Emits one JSON object per line, for log aggregation."""

    def _get_default_processors(self) -> list[Processor]:
        return [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]


class NullLogger:
    """Discards everything. Used when FF_QUERY_LOG_FORMAT=null."""

    def __init__(self, name: str, context: dict[str, Any] | None = None, **kwargs: Any):
        self.name = name
        self._context = dict(context or {})

    def bind(self, **kwargs: Any) -> "NullLogger":
        return self

    def unbind(self, *keys: str) -> "NullLogger":
        return self

    def debug(self, event: str, **kwargs: Any) -> None:
        pass

    def info(self, event: str, **kwargs: Any) -> None:
        pass

    def warning(self, event: str, **kwargs: Any) -> None:
        pass

    def error(self, event: str, **kwargs: Any) -> None:
        pass

    @property
    def context(self) -> dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        return f"NullLogger(name={self.name!r})"


class CaptureLogger(QueryLogger):
    """
    A logger that captures log entries for testing.

    Entries are dicts holding the event, ``log_level`` and all bound context.
    Loggers created through ``bind``/``unbind`` share the same capture.
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None, **kwargs: Any):
        self._capture = kwargs.pop("capture", None) or LogCapture()
        super().__init__(name, context=context, **kwargs)

    def _get_default_processors(self) -> list[Processor]:
        return [self._capture]

    def _clone(self, context: dict[str, Any]) -> "CaptureLogger":
        return CaptureLogger(self.name, context=context, capture=self._capture)

    @property
    def entries(self) -> list[dict[str, Any]]:
        """Get captured log entries."""
        return self._capture.entries

    def clear(self) -> None:
        """Clear captured entries."""
        self._capture.entries.clear()


_LOGGER_TYPES = {
    "console": QueryLogger,
    "json": JSONQueryLogger,
    "null": NullLogger,
    "none": NullLogger,
}


def get_logger(name: str, logger_type: str | None = None, **kwargs: Any) -> QueryLogger | NullLogger:
    """
    Get a logger instance based on settings.

    Args:
        name: Logger name/scope
        logger_type: Override logger type (console, json, null)
        **kwargs: Additional arguments for the logger constructor

    Returns:
        Logger instance of the appropriate type

    Raises:
        ConfigurationError: If the logger type is unknown
    """
    settings = get_settings()
    if logger_type is None:
        logger_type = settings.log_format

    logger_class = _LOGGER_TYPES.get(logger_type.lower())
    if logger_class is None:
        raise ConfigurationError(f"Unknown logger type: {logger_type}")

    if logger_class is QueryLogger:
        kwargs.setdefault("colors", settings.log_colors)

    return logger_class(name, **kwargs)
