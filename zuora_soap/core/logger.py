"""
Shared Logger

Context-aware loggers for the Zuora client. Handlers and formatting are left
to the embedding application; the package logger only carries a NullHandler.
"""

import logging
from typing import Any

# Keys never written to log records
REDACTED_KEYS = frozenset({"password", "session_token", "token"})

PACKAGE_LOGGER = "zuora_soap"


class ContextLogger:
    """Logger that attaches a fixed, redacted context to every record."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        """
        Initialize context logger.

        Args:
            name: Logger name
            context: Default context to include in all logs
        """
        self._logger = logging.getLogger(name)
        self._context = _redact(context or {})

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def with_context(self, **kwargs) -> "ContextLogger":
        """Create new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs) -> None:
        extra = _redact({**self._context, **kwargs})
        self._logger.log(level, message, exc_info=exc_info, extra={"extra_data": extra})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log at ERROR with the active traceback."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


def _redact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: ("***" if key in REDACTED_KEYS else value) for key, value in data.items()}


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """Get a context-aware logger (name is typically __name__)."""
    return ContextLogger(name, context)


def get_client_logger(username: str | None, sandbox: bool) -> ContextLogger:
    """Get logger for a Zuora client instance."""
    return get_logger(
        f"{PACKAGE_LOGGER}.client",
        {"component": "soap_client", "username": username, "sandbox": sandbox},
    )
