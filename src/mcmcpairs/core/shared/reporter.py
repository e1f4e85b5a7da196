"""Status reporting abstraction.

The service layer reports what it is doing through the ``Reporter`` protocol
so it never imports the Rich-based UI directly:

    - NullReporter discards everything (tests, notebooks)
    - LoggingReporter forwards to the ``mcmcpairs`` logger
    - ConsoleReporter (in ui/) prints styled messages
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol for status reporting.

    Messages are plain strings so implementations are free to style them.
    """

    def action(self, message: str) -> None:
        """Report an action being performed, e.g. 'Loading posterior...'."""
        ...

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Report a non-fatal issue."""
        ...

    def success(self, message: str) -> None:
        """Report successful completion of an operation."""
        ...


class NullReporter:
    """Silent reporter that discards all messages.

    Example:
        >>> reporter = NullReporter()
        >>> reporter.action("Rendering...")  # No output
    """

    def action(self, message: str) -> None:
        """Discard action message."""

    def info(self, message: str) -> None:
        """Discard info message."""

    def warning(self, message: str) -> None:
        """Discard warning message."""

    def success(self, message: str) -> None:
        """Discard success message."""


class LoggingReporter:
    """Reporter that writes to Python logging.

    Example:
        >>> reporter = LoggingReporter("mcmcpairs.services")
        >>> reporter.action("Rendering 4x4 matrix")  # INFO level
        >>> reporter.warning("Zero-width range for 'q'")  # WARNING level
    """

    def __init__(self, logger_name: str = "mcmcpairs") -> None:
        self._logger = logging.getLogger(logger_name)

    def action(self, message: str) -> None:
        """Log action at INFO level with prefix."""
        self._logger.info("[ACTION] %s", message)

    def info(self, message: str) -> None:
        """Log info at INFO level."""
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """Log warning at WARNING level."""
        self._logger.warning(message)

    def success(self, message: str) -> None:
        """Log success at INFO level with prefix."""
        self._logger.info("[SUCCESS] %s", message)
