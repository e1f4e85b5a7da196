"""Console-based reporter implementation using Rich.

Adapts the Reporter protocol from ``core.shared.reporter`` to the styled
messages of this package.
"""

from __future__ import annotations

from mcmcpairs.ui.messages import action, info, success, warning


class ConsoleReporter:
    """Reporter implementation using Rich console output.

    Example:
        >>> from mcmcpairs.ui.reporter import ConsoleReporter
        >>> reporter = ConsoleReporter()
        >>> reporter.action("Loading posterior...")
        >>> reporter.success("Loaded 4000 draws")
    """

    def action(self, message: str) -> None:
        action(message)

    def info(self, message: str) -> None:
        info(message)

    def warning(self, message: str) -> None:
        warning(message)

    def success(self, message: str) -> None:
        success(message)
