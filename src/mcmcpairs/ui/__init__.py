"""UI and terminal output styling for mcmcpairs.

Submodules:
- console: Theme and console instance
- logging: Logger configuration (file and Rich handlers)
- messages: Status messages (success, error, warning, etc.)
- reporter: Rich implementation of the Reporter protocol
"""

from mcmcpairs.ui.console import MCMCPAIRS_THEME, REPO_URL, VERSION, console, icon
from mcmcpairs.ui.logging import close_logging, log, setup_logging
from mcmcpairs.ui.messages import (
    action,
    error,
    info,
    print_next_steps,
    show_version,
    success,
    warning,
)
from mcmcpairs.ui.reporter import ConsoleReporter

__all__ = [
    "MCMCPAIRS_THEME",
    "REPO_URL",
    "VERSION",
    "ConsoleReporter",
    "action",
    "close_logging",
    "console",
    "error",
    "icon",
    "info",
    "log",
    "print_next_steps",
    "setup_logging",
    "show_version",
    "success",
    "warning",
]
