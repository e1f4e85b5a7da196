"""Shared foundational utilities for mcmcpairs."""

from mcmcpairs.core.shared import reporter, typing
from mcmcpairs.core.shared.exceptions import (
    ConfigError,
    DataIOError,
    DegenerateInputWarning,
    McmcPairsError,
    PreconditionError,
)
from mcmcpairs.core.shared.reporter import LoggingReporter, NullReporter, Reporter

__all__ = [
    "ConfigError",
    "DataIOError",
    "DegenerateInputWarning",
    "LoggingReporter",
    "McmcPairsError",
    "NullReporter",
    "PreconditionError",
    "Reporter",
    "reporter",
    "typing",
]
