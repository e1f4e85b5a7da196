"""Exception taxonomy for mcmcpairs.

This module defines a small, coherent hierarchy of exceptions so callers can
tell a bad input (raised before anything is drawn) apart from file and
configuration problems. Degenerate but drawable inputs are reported with a
warning category instead of an exception.
"""

from __future__ import annotations


class McmcPairsError(Exception):
    """Base class for all mcmcpairs-specific exceptions."""


class PreconditionError(McmcPairsError, ValueError):
    """Inputs that make the pairs matrix undefined (mismatched counts, n < 2, bad correlations)."""


class ConfigError(McmcPairsError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class DataIOError(McmcPairsError):
    """Data loading errors (missing files, unreadable tables, malformed fit summaries)."""


class DegenerateInputWarning(UserWarning):
    """Input that is drawable only with a fallback (zero-width range, dense scatter)."""


__all__ = [
    "ConfigError",
    "DataIOError",
    "DegenerateInputWarning",
    "McmcPairsError",
    "PreconditionError",
]
