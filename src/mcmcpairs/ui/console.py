"""Console configuration and theme for the mcmcpairs UI.

This module provides the central console instance and theme used by the CLI
for consistent styling.
"""

import os
import sys
from importlib import metadata

from rich.console import Console
from rich.theme import Theme

try:
    _PKG_VERSION = metadata.version("mcmcpairs")
except metadata.PackageNotFoundError:
    _PKG_VERSION = "dev"

MCMCPAIRS_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        "panel.border": "blue",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "path": "blue underline",
        "code": "bold magenta",
        "dim": "dim",
    }
)

# Single console instance for the entire application
console = Console(theme=MCMCPAIRS_THEME)

VERSION = _PKG_VERSION
REPO_URL = "https://github.com/mcmcpairs/mcmcpairs"

_EMOJI_DISABLED = os.getenv("MCMCPAIRS_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_unicode() -> bool:
    """Best-effort detection if the terminal can print Unicode symbols."""
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: check, warn, error, info, bullet
    """
    unicode = _supports_unicode()
    mapping = {
        "check": "✓" if unicode else "+",
        "warn": "⚠" if unicode else "!",
        "error": "✗" if unicode else "x",
        "info": "▸" if unicode else ">",
        "bullet": "•" if unicode else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = [
    "MCMCPAIRS_THEME",
    "REPO_URL",
    "VERSION",
    "console",
    "icon",
]
