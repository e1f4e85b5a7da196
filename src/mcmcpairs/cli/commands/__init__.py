"""CLI command modules for mcmcpairs.

Each module exports a command function carrying its Typer annotations; the
main app.py imports and registers them.
"""

from mcmcpairs.cli.commands.init import init_command
from mcmcpairs.cli.commands.plot import plot_command

__all__ = [
    "init_command",
    "plot_command",
]
