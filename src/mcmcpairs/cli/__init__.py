"""Command line interface for mcmcpairs."""

from mcmcpairs.cli.app import app

__all__ = ["app"]
