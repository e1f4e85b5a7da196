"""Application service layer for orchestrating mcmcpairs workflows.

This module provides high-level service facades that the CLI and other
adapters can use without knowing core implementation details.
"""

from mcmcpairs.services.plot import PairsPlotService, PlotOutput

__all__ = [
    "PairsPlotService",
    "PlotOutput",
]
