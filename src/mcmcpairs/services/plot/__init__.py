"""Plot service: render a pairs matrix from files."""

from mcmcpairs.services.plot.service import PairsPlotService, PlotOutput

__all__ = ["PairsPlotService", "PlotOutput"]
