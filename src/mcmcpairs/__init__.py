"""mcmcpairs - Pairs plots of MCMC draws against the asymptotic fit.

Public API:
    - plot_pairs: Draw the pairs matrix into a new matplotlib figure
    - PairsPlotService: Load files, draw and save the figure

Configuration:
    - PairsConfig: Plot options
    - DiagonalMode: Diagnostic drawn on the diagonal
    - MatrixLayout: Grid geometry and axis styling

Domain Objects:
    - PosteriorSample: Draws, one column per parameter
    - AsymptoticFit: Estimates, standard errors and correlation matrix
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

# Configuration
from mcmcpairs.core.domain.config import DiagonalMode, PairsConfig

# Domain objects
from mcmcpairs.core.domain.fit import AsymptoticFit, PosteriorSample, select_parameters

# Errors
from mcmcpairs.core.shared.exceptions import (
    ConfigError,
    DataIOError,
    DegenerateInputWarning,
    McmcPairsError,
    PreconditionError,
)
from mcmcpairs.io import load_config, load_fit_summary, load_posterior

# Plotting (primary API)
from mcmcpairs.plotting import MatrixLayout, plot_pairs
from mcmcpairs.services import PairsPlotService, PlotOutput

__all__ = [
    # Version
    "__version__",
    # Plotting
    "plot_pairs",
    "MatrixLayout",
    # Services
    "PairsPlotService",
    "PlotOutput",
    # Configuration
    "PairsConfig",
    "DiagonalMode",
    # Domain
    "PosteriorSample",
    "AsymptoticFit",
    "select_parameters",
    # IO
    "load_posterior",
    "load_fit_summary",
    "load_config",
    # Errors
    "McmcPairsError",
    "PreconditionError",
    "ConfigError",
    "DataIOError",
    "DegenerateInputWarning",
]
