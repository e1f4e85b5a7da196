"""Domain objects: posterior draws, fit summaries and rendering options."""

from mcmcpairs.core.domain.config import DiagonalMode, PairsConfig
from mcmcpairs.core.domain.fit import AsymptoticFit, PosteriorSample, select_parameters

__all__ = [
    "AsymptoticFit",
    "DiagonalMode",
    "PairsConfig",
    "PosteriorSample",
    "select_parameters",
]
