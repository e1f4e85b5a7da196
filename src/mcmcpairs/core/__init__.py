"""Core module for mcmcpairs: domain objects, geometry and numeric primitives."""

from mcmcpairs.core.domain import (
    AsymptoticFit,
    DiagonalMode,
    PairsConfig,
    PosteriorSample,
    select_parameters,
)

__all__ = [
    "AsymptoticFit",
    "DiagonalMode",
    "PairsConfig",
    "PosteriorSample",
    "select_parameters",
]
