"""Input/output: posterior tables, fit summaries and configuration files."""

from mcmcpairs.io.config import generate_default_config, load_config, save_config
from mcmcpairs.io.loaders import (
    FitSummarySchema,
    load_fit_summary,
    load_posterior,
    read_admb_cor,
)

__all__ = [
    "FitSummarySchema",
    "generate_default_config",
    "load_config",
    "load_fit_summary",
    "load_posterior",
    "read_admb_cor",
    "save_config",
]
