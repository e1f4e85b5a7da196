"""Numeric primitives consumed by the matrix cells."""

from mcmcpairs.core.diagnostics.metrics import (
    AutocorrelationResult,
    HistogramResult,
    compute_autocorrelation,
    compute_histogram,
    correlation_label_size,
    default_max_lag,
    format_correlation,
    pearson_correlation,
    rounded_correlation,
)

__all__ = [
    "AutocorrelationResult",
    "HistogramResult",
    "compute_autocorrelation",
    "compute_histogram",
    "correlation_label_size",
    "default_max_lag",
    "format_correlation",
    "pearson_correlation",
    "rounded_correlation",
]
