"""Pure computation functions behind the matrix cells.

Stateless helpers that turn one or two posterior columns into the numbers a
cell draws: autocorrelation, histogram densities and correlation labels.
No plotting or I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from mcmcpairs.core.shared.typing import FloatArray


@dataclass(frozen=True)
class AutocorrelationResult:
    """Autocorrelation analysis results.

    Attributes:
        lags: Lag values (0 to max_lag)
        autocorr: Autocorrelation at each lag
        confidence_band: Half-width of the approximate 95% white-noise band
    """

    lags: FloatArray
    autocorr: FloatArray
    confidence_band: float


@dataclass(frozen=True)
class HistogramResult:
    """Density-normalised histogram of one parameter.

    Attributes:
        edges: Bin edges (n_bins + 1)
        density: Density in each bin, integrating to one
    """

    edges: FloatArray
    density: FloatArray

    @property
    def max_density(self) -> float:
        return float(np.max(self.density)) if self.density.size else 0.0


def default_max_lag(n_samples: int) -> int:
    """Default number of autocorrelation lags, ``floor(10 * log10(n))``, capped at n - 1."""
    if n_samples < 2:
        return 0
    return int(min(np.floor(10 * np.log10(n_samples)), n_samples - 1))


def compute_autocorrelation(
    chain: FloatArray,
    max_lag: int | None = None,
) -> AutocorrelationResult:
    """Compute the sample autocorrelation function of a single chain.

    Uses FFT for efficiency. The estimator divides by ``n`` at every lag.

    Args:
        chain: 1D array of draws in iteration order
        max_lag: Maximum lag to compute (default: :func:`default_max_lag`)

    Returns:
        AutocorrelationResult with lags and autocorrelation values
    """
    chain = np.asarray(chain, dtype=float)
    n = len(chain)
    if max_lag is None:
        max_lag = default_max_lag(n)
    max_lag = max(0, min(max_lag, n - 1))
    band = 1.96 / np.sqrt(n)

    chain_centered = chain - np.mean(chain)
    var = np.var(chain)

    if var == 0:
        # Constant chain
        return AutocorrelationResult(
            lags=np.arange(max_lag + 1, dtype=np.float64),
            autocorr=np.ones(max_lag + 1),
            confidence_band=float(band),
        )

    n_fft = 2 ** int(np.ceil(np.log2(2 * n - 1)))
    fft_data = np.fft.rfft(chain_centered, n=n_fft)
    autocorr_fft = np.fft.irfft(fft_data * np.conj(fft_data), n=n_fft)
    autocorr = autocorr_fft[:n] / (var * n)
    autocorr = autocorr[: max_lag + 1]

    return AutocorrelationResult(
        lags=np.arange(max_lag + 1, dtype=np.float64),
        autocorr=autocorr,
        confidence_band=float(band),
    )


def compute_histogram(values: FloatArray, bins: int | str = "sturges") -> HistogramResult:
    """Density histogram with Sturges binning by default."""
    density, edges = np.histogram(np.asarray(values, dtype=float), bins=bins, density=True)
    return HistogramResult(edges=edges, density=np.nan_to_num(density))


def pearson_correlation(x: FloatArray, y: FloatArray) -> float:
    """Empirical Pearson correlation of two columns.

    Returns NaN when either column is constant.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return float("nan")
    return float(np.corrcoef(x, y)[0, 1])


def rounded_correlation(x: FloatArray, y: FloatArray, decimals: int = 2) -> float:
    """Pearson correlation rounded for display; -0.0 is normalised to 0.0."""
    r = pearson_correlation(x, y)
    if np.isnan(r):
        return r
    return round(r, decimals) + 0.0


def correlation_label_size(r: float) -> float:
    """Relative text size of a correlation label: ``0.5 * (3 |r| + 0.25)``.

    NaN correlations get the size of r = 0.
    """
    magnitude = 0.0 if np.isnan(r) else abs(r)
    return 0.5 * (3.0 * magnitude + 0.25)


def format_correlation(r: float) -> str:
    """Display text of a correlation label."""
    return "NA" if np.isnan(r) else f"{r:.2f}"
