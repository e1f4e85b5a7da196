"""Posterior draws and asymptotic fit summaries.

Both structures are positionally aligned: column ``i`` of the posterior is the
parameter described by entry ``i`` of the fit. Subsetting always goes through
:func:`select_parameters`, which re-indexes both at once.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from mcmcpairs.core.shared.exceptions import PreconditionError

if TYPE_CHECKING:
    import pandas as pd

    from mcmcpairs.core.shared.typing import FloatArray


@dataclass(frozen=True)
class PosteriorSample:
    """MCMC draws, one row per iteration and one column per parameter.

    Attributes:
        draws: Array of shape (n_draws, n_params)
        names: Optional column names (as read from the table header)
    """

    draws: FloatArray
    names: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        draws = np.asarray(self.draws, dtype=float)
        if draws.ndim == 1:
            draws = draws[:, np.newaxis]
        if draws.ndim != 2:
            msg = f"Posterior draws must be a 2-D table, got {draws.ndim} dimensions"
            raise PreconditionError(msg)
        if draws.shape[0] == 0:
            msg = "Posterior sample contains no draws"
            raise PreconditionError(msg)
        if not np.all(np.isfinite(draws)):
            rows, cols = np.nonzero(~np.isfinite(draws))
            msg = (
                f"Posterior draws contain {rows.size} missing or non-finite values "
                f"(first at row {rows[0]}, column {cols[0]})"
            )
            raise PreconditionError(msg)
        object.__setattr__(self, "draws", draws)

        if self.names is not None:
            names = tuple(str(name) for name in self.names)
            if len(names) != draws.shape[1]:
                msg = f"Got {len(names)} column names for {draws.shape[1]} posterior columns"
                raise PreconditionError(msg)
            object.__setattr__(self, "names", names)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> PosteriorSample:
        """Build a sample from a DataFrame, keeping its column labels."""
        return cls(draws=frame.to_numpy(dtype=float), names=tuple(map(str, frame.columns)))

    @property
    def n_draws(self) -> int:
        return int(self.draws.shape[0])

    @property
    def n_params(self) -> int:
        return int(self.draws.shape[1])

    def column(self, index: int) -> FloatArray:
        """Return the draws of one parameter."""
        return self.draws[:, index]


@dataclass(frozen=True)
class AsymptoticFit:
    """Maximum-likelihood point estimates with their asymptotic uncertainty.

    Attributes:
        names: Parameter names, in posterior column order
        estimates: Point estimates
        std_errors: Asymptotic standard errors
        correlation: Square correlation matrix (unit diagonal)
    """

    names: tuple[str, ...]
    estimates: FloatArray
    std_errors: FloatArray
    correlation: FloatArray = field(repr=False)

    def __post_init__(self) -> None:
        names = tuple(str(name) for name in self.names)
        estimates = np.asarray(self.estimates, dtype=float).ravel()
        std_errors = np.asarray(self.std_errors, dtype=float).ravel()
        correlation = np.atleast_2d(np.asarray(self.correlation, dtype=float))

        n = len(names)
        if estimates.size != n or std_errors.size != n:
            msg = (
                f"Fit summary is inconsistent: {n} names, {estimates.size} estimates, "
                f"{std_errors.size} standard errors"
            )
            raise PreconditionError(msg)
        if correlation.shape != (n, n):
            msg = f"Correlation matrix has shape {correlation.shape}, expected ({n}, {n})"
            raise PreconditionError(msg)

        object.__setattr__(self, "names", names)
        object.__setattr__(self, "estimates", estimates)
        object.__setattr__(self, "std_errors", std_errors)
        object.__setattr__(self, "correlation", correlation)

    @property
    def n_params(self) -> int:
        return len(self.names)


def select_parameters(
    posterior: PosteriorSample,
    fit: AsymptoticFit,
    indices: Sequence[int] | None = None,
    *,
    match_names: bool = False,
) -> tuple[PosteriorSample, AsymptoticFit]:
    """Subset posterior columns and fit entries together.

    Args:
        posterior: Full posterior sample
        fit: Full asymptotic fit, aligned with ``posterior`` by position
        indices: Ordered 0-based parameter indices to keep (default: all)
        match_names: Also require posterior column names to equal fit names

    Returns:
        New (posterior, fit) pair restricted to ``indices``

    Raises:
        PreconditionError: If the parameter counts differ, an index is out of
            range, fewer than two parameters remain, a selected estimate or
            standard error is non-finite (or the error negative), or the subsetted
            correlation matrix holds values outside [-1, 1]
    """
    if posterior.n_params != fit.n_params:
        msg = (
            f"Number of parameters in posterior ({posterior.n_params}) and "
            f"fit summary ({fit.n_params}) are not the same"
        )
        raise PreconditionError(msg)

    if match_names and posterior.names is not None and posterior.names != fit.names:
        mismatched = [
            f"{a!r} != {b!r}" for a, b in zip(posterior.names, fit.names, strict=True) if a != b
        ]
        msg = "Posterior columns do not match fit parameter names: " + ", ".join(mismatched)
        raise PreconditionError(msg)

    keep = list(range(fit.n_params)) if indices is None else [int(i) for i in indices]
    bad = [i for i in keep if not 0 <= i < fit.n_params]
    if bad:
        msg = f"Parameter indices out of range for {fit.n_params} parameters: {bad}"
        raise PreconditionError(msg)
    if len(keep) < 2:
        msg = "A pairs plot is only meaningful for >1 parameter"
        raise PreconditionError(msg)

    estimates = fit.estimates[keep]
    std_errors = fit.std_errors[keep]
    if not np.all(np.isfinite(estimates)):
        msg = "Fit estimates must be finite for the selected parameters"
        raise PreconditionError(msg)
    if not np.all(np.isfinite(std_errors)) or np.any(std_errors < 0):
        bad_names = [
            fit.names[i]
            for i, se in zip(keep, std_errors, strict=True)
            if not (np.isfinite(se) and se >= 0)
        ]
        msg = f"Standard errors must be finite and non-negative: {', '.join(bad_names)}"
        raise PreconditionError(msg)

    correlation = fit.correlation[np.ix_(keep, keep)]
    if not np.all(np.isfinite(correlation)) or np.any(np.abs(correlation) > 1.0):
        msg = "Correlation matrix has values outside [-1, 1] for the selected parameters"
        raise PreconditionError(msg)

    names = None if posterior.names is None else tuple(posterior.names[i] for i in keep)
    sub_posterior = PosteriorSample(draws=posterior.draws[:, keep], names=names)
    sub_fit = AsymptoticFit(
        names=tuple(fit.names[i] for i in keep),
        estimates=estimates,
        std_errors=std_errors,
        correlation=correlation,
    )
    return sub_posterior, sub_fit
