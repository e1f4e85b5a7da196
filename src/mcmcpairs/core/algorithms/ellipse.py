"""Confidence ellipses of a bivariate normal approximation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.stats import chi2

from mcmcpairs.core.shared.exceptions import PreconditionError
from mcmcpairs.core.shared.typing import FloatArray


def chi2_radius(level: float = 0.95, df: int = 2) -> float:
    """Mahalanobis radius enclosing probability ``level`` of a ``df``-variate normal."""
    return float(np.sqrt(chi2.ppf(level, df=df)))


def confidence_ellipse(
    rho: float,
    scale: Sequence[float],
    centre: Sequence[float],
    npoints: int = 1000,
    level: float = 0.95,
) -> FloatArray:
    """Boundary of the ``level`` confidence region of a bivariate normal.

    The unit circle, sampled on ``npoints`` angles from 0 to 2π inclusive, is
    mapped through the Cholesky factor of the covariance
    ``[[sx², rho·sx·sy], [rho·sx·sy, sy²]]``, scaled by the chi-square(2)
    radius and shifted to ``centre``. The first and last vertices coincide.
    For ``|rho| == 1`` the ellipse collapses onto a segment.

    Args:
        rho: Correlation coefficient in [-1, 1]
        scale: Standard deviations (sx, sy), non-negative
        centre: Means (mx, my)
        npoints: Number of vertices, at least 3
        level: Enclosed probability, in (0, 1)

    Returns:
        Array of shape (npoints, 2) with the x, y vertices

    Raises:
        PreconditionError: On invalid correlation, scale, point count or level
    """
    rho = float(rho)
    if not np.isfinite(rho) or abs(rho) > 1.0:
        msg = f"Correlation must lie in [-1, 1], got {rho}"
        raise PreconditionError(msg)
    sx, sy = (float(s) for s in scale)
    if not (np.isfinite(sx) and np.isfinite(sy)) or sx < 0 or sy < 0:
        msg = f"Standard errors must be finite and non-negative, got ({sx}, {sy})"
        raise PreconditionError(msg)
    if npoints < 3:
        msg = f"An ellipse needs at least 3 points, got {npoints}"
        raise PreconditionError(msg)
    if not 0 < level < 1:
        msg = f"Confidence level must lie in (0, 1), got {level}"
        raise PreconditionError(msg)

    # Lower Cholesky factor of the 2x2 covariance
    factor = np.array([[sx, 0.0], [rho * sy, sy * np.sqrt(1.0 - rho * rho)]])

    angles = np.linspace(0.0, 2.0 * np.pi, npoints)
    circle = np.column_stack([np.cos(angles), np.sin(angles)])
    return chi2_radius(level) * circle @ factor.T + np.asarray(centre, dtype=float)
