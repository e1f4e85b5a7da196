"""Readers for posterior tables and asymptotic fit summaries.

Supported inputs:
- Posterior draws: CSV (``.csv``) or whitespace-separated text with a header row
- Fit summary: JSON or TOML with ``names``, ``estimates``, ``std_errors`` and
  ``correlation`` keys
- ADMB ``.cor`` files written by AD Model Builder after a maximum-likelihood fit
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mcmcpairs.core.domain.fit import AsymptoticFit, PosteriorSample
from mcmcpairs.core.shared.exceptions import DataIOError, PreconditionError

logger = logging.getLogger(__name__)


class FitSummarySchema(BaseModel):
    """On-disk layout of an asymptotic fit summary."""

    model_config = ConfigDict(extra="forbid")

    names: list[str] = Field(description="Parameter names in posterior column order")
    estimates: list[float] = Field(description="Maximum-likelihood estimates")
    std_errors: list[float] = Field(description="Asymptotic standard errors")
    correlation: list[list[float]] = Field(description="Square correlation matrix")

    def to_fit(self) -> AsymptoticFit:
        return AsymptoticFit(
            names=tuple(self.names),
            estimates=np.array(self.estimates),
            std_errors=np.array(self.std_errors),
            correlation=np.array(self.correlation),
        )


def load_posterior(path: Path) -> PosteriorSample:
    """Load posterior draws from a delimited text table.

    Args:
        path: CSV file, or whitespace-separated file for any other suffix

    Returns:
        PosteriorSample with the header row as column names

    Raises:
        DataIOError: If the file is missing, empty or holds non-numeric columns
    """
    if not path.exists():
        msg = f"Posterior file not found: {path}"
        raise DataIOError(msg)

    try:
        if path.suffix.lower() == ".csv":
            frame = pd.read_csv(path)
        else:
            frame = pd.read_csv(path, sep=r"\s+")
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as err:
        msg = f"Could not read posterior table {path}: {err}"
        raise DataIOError(msg) from err

    non_numeric = [str(c) for c in frame.columns if not pd.api.types.is_numeric_dtype(frame[c])]
    if non_numeric:
        msg = f"Posterior table {path} has non-numeric columns: {', '.join(non_numeric)}"
        raise DataIOError(msg)

    try:
        sample = PosteriorSample.from_frame(frame)
    except PreconditionError as err:
        msg = f"Invalid posterior table {path}: {err}"
        raise DataIOError(msg) from err

    logger.info("Loaded %d draws of %d parameters from %s", sample.n_draws, sample.n_params, path)
    return sample


def load_fit_summary(path: Path) -> AsymptoticFit:
    """Load an asymptotic fit summary.

    ``.json`` and ``.toml`` files are validated against :class:`FitSummarySchema`;
    ``.cor`` files are parsed with :func:`read_admb_cor`.

    Raises:
        DataIOError: If the file is missing, malformed or inconsistent
    """
    if not path.exists():
        msg = f"Fit summary not found: {path}"
        raise DataIOError(msg)

    suffix = path.suffix.lower()
    if suffix == ".cor":
        return read_admb_cor(path)

    try:
        if suffix == ".json":
            schema = FitSummarySchema.model_validate_json(path.read_text())
        elif suffix == ".toml":
            with path.open("rb") as f:
                schema = FitSummarySchema.model_validate(tomllib.load(f))
        else:
            msg = f"Unsupported fit summary format '{path.suffix}' (use .json, .toml or .cor)"
            raise DataIOError(msg)
        fit = schema.to_fit()
    except (ValidationError, tomllib.TOMLDecodeError) as err:
        msg = f"Malformed fit summary {path}: {err}"
        raise DataIOError(msg) from err
    except PreconditionError as err:
        msg = f"Inconsistent fit summary {path}: {err}"
        raise DataIOError(msg) from err

    logger.info("Loaded fit summary for %d parameters from %s", fit.n_params, path)
    return fit


def read_admb_cor(path: Path) -> AsymptoticFit:
    """Parse an ADMB ``.cor`` file.

    Layout::

         The logarithm of the determinant of the hessian = 8.31
         index   name   value      std.dev       1       2
             1   a      1.0e+00    1.0e-01   1.0000
             2   b      2.0e+00    2.0e-01   0.4000  1.0000

    Row ``i`` holds the lower-triangular correlations of parameter ``i`` with
    parameters ``1..i``; the matrix is mirrored to make it symmetric.

    Raises:
        DataIOError: If the file cannot be read or does not follow this layout
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        msg = f"Could not read ADMB correlation file {path}: {err}"
        raise DataIOError(msg) from err
    lines = [line.split() for line in text.splitlines() if line.strip()]
    header_at = next(
        (i for i, tokens in enumerate(lines) if tokens[:2] == ["index", "name"]),
        None,
    )
    if header_at is None:
        msg = f"{path} is not an ADMB .cor file (no 'index name' header)"
        raise DataIOError(msg)

    rows = lines[header_at + 1 :]
    n = len(rows)
    if n == 0:
        msg = f"{path} lists no parameters"
        raise DataIOError(msg)

    names: list[str] = []
    estimates = np.empty(n)
    std_errors = np.empty(n)
    correlation = np.empty((n, n))
    for i, tokens in enumerate(rows):
        if len(tokens) != 4 + i + 1:
            msg = f"{path}: row {i + 1} has {len(tokens)} fields, expected {4 + i + 1}"
            raise DataIOError(msg)
        try:
            values = [float(v) for v in tokens[2:]]
        except ValueError as err:
            msg = f"{path}: non-numeric value in row {i + 1}"
            raise DataIOError(msg) from err
        names.append(tokens[1])
        estimates[i], std_errors[i] = values[0], values[1]
        correlation[i, : i + 1] = values[2:]
        correlation[: i + 1, i] = values[2:]

    logger.info("Read ADMB correlation file %s (%d parameters)", path, n)
    return AsymptoticFit(
        names=tuple(names),
        estimates=estimates,
        std_errors=std_errors,
        correlation=correlation,
    )
