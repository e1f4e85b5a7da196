"""Plot command implementation."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from mcmcpairs.core.domain.config import DiagonalMode, PairsConfig
from mcmcpairs.core.shared.exceptions import McmcPairsError
from mcmcpairs.io.config import load_config
from mcmcpairs.services.plot import PairsPlotService
from mcmcpairs.ui import ConsoleReporter, close_logging, error, info, setup_logging


def _build_config(
    config_path: Path | None,
    diag: DiagonalMode | None,
    keep: list[int] | None,
) -> PairsConfig:
    """Merge command-line options over the configuration file (or defaults)."""
    config = load_config(config_path) if config_path is not None else PairsConfig()
    overrides: dict[str, object] = {}
    if diag is not None:
        overrides["diagonal_mode"] = diag
    if keep:
        overrides["parameter_subset"] = keep
    if not overrides:
        return config
    return PairsConfig.model_validate({**config.model_dump(), **overrides})


def plot_command(
    posterior: Annotated[
        Path,
        typer.Argument(
            help="Posterior draws (CSV or whitespace-separated, one column per parameter)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    fit: Annotated[
        Path,
        typer.Argument(
            help="Asymptotic fit summary (.json, .toml or ADMB .cor)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output figure; format from the suffix (pdf, png, svg)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("pairs.pdf"),
    diag: Annotated[
        DiagonalMode | None,
        typer.Option(
            "--diag",
            "-d",
            help="Diagnostic on the diagonal (overrides the configuration file)",
            case_sensitive=False,
        ),
    ] = None,
    keep: Annotated[
        list[int] | None,
        typer.Option(
            "--keep",
            "-k",
            help="0-based index of a parameter to show; repeat to select several",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write a log (JSON when the name ends in .json)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Echo log records on the console",
        ),
    ] = False,
) -> None:
    """Draw the pairs matrix of POSTERIOR against the asymptotic FIT.

    Lower triangle: draws with the maximum-likelihood estimate and its 95%
    confidence ellipse. Upper triangle: empirical correlations. Diagonal:
    autocorrelation, histogram or trace of each parameter.

    Examples
    --------
      Default autocorrelation diagonal:
        $ mcmcpairs plot posterior.csv fit.json

      Histograms for the first three parameters:
        $ mcmcpairs plot posterior.csv model.cor --diag histogram -k 0 -k 1 -k 2 -o pairs.png
    """
    setup_logging(log_file, verbose=verbose)
    try:
        try:
            pairs_config = _build_config(config, diag, keep)
        except (McmcPairsError, ValidationError, tomllib.TOMLDecodeError) as err:
            error(f"Invalid configuration: {escape(str(err))}")
            raise typer.Exit(1) from err

        service = PairsPlotService(reporter=ConsoleReporter())
        try:
            result = service.render(posterior, fit, output, pairs_config)
        except McmcPairsError as err:
            error(escape(str(err)))
            raise typer.Exit(1) from err

        info(
            f"{result.n_parameters} parameters, {result.n_draws} draws, "
            f"diagonal: {result.diagonal_mode}"
        )
    finally:
        close_logging()
