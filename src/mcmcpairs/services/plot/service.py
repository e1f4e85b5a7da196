"""Plotting service for rendering pairs matrices from files.

This service ties the loaders, the renderer and figure saving together so the
CLI does not need to know about matplotlib.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt

from mcmcpairs.core.domain.config import PairsConfig
from mcmcpairs.core.shared.exceptions import DegenerateInputWarning
from mcmcpairs.core.shared.reporter import NullReporter, Reporter
from mcmcpairs.io.loaders import load_fit_summary, load_posterior
from mcmcpairs.plotting.pairs import plot_pairs


@dataclass(frozen=True)
class PlotOutput:
    """Result of rendering a pairs matrix.

    Attributes:
        path: Path where the figure was saved
        n_parameters: Number of parameters in the matrix
        n_draws: Number of posterior draws plotted
        diagonal_mode: Diagnostic drawn on the diagonal
        warnings: Degenerate-input warnings raised while rendering
    """

    path: Path
    n_parameters: int
    n_draws: int
    diagonal_mode: str
    warnings: tuple[str, ...] = ()


class PairsPlotService:
    """Service for rendering a pairs matrix from files on disk.

    Example:
        service = PairsPlotService()
        output = service.render(
            posterior_path=Path("posterior.csv"),
            fit_path=Path("fit.json"),
            output_path=Path("pairs.pdf"),
        )
        print(f"{output.n_parameters}x{output.n_parameters} matrix in {output.path}")
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        """Initialize the plot service.

        Args:
            reporter: Reporter for status messages (default: silent)
        """
        self._reporter = reporter or NullReporter()

    def render(
        self,
        posterior_path: Path,
        fit_path: Path,
        output_path: Path,
        config: PairsConfig | None = None,
        dpi: int = 300,
    ) -> PlotOutput:
        """Load inputs, draw the matrix and save it.

        The output format follows the suffix of ``output_path`` (pdf, png, svg...).

        Raises:
            DataIOError: If an input file cannot be read
            PreconditionError: If the inputs cannot form a pairs matrix
        """
        config = config or PairsConfig()

        self._reporter.action(f"Loading posterior draws from {posterior_path}")
        posterior = load_posterior(posterior_path)
        self._reporter.action(f"Loading fit summary from {fit_path}")
        fit = load_fit_summary(fit_path)

        n_parameters = (
            fit.n_params if config.parameter_subset is None else len(config.parameter_subset)
        )
        self._reporter.action(
            f"Rendering {n_parameters}x{n_parameters} matrix "
            f"({config.diagonal_mode.value} on the diagonal)"
        )
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DegenerateInputWarning)
            fig = plot_pairs(posterior, fit, config)
        messages = []
        for caught_warning in caught:
            if issubclass(caught_warning.category, DegenerateInputWarning):
                messages.append(str(caught_warning.message))
                self._reporter.warning(str(caught_warning.message))
            else:
                # Pass other warnings (matplotlib, numpy) on to the caller
                warnings.warn_explicit(
                    caught_warning.message,
                    caught_warning.category,
                    caught_warning.filename,
                    caught_warning.lineno,
                    source=caught_warning.source,
                )

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_path, dpi=dpi)
        finally:
            plt.close(fig)

        self._reporter.success(f"Saved pairs plot to {output_path}")
        return PlotOutput(
            path=output_path,
            n_parameters=n_parameters,
            n_draws=posterior.n_draws,
            diagonal_mode=config.diagonal_mode.value,
            warnings=tuple(messages),
        )
