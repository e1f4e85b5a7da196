"""Main Typer application for mcmcpairs.

Creates the application and registers the commands from the commands/
subpackage.
"""

from typing import Annotated

import typer

from mcmcpairs.cli.callbacks import version_callback
from mcmcpairs.cli.commands import init_command, plot_command

app = typer.Typer(
    name="mcmcpairs",
    help="mcmcpairs - pairs plots of MCMC draws against the asymptotic fit",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """mcmcpairs - check MCMC draws against the maximum-likelihood approximation.

    Draws a matrix of pairwise scatterplots with 95% confidence ellipses,
    empirical correlations and per-parameter diagnostics.
    """


app.command(name="plot")(plot_command)
app.command(name="init")(init_command)
