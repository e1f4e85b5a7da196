"""Configuration model for pairs-matrix rendering."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from matplotlib.colors import is_color_like
from pydantic import BaseModel, ConfigDict, Field, field_validator

PositiveFloat = Annotated[float, Field(gt=0)]


class DiagonalMode(str, Enum):
    """Diagnostic drawn on the matrix diagonal (one choice for the whole figure)."""

    AUTOCORRELATION = "autocorrelation"
    HISTOGRAM = "histogram"
    TRACE = "trace"

    @classmethod
    def _missing_(cls, value: object) -> DiagonalMode | None:
        # Case-insensitive, plus the short aliases "acf" and "hist"
        if not isinstance(value, str):
            return None
        value = value.lower()
        for member in cls:
            if member.value == value:
                return member
        aliases = {"acf": cls.AUTOCORRELATION, "hist": cls.HISTOGRAM}
        return aliases.get(value)


class PairsConfig(BaseModel):
    """Options for :func:`mcmcpairs.plotting.pairs.plot_pairs`.

    TOML example:
        diagonal_mode = "histogram"
        parameter_subset = [0, 2, 3]
        histogram_headroom = [1.3, 1.3, 1.6]
        plot_ranges = [[-3.0, 3.0], [0.0, 10.0], [1.0, 2.0]]
    """

    model_config = ConfigDict(extra="forbid")

    diagonal_mode: DiagonalMode = Field(
        default=DiagonalMode.AUTOCORRELATION,
        description="Diagonal diagnostic: autocorrelation, histogram or trace.",
    )
    acf_y_range: tuple[float, float] = Field(
        default=(-1.0, 1.0),
        description="Y limits of the autocorrelation panels.",
    )
    histogram_headroom: list[PositiveFloat] | None = Field(
        default=None,
        description="Per-parameter multiplier on the tallest histogram bin (default 1.3 each).",
    )
    parameter_subset: list[Annotated[int, Field(ge=0)]] | None = Field(
        default=None,
        description="Ordered 0-based indices of the parameters to show (default: all).",
    )
    label_size: PositiveFloat = Field(
        default=0.5,
        description="Parameter label size relative to the base font size.",
    )
    axis_color: str = Field(default="0.5", description="Colour of frames, ticks and tick labels.")
    plot_ranges: list[tuple[float, float]] | None = Field(
        default=None,
        description="Explicit (low, high) range per selected parameter; replaces computed ranges.",
    )
    ellipse_points: Annotated[int, Field(ge=3)] = Field(
        default=1000,
        description="Number of vertices of each confidence ellipse.",
    )
    confidence_level: Annotated[float, Field(gt=0, lt=1)] = Field(
        default=0.95,
        description="Probability mass enclosed by the confidence ellipses.",
    )
    dense_threshold: Annotated[int, Field(gt=0)] = Field(
        default=5000,
        description="Draw count from which scatter points are drawn as single pixels.",
    )
    acf_max_lag: Annotated[int, Field(gt=0)] | None = Field(
        default=None,
        description="Maximum autocorrelation lag (default: floor(10 log10 N)).",
    )
    match_names: bool = Field(
        default=False,
        description="Require posterior column names to equal the fit parameter names.",
    )
    cell_size: PositiveFloat = Field(default=1.6, description="Edge length of one cell in inches.")

    @field_validator("acf_y_range")
    @classmethod
    def _check_acf_range(cls, value: tuple[float, float]) -> tuple[float, float]:
        low, high = value
        if not low < high:
            msg = f"acf_y_range must be increasing, got {value}"
            raise ValueError(msg)
        return value

    @field_validator("axis_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not is_color_like(value):
            msg = f"Not a matplotlib colour: {value!r}"
            raise ValueError(msg)
        return value

    def headroom_for(self, n_params: int) -> list[float]:
        """Histogram headroom multipliers for ``n_params`` selected parameters."""
        if self.histogram_headroom is None:
            return [1.3] * n_params
        return list(self.histogram_headroom)
