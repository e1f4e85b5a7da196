"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from mcmcpairs.core.domain.config import PairsConfig
from mcmcpairs.core.shared.exceptions import ConfigError


def load_config(path: Path) -> PairsConfig:
    """Load rendering options from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        PairsConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ConfigError: If the options fail validation.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return PairsConfig.model_validate(data)
    except ValidationError as err:
        msg = f"Invalid configuration in {path}:\n{err}"
        raise ConfigError(msg) from err


def save_config(config: PairsConfig, path: Path) -> None:
    """Save rendering options to a TOML file.

    Options left at ``None`` are omitted since TOML has no null.
    """
    data = config.model_dump(mode="json", exclude_none=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# mcmcpairs configuration file
# Generated automatically - edit as needed

# Diagnostic on the diagonal: "autocorrelation", "histogram" or "trace"
diagonal_mode = "autocorrelation"

# Y limits of the autocorrelation panels
acf_y_range = [-1.0, 1.0]

# Parameter label size, relative to the base font
label_size = 0.5

# Colour of frames, ticks and tick labels (any matplotlib colour)
axis_color = "0.5"

# Confidence ellipses
ellipse_points = 1000
confidence_level = 0.95

# Draw count from which scatter points become single pixels
dense_threshold = 5000

# Edge length of one cell in inches
cell_size = 1.6

# Require posterior column names to equal the fit parameter names
match_names = false

# Optional settings
# parameter_subset = [0, 1, 2]              # 0-based indices, in display order
# histogram_headroom = [1.3, 1.3, 1.3]      # one per selected parameter
# plot_ranges = [[-3.0, 3.0], [0.0, 1.0]]   # one [low, high] per selected parameter
# acf_max_lag = 30
"""
