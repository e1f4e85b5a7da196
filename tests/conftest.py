"""Pytest fixtures for mcmcpairs tests."""

import json

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from mcmcpairs.core.domain.fit import AsymptoticFit, PosteriorSample


@pytest.fixture(autouse=True)
def close_figures():
    """Close every figure a test leaves open."""
    yield
    plt.close("all")


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def normal_draws(rng):
    """1000 independent standard-normal draws of three parameters."""
    return rng.standard_normal((1000, 3))


@pytest.fixture
def posterior(normal_draws):
    return PosteriorSample(draws=normal_draws, names=("a", "b", "c"))


@pytest.fixture
def identity_fit():
    """Fit with zero estimates, unit standard errors and no correlation."""
    return AsymptoticFit(
        names=("a", "b", "c"),
        estimates=np.zeros(3),
        std_errors=np.ones(3),
        correlation=np.eye(3),
    )


@pytest.fixture
def posterior_csv(tmp_path, normal_draws):
    path = tmp_path / "posterior.csv"
    pd.DataFrame(normal_draws, columns=["a", "b", "c"]).to_csv(path, index=False)
    return path


@pytest.fixture
def fit_json(tmp_path):
    path = tmp_path / "fit.json"
    path.write_text(
        json.dumps(
            {
                "names": ["a", "b", "c"],
                "estimates": [0.0, 0.0, 0.0],
                "std_errors": [1.0, 1.0, 1.0],
                "correlation": [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]],
            }
        )
    )
    return path
