"""Tests for posterior samples, fit summaries and parameter selection."""

import numpy as np
import pandas as pd
import pytest

from mcmcpairs.core.domain.fit import AsymptoticFit, PosteriorSample, select_parameters
from mcmcpairs.core.shared.exceptions import PreconditionError


class TestPosteriorSample:
    def test_from_frame_keeps_names(self):
        frame = pd.DataFrame({"x": [1.0, 2.0], "y": [3.0, 4.0]})
        sample = PosteriorSample.from_frame(frame)
        assert sample.names == ("x", "y")
        assert sample.n_draws == 2
        assert sample.n_params == 2
        np.testing.assert_array_equal(sample.column(1), [3.0, 4.0])

    def test_vector_becomes_single_column(self):
        sample = PosteriorSample(draws=np.arange(5.0))
        assert sample.draws.shape == (5, 1)

    def test_empty_rejected(self):
        with pytest.raises(PreconditionError, match="no draws"):
            PosteriorSample(draws=np.empty((0, 3)))

    def test_name_count_checked(self):
        with pytest.raises(PreconditionError, match="column names"):
            PosteriorSample(draws=np.zeros((4, 2)), names=("a",))

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_non_finite_rejected(self, bad):
        draws = np.zeros((4, 2))
        draws[2, 1] = bad
        with pytest.raises(PreconditionError, match=r"1 missing or non-finite.*row 2, column 1"):
            PosteriorSample(draws=draws)


class TestAsymptoticFit:
    def test_inconsistent_lengths(self):
        with pytest.raises(PreconditionError, match="inconsistent"):
            AsymptoticFit(
                names=("a", "b"),
                estimates=np.zeros(3),
                std_errors=np.ones(2),
                correlation=np.eye(2),
            )

    def test_correlation_shape(self):
        with pytest.raises(PreconditionError, match="shape"):
            AsymptoticFit(
                names=("a", "b"),
                estimates=np.zeros(2),
                std_errors=np.ones(2),
                correlation=np.eye(3),
            )


class TestSelectParameters:
    """Posterior columns and fit entries are subset together."""

    def test_all_by_default(self, posterior, identity_fit):
        sub_posterior, sub_fit = select_parameters(posterior, identity_fit)
        assert sub_posterior.n_params == 3
        assert sub_fit.names == ("a", "b", "c")

    def test_subset_reorders_both(self, posterior, identity_fit):
        fit = AsymptoticFit(
            names=("a", "b", "c"),
            estimates=np.array([1.0, 2.0, 3.0]),
            std_errors=np.array([0.1, 0.2, 0.3]),
            correlation=np.array([[1.0, 0.1, 0.2], [0.1, 1.0, 0.3], [0.2, 0.3, 1.0]]),
        )
        sub_posterior, sub_fit = select_parameters(posterior, fit, [2, 0])
        assert sub_fit.names == ("c", "a")
        assert sub_posterior.names == ("c", "a")
        np.testing.assert_array_equal(sub_fit.estimates, [3.0, 1.0])
        np.testing.assert_array_equal(sub_fit.std_errors, [0.3, 0.1])
        np.testing.assert_array_equal(sub_fit.correlation, [[1.0, 0.2], [0.2, 1.0]])
        np.testing.assert_array_equal(sub_posterior.column(0), posterior.column(2))

    def test_count_mismatch(self, posterior):
        fit = AsymptoticFit(
            names=("a", "b"),
            estimates=np.zeros(2),
            std_errors=np.ones(2),
            correlation=np.eye(2),
        )
        with pytest.raises(PreconditionError, match="are not the same"):
            select_parameters(posterior, fit)

    def test_single_parameter_rejected(self, posterior, identity_fit):
        with pytest.raises(PreconditionError, match=">1 parameter"):
            select_parameters(posterior, identity_fit, [1])

    def test_index_out_of_range(self, posterior, identity_fit):
        with pytest.raises(PreconditionError, match="out of range"):
            select_parameters(posterior, identity_fit, [0, 3])

    def test_invalid_correlation_in_selection(self, posterior):
        correlation = np.eye(3)
        correlation[0, 1] = correlation[1, 0] = 1.5
        fit = AsymptoticFit(
            names=("a", "b", "c"),
            estimates=np.zeros(3),
            std_errors=np.ones(3),
            correlation=correlation,
        )
        with pytest.raises(PreconditionError, match=r"\[-1, 1\]"):
            select_parameters(posterior, fit)
        # the offending pair is not part of this selection
        select_parameters(posterior, fit, [0, 2])

    def test_match_names(self, identity_fit):
        sample = PosteriorSample(draws=np.zeros((5, 3)), names=("a", "x", "c"))
        select_parameters(sample, identity_fit)
        with pytest.raises(PreconditionError, match="'x' != 'b'"):
            select_parameters(sample, identity_fit, match_names=True)

    @pytest.mark.parametrize("bad", [-0.5, np.nan, np.inf])
    def test_invalid_std_error(self, posterior, bad):
        fit = AsymptoticFit(
            names=("a", "b", "c"),
            estimates=np.zeros(3),
            std_errors=[1.0, bad, 1.0],
            correlation=np.eye(3),
        )
        with pytest.raises(PreconditionError, match="Standard errors.*: b$"):
            select_parameters(posterior, fit)
        # only the selected parameters are checked
        select_parameters(posterior, fit, [0, 2])

    def test_non_finite_estimate(self, posterior):
        fit = AsymptoticFit(
            names=("a", "b", "c"),
            estimates=[0.0, 0.0, np.nan],
            std_errors=np.ones(3),
            correlation=np.eye(3),
        )
        with pytest.raises(PreconditionError, match="estimates must be finite"):
            select_parameters(posterior, fit)
        select_parameters(posterior, fit, [0, 1])
