"""Tests for posterior and fit summary readers."""

import json

import numpy as np
import pytest

from mcmcpairs.core.shared.exceptions import DataIOError
from mcmcpairs.io.loaders import load_fit_summary, load_posterior, read_admb_cor

ADMB_COR = """\
 The logarithm of the determinant of the hessian = 8.31
 index   name   value      std.dev       1       2       3
     1   a      1.0e+00    1.0e-01   1.0000
     2   b      2.0e+00    2.0e-01   0.4000  1.0000
     3   c     -3.0e+00    5.0e-01  -0.2000  0.1000  1.0000
"""


class TestLoadPosterior:
    def test_csv(self, posterior_csv, normal_draws):
        sample = load_posterior(posterior_csv)
        assert sample.names == ("a", "b", "c")
        np.testing.assert_allclose(sample.draws, normal_draws)

    def test_whitespace_table(self, tmp_path):
        path = tmp_path / "posterior.dat"
        path.write_text("alpha beta\n1.0  2.0\n3.0\t4.0\n")
        sample = load_posterior(path)
        assert sample.names == ("alpha", "beta")
        np.testing.assert_array_equal(sample.draws, [[1.0, 2.0], [3.0, 4.0]])

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="not found"):
            load_posterior(tmp_path / "nope.csv")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(DataIOError):
            load_posterior(path)

    def test_header_only(self, tmp_path):
        path = tmp_path / "header.csv"
        path.write_text("a,b\n")
        with pytest.raises(DataIOError):
            load_posterior(path)

    def test_non_numeric_column(self, tmp_path):
        path = tmp_path / "text.csv"
        path.write_text("a,b\n1.0,x\n2.0,y\n")
        with pytest.raises(DataIOError, match="non-numeric"):
            load_posterior(path)

    def test_blank_cell(self, tmp_path):
        path = tmp_path / "gappy.csv"
        path.write_text("a,b,c\n0.1,0.2,0.3\n,0.1,0.2\n")
        with pytest.raises(DataIOError, match="non-finite"):
            load_posterior(path)


class TestLoadFitSummary:
    def test_json(self, fit_json):
        fit = load_fit_summary(fit_json)
        assert fit.names == ("a", "b", "c")
        np.testing.assert_array_equal(fit.correlation, np.eye(3))

    def test_toml(self, tmp_path):
        path = tmp_path / "fit.toml"
        path.write_text(
            'names = ["x", "y"]\n'
            "estimates = [1.0, 2.0]\n"
            "std_errors = [0.5, 0.25]\n"
            "correlation = [[1.0, -0.3], [-0.3, 1.0]]\n"
        )
        fit = load_fit_summary(path)
        assert fit.names == ("x", "y")
        np.testing.assert_array_equal(fit.std_errors, [0.5, 0.25])
        assert fit.correlation[0, 1] == -0.3

    def test_cor_dispatch(self, tmp_path):
        path = tmp_path / "model.cor"
        path.write_text(ADMB_COR)
        assert load_fit_summary(path).names == ("a", "b", "c")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "fit.json"
        path.write_text("{not json")
        with pytest.raises(DataIOError, match="Malformed"):
            load_fit_summary(path)

    def test_missing_key(self, tmp_path):
        path = tmp_path / "fit.json"
        path.write_text(json.dumps({"names": ["a"], "estimates": [0.0], "std_errors": [1.0]}))
        with pytest.raises(DataIOError, match="Malformed"):
            load_fit_summary(path)

    def test_inconsistent_lengths(self, tmp_path):
        path = tmp_path / "fit.json"
        path.write_text(
            json.dumps(
                {
                    "names": ["a", "b"],
                    "estimates": [0.0],
                    "std_errors": [1.0, 1.0],
                    "correlation": [[1.0, 0.0], [0.0, 1.0]],
                }
            )
        )
        with pytest.raises(DataIOError, match="Inconsistent"):
            load_fit_summary(path)

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "fit.yaml"
        path.write_text("names: []\n")
        with pytest.raises(DataIOError, match="Unsupported"):
            load_fit_summary(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="not found"):
            load_fit_summary(tmp_path / "fit.json")


class TestReadAdmbCor:
    def test_parse(self, tmp_path):
        path = tmp_path / "model.cor"
        path.write_text(ADMB_COR)
        fit = read_admb_cor(path)
        assert fit.names == ("a", "b", "c")
        np.testing.assert_allclose(fit.estimates, [1.0, 2.0, -3.0])
        np.testing.assert_allclose(fit.std_errors, [0.1, 0.2, 0.5])
        np.testing.assert_allclose(
            fit.correlation,
            [[1.0, 0.4, -0.2], [0.4, 1.0, 0.1], [-0.2, 0.1, 1.0]],
        )

    def test_no_header(self, tmp_path):
        path = tmp_path / "model.cor"
        path.write_text("1 a 1.0 0.1 1.0\n")
        with pytest.raises(DataIOError, match="not an ADMB"):
            read_admb_cor(path)

    def test_ragged_row(self, tmp_path):
        path = tmp_path / "model.cor"
        path.write_text(ADMB_COR.replace("0.4000  1.0000", "0.4000"))
        with pytest.raises(DataIOError, match="row 2"):
            read_admb_cor(path)

    def test_non_numeric(self, tmp_path):
        path = tmp_path / "model.cor"
        path.write_text(ADMB_COR.replace("2.0e+00", "two"))
        with pytest.raises(DataIOError, match="non-numeric"):
            read_admb_cor(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="Could not read"):
            read_admb_cor(tmp_path / "missing.cor")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "model.cor"
        path.write_bytes(b"\xff\xfe\x00 index name value std.dev 1\n")
        with pytest.raises(DataIOError, match="Could not read"):
            read_admb_cor(path)
