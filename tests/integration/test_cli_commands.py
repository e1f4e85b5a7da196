"""Integration tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from mcmcpairs.cli.app import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


class TestCLIBasics:
    def test_no_args_shows_help(self, runner):
        result = runner.invoke(app, [])
        assert result.exit_code in [0, 2]
        assert "Usage" in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "plot" in result.output
        assert "init" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "mcmcpairs" in result.output.lower()

    def test_plot_help(self, runner):
        result = runner.invoke(app, ["plot", "--help"])
        assert result.exit_code == 0
        assert "--diag" in result.output
        assert "--keep" in result.output


class TestInitCommand:
    def test_creates_file(self, runner, tmp_path):
        config_path = tmp_path / "pairs.toml"
        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 0
        assert config_path.exists()
        assert 'diagonal_mode = "autocorrelation"' in config_path.read_text()

    def test_no_overwrite(self, runner, tmp_path):
        config_path = tmp_path / "pairs.toml"
        config_path.write_text("# existing config")
        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 1
        assert config_path.read_text() == "# existing config"

    def test_force_overwrite(self, runner, tmp_path):
        config_path = tmp_path / "pairs.toml"
        config_path.write_text("# existing config")
        result = runner.invoke(app, ["init", str(config_path), "--force"])
        assert result.exit_code == 0
        assert "diagonal_mode" in config_path.read_text()


class TestPlotCommand:
    def test_writes_figure(self, runner, tmp_path, posterior_csv, fit_json):
        output = tmp_path / "pairs.png"
        result = runner.invoke(app, ["plot", str(posterior_csv), str(fit_json), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_options(self, runner, tmp_path, posterior_csv, fit_json):
        output = tmp_path / "pairs.pdf"
        result = runner.invoke(
            app,
            [
                "plot",
                str(posterior_csv),
                str(fit_json),
                "--diag",
                "histogram",
                "--keep",
                "0",
                "--keep",
                "2",
                "-o",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert output.exists()
        assert "2 parameters" in result.output

    def test_config_file(self, runner, tmp_path, posterior_csv, fit_json):
        config_path = tmp_path / "pairs.toml"
        config_path.write_text('diagonal_mode = "trace"\nparameter_subset = [1, 2]\n')
        output = tmp_path / "pairs.png"
        log_file = tmp_path / "run.json"
        result = runner.invoke(
            app,
            [
                "plot",
                str(posterior_csv),
                str(fit_json),
                "--config",
                str(config_path),
                "--log-file",
                str(log_file),
                "-o",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "trace" in result.output
        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert any("Drawing 2x2 pairs matrix" in r["message"] for r in records)

    def test_single_parameter_fails(self, runner, tmp_path, posterior_csv, fit_json):
        output = tmp_path / "pairs.png"
        result = runner.invoke(
            app, ["plot", str(posterior_csv), str(fit_json), "--keep", "1", "-o", str(output)]
        )
        assert result.exit_code == 1
        assert "meaningful" in result.output
        assert not output.exists()

    def test_invalid_config_fails(self, runner, tmp_path, posterior_csv, fit_json):
        config_path = tmp_path / "bad.toml"
        config_path.write_text("cell_size = -1.0\n")
        result = runner.invoke(
            app, ["plot", str(posterior_csv), str(fit_json), "--config", str(config_path)]
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_missing_input(self, runner, tmp_path, fit_json):
        result = runner.invoke(app, ["plot", str(tmp_path / "missing.csv"), str(fit_json)])
        assert result.exit_code != 0

    def test_blank_cell_reported(self, runner, tmp_path, fit_json):
        posterior_path = tmp_path / "gappy.csv"
        posterior_path.write_text("a,b,c\n0.1,0.2,0.3\n,0.1,0.2\n0.3,0.2,0.1\n")
        output = tmp_path / "pairs.png"
        result = runner.invoke(
            app, ["plot", str(posterior_path), str(fit_json), "-o", str(output)]
        )
        assert result.exit_code == 1
        assert "non-finite" in result.output
        assert not isinstance(result.exception, ValueError)
        assert not output.exists()
