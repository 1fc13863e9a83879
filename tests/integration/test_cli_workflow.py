"""Integration tests for end-to-end CLI workflows.

Covers one-shot conversion, unit listing, settings files and the
interactive session with its history.
"""

import json
import os
import tempfile

import pytest
from click.testing import CliRunner

from measuremint import __version__
from measuremint.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield d


class TestConvertCommand:
    def test_meters_to_feet(self, runner):
        result = runner.invoke(cli, ["convert", "1", "--from", "m", "--to", "ft"])
        assert result.exit_code == 0, result.output
        assert "1 m" in result.output
        assert "3.281 ft" in result.output

    def test_celsius_to_fahrenheit(self, runner):
        result = runner.invoke(cli, ["convert", "100", "-f", "celsius", "-t", "f"])
        assert result.exit_code == 0, result.output
        assert "212°F" in result.output

    def test_explicit_category(self, runner):
        result = runner.invoke(cli, ["convert", "1", "-c", "length", "-f", "mi", "-t", "km"])
        assert result.exit_code == 0, result.output
        assert "1.609 km" in result.output

    def test_malformed_value_is_zero(self, runner):
        result = runner.invoke(cli, ["convert", "abc", "-f", "km", "-t", "m"])
        assert result.exit_code == 0, result.output
        assert "0 km" in result.output

    def test_negative_temperature(self, runner):
        result = runner.invoke(cli, ["convert", "-40", "--from", "C", "--to", "F"])
        assert result.exit_code == 0, result.output
        assert "-40°C" in result.output
        assert "-40°F" in result.output

    def test_negative_fraction(self, runner):
        result = runner.invoke(cli, ["convert", "-0.5", "-f", "km", "-t", "m"])
        assert result.exit_code == 0, result.output
        assert "-500 m" in result.output

    def test_mixed_categories_fail(self, runner):
        result = runner.invoke(cli, ["convert", "1", "-f", "m", "-t", "celsius"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_unit_fails(self, runner):
        result = runner.invoke(cli, ["convert", "1", "-f", "parsec", "-t", "m"])
        assert result.exit_code == 1
        assert "Unknown unit" in result.output


class TestUnitsCommand:
    def test_lists_all_categories(self, runner):
        result = runner.invoke(cli, ["units"])
        assert result.exit_code == 0, result.output
        assert "Meters" in result.output
        assert "Fahrenheit" in result.output

    def test_single_category(self, runner):
        result = runner.invoke(cli, ["units", "temperature"])
        assert result.exit_code == 0, result.output
        assert "Celsius" in result.output
        assert "Meters" not in result.output

    def test_unknown_category(self, runner):
        result = runner.invoke(cli, ["units", "volume"])
        assert result.exit_code == 1


class TestSettingsFile:
    def test_fraction_digits_applied(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "settings.json")
        with open(path, "w") as f:
            json.dump({"fraction_digits": 1}, f)

        result = runner.invoke(cli, ["--config", path, "convert", "1", "-f", "m", "-t", "ft"])
        assert result.exit_code == 0, result.output
        assert "3.3 ft" in result.output

    def test_invalid_settings_fail(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "settings.json")
        with open(path, "w") as f:
            json.dump({"initial_category": "volume"}, f)

        result = runner.invoke(cli, ["--config", path, "units"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestSessionCommand:
    def test_convert_and_history(self, runner):
        result = runner.invoke(cli, ["session"], input="convert 1\nhistory\nquit\n")
        assert result.exit_code == 0, result.output
        assert "3.281 ft" in result.output
        assert "Conversion History" in result.output

    def test_repeated_conversion_not_recorded(self, runner):
        result = runner.invoke(cli, ["session"], input="convert 1\nconvert 1\n")
        assert result.exit_code == 0, result.output
        assert result.output.count("not recorded") == 1

    def test_category_switch(self, runner):
        script = "category temperature\nstatus\nconvert 100\n"
        result = runner.invoke(cli, ["session"], input=script)
        assert result.exit_code == 0, result.output
        assert "Celsius" in result.output
        assert "212°F" in result.output

    def test_clear_history(self, runner):
        script = "convert 1\nclear\nhistory\nconvert 2\nhistory\n"
        result = runner.invoke(cli, ["session"], input=script)
        assert result.exit_code == 0, result.output
        assert "History cleared." in result.output
        assert "No conversions yet." in result.output
        assert "6.562 ft" in result.output

    def test_empty_history(self, runner):
        result = runner.invoke(cli, ["session"], input="history\n")
        assert result.exit_code == 0, result.output
        assert "No conversions yet." in result.output

    def test_errors_do_not_end_session(self, runner):
        script = "from celsius\nfrobnicate\nconvert 1\n"
        result = runner.invoke(cli, ["session"], input=script)
        assert result.exit_code == 0, result.output
        assert "not a length unit" in result.output
        assert "Unknown command" in result.output
        assert "3.281 ft" in result.output

    def test_unit_selection(self, runner):
        result = runner.invoke(cli, ["session"], input="from km\nto mi\nconvert 10\n")
        assert result.exit_code == 0, result.output
        assert "6.214 mi" in result.output
