"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from datetime import UTC, date, datetime
from unittest.mock import Mock, patch

import pytest
import requests

from tidewatch.cli import cmd_info, cmd_moon, cmd_tides, cmd_wind, create_parser, main
from tidewatch.datasources.astronomy import MoonTimes
from tidewatch.exceptions import UpstreamShapeError
from tidewatch.moon import classify
from tidewatch.schemas import MeasurementSystem
from tidewatch.shaping import FormattedMeasurement, FormattedWindObservation


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "tidewatch"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_station_default_from_settings(self) -> None:
        """Station commands default to the configured station."""
        parser = create_parser()
        args = parser.parse_args(["water-level"])
        assert args.station == "8410140"
        assert args.metric is False

    def test_tides_accepts_date_and_metric(self) -> None:
        """Tides command parses --date and --metric."""
        parser = create_parser()
        args = parser.parse_args(["tides", "--station", "9414290", "--date", "2020-08-05", "--metric"])
        assert args.station == "9414290"
        assert args.date == date(2020, 8, 5)
        assert args.metric is True

    def test_bad_date_rejected(self) -> None:
        """Malformed --date exits."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["sun", "--date", "08/05/2020"])


class TestCommands:
    """Tests for command handlers."""

    def test_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Info prints app details."""
        exit_code = cmd_info(argparse.Namespace())
        assert exit_code == 0
        out = capsys.readouterr().out
        assert "tidewatch" in out
        assert "8410140" in out

    def test_tides(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Tides prints one line per prediction."""
        args = argparse.Namespace(station="8410140", date=None, metric=True)
        tides = [
            FormattedMeasurement(time="2020-08-05 00:26", raw_value=5.99, value="5.99m", kind="H"),
            FormattedMeasurement(time="2020-08-05 06:53", raw_value=-0.13, value="-0.13m", kind="L"),
        ]
        with patch("tidewatch.cli.coops.tide_predictions", return_value=tides) as mock_tides:
            assert cmd_tides(args) == 0
            mock_tides.assert_called_once_with("8410140", None, MeasurementSystem.METRIC)

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["2020-08-05 00:26  H  5.99m", "2020-08-05 06:53  L  -0.13m"]

    def test_wind(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Wind prints speed, gust and direction."""
        args = argparse.Namespace(station="8410140", metric=False)
        wind = FormattedWindObservation(
            time="2020-08-05 10:42",
            raw_speed=7.58,
            speed="7.58 kts",
            raw_gust=10.11,
            gust="10.11 kts",
            direction="SSW",
        )
        with patch("tidewatch.cli.coops.current_wind", return_value=wind):
            assert cmd_wind(args) == 0
        assert "7.58 kts gusting 10.11 kts from SSW" in capsys.readouterr().out

    def test_moon_always_up(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Moon reports polar always-up days."""
        args = argparse.Namespace(station="9999999", date=date(2020, 12, 29))
        with (
            patch("tidewatch.cli.almanac.moon_phase", return_value=classify(0.5)),
            patch(
                "tidewatch.cli.almanac.moonrise_moonset",
                return_value=MoonTimes(rise=None, set=None, always_up=True),
            ),
        ):
            assert cmd_moon(args) == 0
        out = capsys.readouterr().out
        assert "Full" in out
        assert "up all day" in out

    def test_moon_rise_and_set(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Moon prints rise and set clock times."""
        args = argparse.Namespace(station="8410140", date=None)
        times = MoonTimes(rise=datetime(2020, 8, 5, 0, 30, tzinfo=UTC), set=None)
        with (
            patch("tidewatch.cli.almanac.moon_phase", return_value=classify(0.1)),
            patch("tidewatch.cli.almanac.moonrise_moonset", return_value=times),
        ):
            cmd_moon(args)
        out = capsys.readouterr().out
        assert "Moonrise: 2020-08-05 00:30 UTC" in out
        assert "Moonset: -" in out


class TestMain:
    """Tests for main entry point."""

    def test_no_command_prints_help(self) -> None:
        """No command prints help and returns 0."""
        assert main([]) == 0

    def test_dispatches_latest_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Latest-observation commands print time and value."""
        reading = FormattedMeasurement(time="2020-08-05 10:42", raw_value=6.22, value="6.22 ft")
        with patch("tidewatch.cli.coops.current_water_level", return_value=reading) as mock_fetch:
            assert main(["water-level", "--station", "8410140"]) == 0
            mock_fetch.assert_called_once_with("8410140", None)
        assert "6.22 ft" in capsys.readouterr().out

    def test_upstream_error_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Shape errors print to stderr and exit 1."""
        error = UpstreamShapeError(
            "Could not get station metadata for station 1.", station_id="1", operation="x"
        )
        with patch("tidewatch.cli.coops.station_metadata", side_effect=error):
            assert main(["station", "--station", "1"]) == 1
        assert "Could not get station metadata" in capsys.readouterr().err

    def test_transport_error_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Network errors print to stderr and exit 1."""
        mock = Mock(side_effect=requests.ConnectionError("unreachable"))
        with patch("tidewatch.cli.coops.current_air_pressure", mock):
            assert main(["pressure"]) == 1
        assert "unreachable" in capsys.readouterr().err
