"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import TYPE_CHECKING

import requests

from tidewatch import __version__, almanac
from tidewatch.config import get_settings
from tidewatch.datasources import coops
from tidewatch.exceptions import TidewatchError
from tidewatch.schemas import MeasurementSystem

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from tidewatch.shaping import FormattedMeasurement


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="tidewatch",
        description="NOAA tide predictions, current conditions and sun/moon almanac",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    station_args = argparse.ArgumentParser(add_help=False)
    station_args.add_argument(
        "--station",
        type=str,
        default=settings.default_station,
        help=f"CO-OPS station ID (default: {settings.default_station})",
    )
    unit_args = argparse.ArgumentParser(add_help=False)
    unit_args.add_argument("--metric", action="store_true", help="Report metric units")
    date_args = argparse.ArgumentParser(add_help=False)
    date_args.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Date as YYYY-MM-DD (default: today)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("station", parents=[station_args], help="Show station metadata")
    subparsers.add_parser(
        "tides", parents=[station_args, unit_args, date_args], help="High/low tide predictions"
    )
    for name, help_text in [
        ("water-level", "Latest water level"),
        ("air-temp", "Latest air temperature"),
        ("water-temp", "Latest water temperature"),
        ("pressure", "Latest air pressure"),
        ("wind", "Latest wind"),
    ]:
        subparsers.add_parser(name, parents=[station_args, unit_args], help=help_text)
    subparsers.add_parser("moon", parents=[station_args, date_args], help="Moon phase and rise/set")
    subparsers.add_parser("sun", parents=[station_args, date_args], help="Sunrise, sunset, twilight")

    return parser


def _units(args: argparse.Namespace) -> MeasurementSystem | None:
    return MeasurementSystem.METRIC if args.metric else None


def _clock(moment: datetime | None) -> str:
    return moment.strftime("%Y-%m-%d %H:%M UTC") if moment else "-"


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Default station: {settings.default_station}")
    print(f"Units: {settings.units}")
    return 0


def cmd_station(args: argparse.Namespace) -> int:
    """Handle the 'station' command."""
    station = coops.station_metadata(args.station)
    state = f", {station.state}" if station.state else ""
    print(f"{station.id}: {station.name}{state} ({station.latitude}, {station.longitude})")
    return 0


def cmd_tides(args: argparse.Namespace) -> int:
    """Handle the 'tides' command."""
    for tide in coops.tide_predictions(args.station, args.date, _units(args)):
        print(f"{tide.time}  {tide.kind or ' '}  {tide.value}")
    return 0


def _latest_command(
    fetch: Callable[..., FormattedMeasurement],
) -> Callable[[argparse.Namespace], int]:
    def handler(args: argparse.Namespace) -> int:
        reading = fetch(args.station, _units(args))
        print(f"{reading.time}  {reading.value}")
        return 0

    return handler


def cmd_wind(args: argparse.Namespace) -> int:
    """Handle the 'wind' command."""
    wind = coops.current_wind(args.station, _units(args))
    print(f"{wind.time}  {wind.speed} gusting {wind.gust} from {wind.direction}")
    return 0


def cmd_moon(args: argparse.Namespace) -> int:
    """Handle the 'moon' command."""
    reading = almanac.moon_phase(args.date)
    times = almanac.moonrise_moonset(args.station, args.date)
    print(f"Phase: {reading.label} ({reading.illumination:.2f})")
    if times.always_up:
        print("Moon is up all day")
    elif times.always_down:
        print("Moon is down all day")
    else:
        print(f"Moonrise: {_clock(times.rise)}")
        print(f"Moonset: {_clock(times.set)}")
    return 0


def cmd_sun(args: argparse.Namespace) -> int:
    """Handle the 'sun' command."""
    times = almanac.sunrise_sunset(args.station, args.date)
    print(f"Dawn: {_clock(times.dawn)}")
    print(f"Sunrise: {_clock(times.sunrise)}")
    print(f"Solar noon: {_clock(times.solar_noon)}")
    print(f"Sunset: {_clock(times.sunset)}")
    print(f"Dusk: {_clock(times.dusk)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(asctime)s | %(name)s | %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if args.command is None:
        parser.print_help()
        return 0

    commands: dict[str, Callable[[argparse.Namespace], int]] = {
        "info": cmd_info,
        "station": cmd_station,
        "tides": cmd_tides,
        "water-level": _latest_command(coops.current_water_level),
        "air-temp": _latest_command(coops.current_air_temperature),
        "water-temp": _latest_command(coops.current_water_temperature),
        "pressure": _latest_command(coops.current_air_pressure),
        "wind": cmd_wind,
        "moon": cmd_moon,
        "sun": cmd_sun,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (TidewatchError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
