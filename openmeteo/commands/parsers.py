"""argparse definitions for every subcommand.

All option values stay strings here; range, enum and date checks happen in
the request builders so that every problem is reported in one batch.
"""

import argparse

from openmeteo.config.defaults import PROG, VERSION
from openmeteo.config.schema import OutputFormat
from openmeteo.endpoints.base import EndpointSpec
from openmeteo.endpoints.registry import ENDPOINTS
from openmeteo.errors import UsageError
from openmeteo.models.common import Category


class CliParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        command = self.prog.split()[-1] if self.prog != PROG else None
        raise UsageError(message, command=command)


def add_output_flags(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    """Format, verbosity and API key flags.

    Subcommands register them with ``suppress=True`` so a flag given before
    the subcommand is not reset by the subparser's defaults.
    """
    default = argparse.SUPPRESS if suppress else None
    group = parser.add_argument_group("output")
    for fmt, text in (
        (OutputFormat.HUMAN, "Human-readable output (default)"),
        (OutputFormat.PORCELAIN, "Machine-parseable key=value output"),
        (OutputFormat.LLM, "Compact tab-separated output"),
        (OutputFormat.RAW, "Raw JSON from the API"),
    ):
        group.add_argument(
            f"--{fmt.value}", dest="output_format", action="store_const",
            const=fmt, default=default, help=text,
        )
    group.add_argument(
        "--verbose", action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Log request details to stderr",
    )
    group.add_argument("--api-key", default=default, help="API key for commercial access")


def add_location(parser: argparse.ArgumentParser, lists: bool = False) -> None:
    group = parser.add_argument_group("location")
    if lists:
        group.add_argument("--lat", help="Latitude, or a comma-separated list")
        group.add_argument("--lon", help="Longitude, or a comma-separated list")
    else:
        group.add_argument("--lat", help="Latitude (-90 to 90)")
        group.add_argument("--lon", help="Longitude (-180 to 180)")
    group.add_argument("--city", help="City name, resolved via geocoding")
    group.add_argument("--country", help="ISO 3166-1 alpha-2 country code to narrow --city")


def add_variables(parser: argparse.ArgumentParser, spec: EndpointSpec) -> None:
    """One ``--<category>-params`` flag per category the endpoint knows about.

    Categories the endpoint rejects are registered too, so they fail with a
    corrective message instead of 'unrecognized arguments'.
    """
    for category in Category:
        if category in spec.catalog or category in spec.unsupported:
            parser.add_argument(
                category.flag, dest=f"{category.value}_params",
                help=f"Comma-separated {category.value} variables",
            )


def add_window(
    parser: argparse.ArgumentParser,
    forecast: bool = True,
    since: bool = False,
) -> None:
    if forecast:
        parser.add_argument("--forecast-days", help="Days of forecast")
        parser.add_argument("--past-days", help="Days of past data to include")
    if since:
        parser.add_argument(
            "--forecast-since", help="First forecast day to show (1 = today)"
        )
    parser.add_argument("--start-date", help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end-date", help="End date (YYYY-MM-DD)")


def add_units(parser: argparse.ArgumentParser, marine: bool = False) -> None:
    if marine:
        parser.add_argument("--length-unit", help="metric or imperial")
    else:
        parser.add_argument("--temperature-unit", help="celsius or fahrenheit")
    parser.add_argument("--wind-speed-unit", help="kmh, ms, mph or kn")
    if not marine:
        parser.add_argument("--precipitation-unit", help="mm or inch")


def _data_command(sub, name: str) -> argparse.ArgumentParser:
    spec = ENDPOINTS[name]
    p = sub.add_parser(name, help=spec.title, description=spec.title)
    add_location(p)
    add_variables(p, spec)
    add_output_flags(p, suppress=True)
    return p


def build_parser() -> CliParser:
    parser = CliParser(
        prog=PROG,
        description="Weather, climate, marine and air quality data from Open-Meteo.",
        epilog=f"Run '{PROG} <command> help --hourly-params' for a variable reference.",
    )
    parser.add_argument("--version", action="version", version=f"{PROG} {VERSION}")
    add_output_flags(parser)

    sub = parser.add_subparsers(dest="command", metavar="<command>")

    # weather
    p = _data_command(sub, "weather")
    p.add_argument("--current", action="store_true", help="Include current conditions")
    p.add_argument("--hourly", action="store_true", help="Include default hourly variables")
    p.add_argument("--daily", action="store_true", help="Include default daily variables")
    add_window(p, since=True)
    add_units(p)
    p.add_argument("--timezone", help="IANA timezone or 'auto'")
    p.add_argument("--model", help="Weather model")

    # geo
    p = sub.add_parser("geo", help=ENDPOINTS["geo"].title)
    p.add_argument("--search", help="Place name to search for")
    p.add_argument("--count", help="Number of results (1-100, default 5)")
    p.add_argument("--language", help="Result language (default en)")
    p.add_argument("--country", help="ISO 3166-1 alpha-2 country code filter")
    add_output_flags(p, suppress=True)

    # history
    p = _data_command(sub, "history")
    add_window(p, forecast=False)
    add_units(p)
    p.add_argument("--timezone", help="IANA timezone or 'auto'")
    p.add_argument("--model", help="Reanalysis model")
    p.add_argument("--cell-selection", help="land, sea or nearest")

    # ensemble
    p = _data_command(sub, "ensemble")
    p.add_argument("--models", help="Comma-separated ensemble models (required)")
    add_window(p)
    add_units(p)
    p.add_argument("--timezone", help="IANA timezone or 'auto'")
    p.add_argument("--cell-selection", help="land, sea or nearest")

    # climate
    p = _data_command(sub, "climate")
    p.add_argument("--models", help="Comma-separated climate models (required)")
    add_window(p, forecast=False)
    add_units(p)
    p.add_argument(
        "--disable-bias-correction", action="store_true",
        help="Return raw model output without bias correction",
    )
    p.add_argument("--cell-selection", help="land, sea or nearest")

    # marine
    p = _data_command(sub, "marine")
    p.add_argument("--current", action="store_true", help="Include current conditions")
    add_window(p, since=True)
    add_units(p, marine=True)
    p.add_argument("--timezone", help="IANA timezone or 'auto'")
    p.add_argument("--model", help="Marine model")
    p.add_argument("--cell-selection", help="land, sea or nearest")

    # air-quality
    p = _data_command(sub, "air-quality")
    p.add_argument("--current", action="store_true", help="Include current conditions")
    add_window(p)
    p.add_argument("--domains", help="auto, cams_europe or cams_global")
    p.add_argument("--timezone", help="IANA timezone or 'auto'")
    p.add_argument("--cell-selection", help="land, sea or nearest")

    # flood
    p = _data_command(sub, "flood")
    add_window(p)
    p.add_argument("--ensemble", action="store_true", help="Include all ensemble members")
    p.add_argument("--model", help="Flood model")
    p.add_argument("--cell-selection", help="land, sea or nearest")

    # elevation
    p = sub.add_parser("elevation", help=ENDPOINTS["elevation"].title)
    add_location(p, lists=True)
    add_output_flags(p, suppress=True)

    # satellite
    p = _data_command(sub, "satellite")
    add_window(p)
    p.add_argument("--model", help="Satellite or NWP model")
    p.add_argument("--tilt", help="Panel tilt in degrees (0-90)")
    p.add_argument("--azimuth", help="Panel azimuth in degrees (-180 to 180, 0 = south)")
    p.add_argument("--temporal-resolution", help="hourly or native")
    p.add_argument("--timezone", help="IANA timezone or 'auto'")
    p.add_argument("--cell-selection", help="land, sea or nearest")

    # config
    p = sub.add_parser("config", help="Manage the config file")
    p.add_argument(
        "action", nargs="?", default="show",
        choices=["show", "path", "init", "set", "unset", "get", "help"],
    )
    p.add_argument("key", nargs="?", help="KEY=VALUE for set, KEY for get/unset")
    add_output_flags(p, suppress=True)

    return parser


def subparser(parser: argparse.ArgumentParser, name: str) -> argparse.ArgumentParser:
    """The parser registered for subcommand ``name``."""
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return action.choices[name]
    raise KeyError(name)
