"""Turn parsed arguments into a validated ParsedRequest, one builder per command.

Every builder runs all of its checks through one Validator and raises a
single ValidationError listing everything that is wrong. Nothing here touches
the network.
"""

import argparse
from collections.abc import Callable
from datetime import date, timedelta

from openmeteo.config.defaults import (
    DEFAULT_FORECAST_SINCE_DAYS, DEFAULT_GEO_COUNT, DEFAULT_GEO_LANGUAGE, DEFAULT_TIMEZONE,
)
from openmeteo.config.schema import (
    AirQualityDomain, AppConfig, CellSelection, LengthUnit, PrecipitationUnit,
    TemperatureUnit, TemporalResolution, WindSpeedUnit,
)
from openmeteo.endpoints.base import EndpointSpec
from openmeteo.endpoints.elevation import MAX_COORDINATES
from openmeteo.endpoints.registry import ENDPOINTS
from openmeteo.endpoints.satellite import TILTED
from openmeteo.errors import UsageError
from openmeteo.ingest.geocoder import search_params
from openmeteo.models.common import Category
from openmeteo.models.request import ParsedRequest
from openmeteo.validation.rules import Validator, split_list

Builder = Callable[[argparse.Namespace, AppConfig, date], ParsedRequest]

_UNITS = {
    "temperature_unit": TemperatureUnit,
    "wind_speed_unit": WindSpeedUnit,
    "precipitation_unit": PrecipitationUnit,
    "length_unit": LengthUnit,
}


def _choices(enum) -> tuple[str, ...]:
    return tuple(member.value for member in enum)


def _require(args: argparse.Namespace, command: str, *names: str) -> None:
    for name in names:
        if not getattr(args, name, None):
            flag = "--" + name.replace("_", "-")
            raise UsageError(f"missing required argument: {flag}", command=command)


class _Build:
    """Shared state for one builder run: endpoint descriptor, config and collected errors."""

    def __init__(self, command: str, args: argparse.Namespace, config: AppConfig, today: date):
        self.command = command
        self.spec: EndpointSpec = ENDPOINTS[command]
        self.args = args
        self.config = config
        self.today = today
        self.v = Validator()
        self.options: dict[str, str | None] = {}

    def arg(self, name: str) -> str | None:
        return getattr(self.args, name, None)

    def location(self) -> tuple[str | None, str | None, str | None, str | None]:
        """CLI location, else the configured one. A city wins over coordinates."""
        lat, lon, city, country = (self.arg(n) for n in ("lat", "lon", "city", "country"))
        if lat is None and lon is None and not city:
            if self.config.lat is not None and self.config.lon is not None:
                lat, lon = str(self.config.lat), str(self.config.lon)
            elif self.config.city:
                city, country = self.config.city, country or self.config.country
        self.v.latitude(lat)
        self.v.longitude(lon)
        if city:
            return None, None, city, country
        return lat, lon, None, None

    def variables(self) -> dict[Category, list[str]]:
        return {
            category: self.v.variables(self.spec, category, self.arg(f"{category.value}_params"))
            for category in Category
        }

    def window(self, since: bool = False) -> None:
        """forecast_days, past_days, start_date and end_date, in query order."""
        args, v, spec = self.args, self.v, self.spec
        forecast_days = v.bounded("--forecast-days", self.arg("forecast_days"), spec.forecast_days)
        v.bounded("--past-days", self.arg("past_days"), spec.past_days)
        v.date_range(args.start_date, args.end_date, spec.date_bounds)
        self.options.update(
            forecast_days=self.arg("forecast_days"),
            past_days=self.arg("past_days"),
            start_date=args.start_date,
            end_date=args.end_date,
        )
        if since and self.arg("forecast_since") is not None:
            self._forecast_since(forecast_days)

    def _forecast_since(self, forecast_days: int | None) -> None:
        """Replace forecast_days with the date range from day N to the last day."""
        raw = self.args.forecast_since
        first = self.v.integer("--forecast-since", raw, 1)
        if self.args.start_date:
            self.v.error("--forecast-since and --start-date are mutually exclusive")
            return
        if first is None or (self.arg("forecast_days") and forecast_days is None):
            return
        days = DEFAULT_FORECAST_SINCE_DAYS if forecast_days is None else forecast_days
        if first > days:
            self.v.error(f"--forecast-since: {first} is beyond the forecast range ({days} days)")
            return
        self.options.update(
            forecast_days=None,
            start_date=(self.today + timedelta(days=first - 1)).isoformat(),
            end_date=(self.today + timedelta(days=days - 1)).isoformat(),
        )

    def timezone(self) -> None:
        self.options["timezone"] = self.arg("timezone") or self.config.timezone or DEFAULT_TIMEZONE

    def units(self, *names: str) -> None:
        for name in names:
            value = self.arg(name) or getattr(self.config, name, None)
            flag = "--" + name.replace("_", "-")
            self.options[name] = self.v.choice(flag, value, _choices(_UNITS[name]))

    def choice(self, name: str, enum) -> None:
        flag = "--" + name.replace("_", "-")
        self.options[name] = self.v.choice(flag, self.arg(name), _choices(enum))

    def models(self, flag: str, value: str | None) -> list[str]:
        names = self.v.models(flag, value, self.spec)
        self.options["models"] = ",".join(names) or None
        return names

    def finish(
        self,
        location: tuple[str | None, str | None, str | None, str | None],
        variables: dict[Category, list[str]],
        models: list[str] | tuple[str, ...] = (),
    ) -> ParsedRequest:
        self.v.raise_if_errors()
        lat, lon, city, country = location
        if not city and (lat is None or lon is None):
            raise UsageError("location required: use --lat/--lon or --city", command=self.command)
        return ParsedRequest(
            command=self.command,
            base_url=self.spec.base_url,
            latitude=lat,
            longitude=lon,
            city=city,
            country=country,
            variables={c: names for c, names in variables.items() if names},
            options=self.options,
            models=tuple(models),
        )


def _defaults(spec: EndpointSpec, category: Category) -> list[str]:
    return list(spec.defaults.get(category, ()))


def _current_only(args: argparse.Namespace) -> bool:
    return bool(args.current and not args.forecast_days and not args.start_date)


def build_weather(args, config, today) -> ParsedRequest:
    b = _Build("weather", args, config, today)
    location = b.location()
    variables = b.variables()
    b.window(since=True)
    b.timezone()
    b.units("temperature_unit", "wind_speed_unit", "precipitation_unit")
    models = b.models("--model", args.model)

    spec = b.spec
    if args.daily and not variables[Category.DAILY]:
        variables[Category.DAILY] = _defaults(spec, Category.DAILY)
    if args.hourly and not variables[Category.HOURLY]:
        variables[Category.HOURLY] = _defaults(spec, Category.HOURLY)
    if args.current and not variables[Category.CURRENT]:
        variables[Category.CURRENT] = _defaults(spec, Category.CURRENT)
    if not variables[Category.HOURLY] and not variables[Category.DAILY]:
        if not _current_only(args):
            variables[Category.HOURLY] = _defaults(spec, Category.HOURLY)
    return b.finish(location, variables, models)


def build_history(args, config, today) -> ParsedRequest:
    _require(args, "history", "start_date", "end_date")
    b = _Build("history", args, config, today)
    location = b.location()
    variables = b.variables()
    b.window()
    b.timezone()
    b.units("temperature_unit", "wind_speed_unit", "precipitation_unit")
    models = b.models("--model", args.model)
    b.choice("cell_selection", CellSelection)
    if not variables[Category.HOURLY] and not variables[Category.DAILY]:
        variables[Category.HOURLY] = _defaults(b.spec, Category.HOURLY)
    return b.finish(location, variables, models)


def build_ensemble(args, config, today) -> ParsedRequest:
    _require(args, "ensemble", "models")
    b = _Build("ensemble", args, config, today)
    location = b.location()
    models = b.models("--models", args.models)
    variables = b.variables()
    b.window()
    b.timezone()
    b.units("temperature_unit", "wind_speed_unit", "precipitation_unit")
    b.choice("cell_selection", CellSelection)
    if not variables[Category.HOURLY] and not variables[Category.DAILY]:
        variables[Category.HOURLY] = _defaults(b.spec, Category.HOURLY)
    return b.finish(location, variables, models)


def build_climate(args, config, today) -> ParsedRequest:
    _require(args, "climate", "start_date", "end_date", "models")
    b = _Build("climate", args, config, today)
    location = b.location()
    variables = b.variables()
    b.window()
    models = b.models("--models", args.models)
    b.units("temperature_unit", "wind_speed_unit", "precipitation_unit")
    b.choice("cell_selection", CellSelection)
    b.options["disable_bias_correction"] = "true" if args.disable_bias_correction else None
    if not variables[Category.DAILY]:
        variables[Category.DAILY] = _defaults(b.spec, Category.DAILY)
    return b.finish(location, variables, models)


def build_marine(args, config, today) -> ParsedRequest:
    b = _Build("marine", args, config, today)
    location = b.location()
    variables = b.variables()
    b.window(since=True)
    b.units("length_unit", "wind_speed_unit")
    b.timezone()
    models = b.models("--model", args.model)
    b.choice("cell_selection", CellSelection)
    if args.current and not variables[Category.CURRENT]:
        variables[Category.CURRENT] = _defaults(b.spec, Category.CURRENT)
    if not variables[Category.HOURLY] and not variables[Category.DAILY]:
        if not _current_only(args):
            variables[Category.HOURLY] = _defaults(b.spec, Category.HOURLY)
    return b.finish(location, variables, models)


def build_air_quality(args, config, today) -> ParsedRequest:
    b = _Build("air-quality", args, config, today)
    location = b.location()
    variables = b.variables()
    b.window()
    b.timezone()
    b.choice("domains", AirQualityDomain)
    b.choice("cell_selection", CellSelection)
    if args.current and not variables[Category.CURRENT]:
        variables[Category.CURRENT] = _defaults(b.spec, Category.CURRENT)
    if not variables[Category.HOURLY] and not _current_only(args):
        variables[Category.HOURLY] = _defaults(b.spec, Category.HOURLY)
    return b.finish(location, variables)


def build_flood(args, config, today) -> ParsedRequest:
    b = _Build("flood", args, config, today)
    location = b.location()
    variables = b.variables()
    b.window()
    models = b.models("--model", args.model)
    b.choice("cell_selection", CellSelection)
    b.options["ensemble"] = "true" if args.ensemble else None
    if not variables[Category.DAILY]:
        variables[Category.DAILY] = _defaults(b.spec, Category.DAILY)
    return b.finish(location, variables, models)


def build_satellite(args, config, today) -> ParsedRequest:
    b = _Build("satellite", args, config, today)
    location = b.location()
    variables = b.variables()
    b.window()
    models = b.models("--model", args.model)
    b.timezone()
    b.v.number("--tilt", args.tilt, 0, 90)
    b.v.number("--azimuth", args.azimuth, -180, 180)
    b.options.update(tilt=args.tilt, azimuth=args.azimuth)
    b.choice("temporal_resolution", TemporalResolution)
    b.choice("cell_selection", CellSelection)

    requested = variables[Category.HOURLY] + variables[Category.DAILY]
    if args.tilt is None or args.azimuth is None:
        for name in dict.fromkeys(requested):
            if name in TILTED:
                b.v.error(
                    f"'{name}' requires --tilt and --azimuth. Example: --tilt=35 --azimuth=0"
                )
    if not requested:
        variables[Category.HOURLY] = _defaults(b.spec, Category.HOURLY)
    return b.finish(location, variables, models)


def build_elevation(args, config, today) -> ParsedRequest:
    b = _Build("elevation", args, config, today)
    v = b.v
    city, country = args.city, args.country
    if city and (args.lat or args.lon):
        v.error("cannot use --city together with --lat/--lon")
    lats, lons = split_list(args.lat), split_list(args.lon)
    if not city and args.lat is None and args.lon is None:
        if config.lat is not None and config.lon is not None:
            lats, lons = [str(config.lat)], [str(config.lon)]
        elif config.city:
            city, country = config.city, country or config.country

    if not city and (args.lat is not None or args.lon is not None):
        if not lats or not lons:
            v.error("--lat/--lon values are empty")
        elif len(lats) != len(lons):
            v.error(
                f"--lat has {len(lats)} value(s) but --lon has {len(lons)}. "
                "They must have the same number of elements."
            )
        elif len(lats) > MAX_COORDINATES:
            v.error(
                f"too many coordinates: {len(lats)} pairs given, maximum is {MAX_COORDINATES}"
            )
    for value in lats:
        v.latitude(value)
    for value in lons:
        v.longitude(value)

    location = (
        (None, None, city, country) if city
        else (",".join(lats) or None, ",".join(lons) or None, None, None)
    )
    return b.finish(location, {})


def build_geo(args, config, today) -> ParsedRequest:
    _require(args, "geo", "search")
    b = _Build("geo", args, config, today)
    count = b.v.integer("--count", args.count, 1, 100)
    b.v.raise_if_errors()
    return ParsedRequest(
        command="geo",
        base_url=b.spec.base_url,
        options=search_params(
            args.search,
            count=count or DEFAULT_GEO_COUNT,
            language=args.language or DEFAULT_GEO_LANGUAGE,
            country=args.country,
        ),
    )


BUILDERS: dict[str, Builder] = {
    "weather": build_weather,
    "geo": build_geo,
    "history": build_history,
    "ensemble": build_ensemble,
    "climate": build_climate,
    "marine": build_marine,
    "air-quality": build_air_quality,
    "flood": build_flood,
    "elevation": build_elevation,
    "satellite": build_satellite,
}


def build_request(args: argparse.Namespace, config: AppConfig, today: date) -> ParsedRequest:
    return BUILDERS[args.command](args, config, today)
