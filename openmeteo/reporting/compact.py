"""Compact tab-separated output for LLM agents: header once, then rows."""

import math
from typing import Any

from openmeteo.models.common import Category
from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse
from openmeteo.reporting.symbols import fmt_value, wmo_text
from openmeteo.reshape.zipper import zip_series


def _is_code(name: str) -> bool:
    return name == "weather_code" or name.startswith("weather_code_")


def _header(name: str, units: dict[str, str]) -> str:
    if _is_code(name):
        return name.replace("weather_code", "weather", 1)
    unit = units.get(name) if name != "time" else None
    return f"{name}[{unit}]" if unit else name


def _cell(name: str, value: Any) -> str:
    if value is None:
        return ""
    if _is_code(name):
        return wmo_text(value)
    return fmt_value(value)


def meta_line(response: ApiResponse) -> str:
    parts = [
        f"lat:{fmt_value(response.latitude)}",
        f"lon:{fmt_value(response.longitude)}",
    ]
    if response.elevation is not None:
        parts.append(f"elevation:{fmt_value(response.elevation)}")
    parts.append(f"tz:{response.timezone or 'GMT'}")
    return "\t".join(["meta", *parts])


def location_line(place: ResolvedLocation | None) -> list[str]:
    if place is None or not place.name:
        return []
    return [f"location:{place.name}" + (f",{place.country}" if place.country else "")]


def table(names: list[str], units: dict[str, str], rows: list[dict[str, Any]]) -> list[str]:
    lines = ["\t".join(_header(n, units) for n in names)]
    lines += ["\t".join(_cell(n, row.get(n)) for n in names) for row in rows]
    return lines


def render_compact(response: ApiResponse, place: ResolvedLocation | None = None) -> list[str]:
    lines = [meta_line(response), *location_line(place)]
    if response.current is not None:
        values = response.current.values
        names = [k for k in values if k != "interval"]
        lines.append(f"#{Category.CURRENT}")
        lines += table(names, response.current.units, [values])
    for category, series in response.series():
        lines.append(f"#{category}")
        lines += table(
            ["time", *series.columns], series.units, zip_series(series, category.value)
        )
    return lines


GEO_COLUMNS = ("name", "admin1", "country", "country_code", "latitude", "longitude",
               "elevation", "population", "timezone")


def render_geo_compact(results: list[dict[str, Any]]) -> list[str]:
    return table(list(GEO_COLUMNS), {}, results)


def render_elevation_compact(
    latitudes: list[float], longitudes: list[float], elevations: list[Any]
) -> list[str]:
    rows = [
        {"latitude": lat, "longitude": lon,
         "elevation": None if isinstance(e, float) and math.isnan(e) else e}
        for lat, lon, e in zip(latitudes, longitudes, elevations)
    ]
    return table(["latitude", "longitude", "elevation"], {"elevation": "m"}, rows)
