"""Human output for geocoding search results and elevation lookups."""

import math
from typing import Any

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.reporting.human.base import bold, blank, dim, line
from openmeteo.reporting.symbols import fmt_num


def _degrees(value: float, positive: str, negative: str) -> str:
    return f"{fmt_num(abs(value))}°{positive if value >= 0 else negative}"


def missing_elevation(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _place(result: dict[str, Any]) -> list[Text]:
    title = ", ".join(
        str(result[k]) for k in ("name", "admin1", "country") if result.get(k)
    )
    first = line(bold(f"📍 {title}"))
    if result.get("country_code"):
        first.append(f" [{result['country_code']}]")
    details = []
    lat, lon = result.get("latitude"), result.get("longitude")
    if lat is not None and lon is not None:
        details.append(f"{_degrees(lat, 'N', 'S')}, {_degrees(lon, 'E', 'W')}")
    if result.get("elevation"):
        details.append(f"{fmt_num(result['elevation'])}m elev")
    if result.get("population"):
        details.append(f"Pop: {result['population']}")
    lines = [first]
    if details:
        lines.append(line("   " + "  ·  ".join(details)))
    lines.append(line("   ", dim(f"Timezone: {result.get('timezone') or '?'}")))
    if result.get("postcodes"):
        postcodes = ", ".join(str(p) for p in result["postcodes"])
        lines.append(line("   ", dim(f"Postcodes: {postcodes}")))
    if result.get("feature_code"):
        lines.append(line("   ", dim(f"Type: {result['feature_code']}")))
    return lines


def render_geo(results: list[dict[str, Any]]) -> list[Text]:
    lines: list[Text] = []
    for i, result in enumerate(results):
        if i:
            lines.append(blank())
        lines += _place(result)
    return lines


def render_elevation(
    latitudes: list[float],
    longitudes: list[float],
    elevations: list[Any],
    place: ResolvedLocation | None = None,
) -> list[Text]:
    if place is not None and place.name:
        header = line("🏔  ", bold(place.name), f", {place.country}" if place.country else "")
    elif len(elevations) > 1:
        header = line("🏔  Elevation Lookup — ", bold(f"{len(elevations)} locations"))
    else:
        header = line("🏔  Elevation Lookup")
    lines = [header, blank()]
    for lat, lon, elevation in zip(latitudes, longitudes, elevations):
        value = "N/A" if missing_elevation(elevation) else f"{fmt_num(elevation)} m"
        lines.append(line(
            f"   📍 {_degrees(lat, 'N', 'S')}, {_degrees(lon, 'E', 'W')}  →  ", bold(value)
        ))
    return lines
