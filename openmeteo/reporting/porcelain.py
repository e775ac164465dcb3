"""Flat ``key=value`` output for scripts."""

import math
from typing import Any

from openmeteo.models.common import Category
from openmeteo.models.response import ApiResponse
from openmeteo.reporting.symbols import fmt_value
from openmeteo.reshape.zipper import zip_series


def meta_lines(response: ApiResponse) -> list[str]:
    lines = [
        f"latitude={fmt_value(response.latitude)}",
        f"longitude={fmt_value(response.longitude)}",
    ]
    if response.elevation is not None:
        lines.append(f"elevation={fmt_value(response.elevation)}")
    lines += [
        f"timezone={response.timezone or 'GMT'}",
        f"timezone_abbreviation={response.timezone_abbreviation or ''}",
        f"utc_offset_seconds={response.utc_offset_seconds or 0}",
    ]
    return lines


def _units(category: Category, units: dict[str, str]) -> list[str]:
    return [f"{category.units_key}.{k}={v}" for k, v in units.items()]


def section_lines(response: ApiResponse) -> list[str]:
    """Every present section flattened to ``section.<time>.<var>=value``."""
    lines: list[str] = []
    if response.current is not None:
        lines += [f"current.{k}={fmt_value(v)}" for k, v in response.current.values.items()]
        lines += _units(Category.CURRENT, response.current.units)
    for category, series in response.series():
        for record in zip_series(series, category.value):
            t = record["time"]
            lines += [
                f"{category.value}.{t}.{k}={fmt_value(v)}" for k, v in record.items() if k != "time"
            ]
        lines += _units(category, series.units)
    return lines


def render_porcelain(response: ApiResponse) -> list[str]:
    return meta_lines(response) + section_lines(response)


def parse_porcelain(lines: list[str]) -> dict[str, dict[str, dict[str, str]]]:
    """Rebuild ``{section: {time: {var: value}}}`` from time-series lines."""
    sections: dict[str, dict[str, dict[str, str]]] = {}
    for line in lines:
        key, _, value = line.partition("=")
        parts = key.split(".", 1)
        if len(parts) != 2 or parts[0] not in (Category.HOURLY, Category.DAILY):
            continue
        time, _, var = parts[1].rpartition(".")
        sections.setdefault(parts[0], {}).setdefault(time, {})[var] = value
    return sections


def flatten(prefix: str, data: Any) -> list[str]:
    """``prefix.key=value`` lines for a flat mapping."""
    return [f"{prefix}.{k}={fmt_value(v)}" for k, v in data.items()]


def geo_lines(results: list[dict[str, Any]]) -> list[str]:
    lines: list[str] = []
    for i, result in enumerate(results):
        lines += flatten(str(i), result)
    return lines


def elevation_lines(
    latitudes: list[float], longitudes: list[float], elevations: list[Any]
) -> list[str]:
    lines = [f"count={len(elevations)}"]
    for i, (lat, lon, elevation) in enumerate(zip(latitudes, longitudes, elevations)):
        if isinstance(elevation, float) and math.isnan(elevation):
            elevation = None
        lines += [
            f"elevation.{i}.latitude={fmt_value(lat)}",
            f"elevation.{i}.longitude={fmt_value(lon)}",
            f"elevation.{i}.elevation={fmt_value(elevation)}",
        ]
    return lines
