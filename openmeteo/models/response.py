"""Typed view of an upstream JSON response, decoded once."""

import json
from dataclasses import dataclass, field
from typing import Any

from openmeteo.errors import MalformedResponseError
from openmeteo.models.common import Category


@dataclass(frozen=True)
class Snapshot:
    values: dict[str, Any]
    units: dict[str, str] = field(default_factory=dict)

    @property
    def time(self) -> str | None:
        return self.values.get("time")


@dataclass(frozen=True)
class TimeSeries:
    time: list[str]
    columns: dict[str, list[Any]]
    units: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class ApiResponse:
    body: dict[str, Any]
    text: str
    latitude: float | None = None
    longitude: float | None = None
    elevation: Any = None
    timezone: str | None = None
    timezone_abbreviation: str | None = None
    utc_offset_seconds: int | None = None
    current: Snapshot | None = None
    hourly: TimeSeries | None = None
    daily: TimeSeries | None = None

    def section(self, category: Category) -> Snapshot | TimeSeries | None:
        match category:
            case Category.CURRENT:
                return self.current
            case Category.HOURLY:
                return self.hourly
            case Category.DAILY:
                return self.daily

    def series(self) -> list[tuple[Category, TimeSeries]]:
        return [
            (c, s) for c, s in ((Category.HOURLY, self.hourly), (Category.DAILY, self.daily))
            if s is not None
        ]


def _units(body: dict, category: Category) -> dict[str, str]:
    units = body.get(category.units_key)
    if units is None:
        return {}
    if not isinstance(units, dict):
        raise MalformedResponseError(f"'{category.units_key}' is not an object")
    return {k: str(v) for k, v in units.items()}


def _decode_series(body: dict, category: Category) -> TimeSeries | None:
    raw = body.get(category.value)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"'{category.value}' is not an object")
    time = raw.get("time")
    if not isinstance(time, list):
        raise MalformedResponseError(f"'{category.value}.time' is missing or not an array")
    columns: dict[str, list[Any]] = {}
    for key, values in raw.items():
        if key == "time":
            continue
        if not isinstance(values, list):
            raise MalformedResponseError(f"'{category.value}.{key}' is not an array")
        columns[key] = values
    return TimeSeries(time=time, columns=columns, units=_units(body, category))


def decode_response(text: str) -> ApiResponse:
    """Parse a response body into an ApiResponse.

    Raises MalformedResponseError if the body is not a JSON object or a
    section has the wrong shape.
    """
    try:
        body = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"invalid JSON ({e.msg})") from e
    if not isinstance(body, dict):
        raise MalformedResponseError("expected a JSON object")

    current = None
    raw_current = body.get("current")
    if raw_current is not None:
        if not isinstance(raw_current, dict):
            raise MalformedResponseError("'current' is not an object")
        current = Snapshot(values=dict(raw_current), units=_units(body, Category.CURRENT))

    return ApiResponse(
        body=body,
        text=text,
        latitude=body.get("latitude"),
        longitude=body.get("longitude"),
        elevation=body.get("elevation"),
        timezone=body.get("timezone"),
        timezone_abbreviation=body.get("timezone_abbreviation"),
        utc_offset_seconds=body.get("utc_offset_seconds"),
        current=current,
        hourly=_decode_series(body, Category.HOURLY),
        daily=_decode_series(body, Category.DAILY),
    )
