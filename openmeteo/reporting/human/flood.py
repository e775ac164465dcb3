"""Human output for river discharge forecasts."""

from typing import Any

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse, TimeSeries
from openmeteo.reporting.human.base import (
    blank, bold, dim, join, line, location_header, marker, unit,
)
from openmeteo.reporting.symbols import day_label, fmt_num, humanize_key
from openmeteo.reshape.aggregate import SourceMap, member_stats
from openmeteo.reshape.zipper import is_empty, zip_series

DISCHARGE = "river_discharge"
STATS = ("mean", "median", "max", "min", "p25", "p75")
KNOWN = frozenset({"time", DISCHARGE} | {f"{DISCHARGE}_{s}" for s in STATS})

# (upper bound exclusive, text, emoji); zero and below is "Dry"
SEVERITY = (
    (10, "Low", "🟢"),
    (100, "Moderate", "🟡"),
    (500, "High", "🟠"),
    (1000, "Very high", "🔴"),
)


def severity(value: Any) -> tuple[str, str]:
    if value is None:
        return "No data", "❓"
    if value <= 0:
        return "Dry", "🏜️"
    for limit, text, emoji in SEVERITY:
        if value < limit:
            return text, emoji
    return "Extreme", "🟣"


def _summary(row: dict[str, Any], members: list[str]) -> dict[str, Any]:
    """Statistic values for one day, from the API's stat columns or the members."""
    values = {s: row.get(f"{DISCHARGE}_{s}") for s in STATS}
    if values["mean"] is None and values["median"] is None and members:
        stats = member_stats([row[c] for c in members])
        if stats is not None:
            values = {s: getattr(stats, s) for s in STATS}
    return values


def _day(row: dict[str, Any], units: dict[str, str], members: list[str]) -> list[Text]:
    label = unit(units, DISCHARGE, "m³/s")
    lines: list[Text] = []
    discharge = row.get(DISCHARGE)
    if discharge is not None:
        text, emoji = severity(discharge)
        lines.append(line(
            f"   {emoji} Discharge: ", bold(f"{fmt_num(discharge)} {label}"), f" — {text}"
        ))
    s = _summary(row, members)
    if s["mean"] is not None or s["median"] is not None:
        parts = [
            f"mean: {fmt_num(s['mean'])}" if s["mean"] is not None else None,
            f"median: {fmt_num(s['median'])}" if s["median"] is not None else None,
        ]
        if s["min"] is not None and s["max"] is not None:
            parts.append(f"range: {fmt_num(s['min'])}–{fmt_num(s['max'])}")
        if s["p25"] is not None and s["p75"] is not None:
            parts.append(f"IQR: {fmt_num(s['p25'])}–{fmt_num(s['p75'])}")
        lines.append(line(f"   📊 {join(parts)} {label}"))

    present = [c for c in members if row.get(c) is not None]
    others = [k for k in row if k not in KNOWN and k not in members and row[k] is not None]
    if len(present) > 10:
        lines.append(line(
            f"   👥 {len(present)} ensemble members present "
            "(use --raw or --porcelain for full data)"
        ))
        present = []
    for key in present + others:
        text = f"   {humanize_key(key)}: {fmt_num(row[key])} {unit(units, key)}"
        lines.append(line(text.rstrip()))
    return lines


def render_flood_daily(series: TimeSeries) -> list[Text]:
    members = SourceMap([DISCHARGE]).member_columns(list(series.columns)).get(DISCHARGE, [])
    lines: list[Text] = []
    if members:
        lines += [blank(), line(dim(f"📋 Ensemble: {len(members)} members"))]
    for row in zip_series(series, "daily"):
        lines += [blank(), line(bold(f"📅 {day_label(row['time'])}"))]
        if is_empty(row):
            lines.append(marker("No river data at this location"))
            continue
        lines += _day(row, series.units, members)
    return lines


def render_flood(response: ApiResponse, place: ResolvedLocation | None) -> list[Text]:
    lines = location_header(response, place, emoji="🌊", timezone=False)
    if response.daily is not None:
        lines += render_flood_daily(response.daily)
    return lines
