"""Human output for satellite solar radiation."""

from typing import Any

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse, TimeSeries
from openmeteo.reporting.human.base import (
    blank, bold, day_heading, dim, join, line, location_header, marker, unit,
)
from openmeteo.reporting.symbols import clock, day_label, fmt_duration, fmt_num, humanize_key
from openmeteo.reshape.zipper import group_by_day, is_empty, zip_series

WM2 = "W/m²"

HOURLY_KNOWN = frozenset({
    "time", "is_day", "sunshine_duration",
    "shortwave_radiation", "direct_radiation", "diffuse_radiation",
    "direct_normal_irradiance", "global_tilted_irradiance", "terrestrial_radiation",
    "shortwave_radiation_instant", "direct_radiation_instant", "diffuse_radiation_instant",
    "direct_normal_irradiance_instant", "global_tilted_irradiance_instant",
    "terrestrial_radiation_instant",
})
DAILY_KNOWN = frozenset({
    "time", "sunrise", "sunset", "daylight_duration", "sunshine_duration",
    "shortwave_radiation_sum",
})

LEVELS = (
    (100, "Low", "🌤"),
    (300, "Moderate", "⛅"),
    (600, "High", "☀️"),
)


def radiation_level(value: Any) -> tuple[str, str]:
    """(level, emoji) for a global horizontal irradiance in W/m²."""
    if value is None:
        return "—", " "
    if value <= 0:
        return "Night", "🌙"
    for limit, text, emoji in LEVELS:
        if value < limit:
            return text, emoji
    return "Very high", "🔆"


def _measure(row: dict[str, Any], units: dict[str, str], name: str, title: str) -> str:
    return f"{title}: {fmt_num(row[name])} {unit(units, name, WM2)}"


def _instant(row: dict[str, Any], name: str) -> bool:
    """An instant value is shown only when its averaged counterpart is missing."""
    return row.get(f"{name}_instant") is not None and row.get(name) is None


def _hourly_row(row: dict[str, Any], units: dict[str, str]) -> Text:
    prefix = line("   ", dim(clock(row["time"])), "  ")
    if is_empty(row):
        return prefix + line(dim("—"))
    segments: list[Text] = []
    ghi = row.get("shortwave_radiation")
    if ghi is not None:
        segments.append(line(
            f"{radiation_level(ghi)[1]} GHI: ", bold(fmt_num(ghi)),
            f" {unit(units, 'shortwave_radiation', WM2)}",
        ))
    texts: list[str | None] = []
    if row.get("direct_normal_irradiance") is not None:
        texts.append(_measure(row, units, "direct_normal_irradiance", "DNI"))
    elif row.get("direct_radiation") is not None:
        texts.append(_measure(row, units, "direct_radiation", "DNI"))
    if row.get("diffuse_radiation") is not None:
        texts.append(_measure(row, units, "diffuse_radiation", "DHI"))
    if row.get("global_tilted_irradiance") is not None:
        texts.append(_measure(row, units, "global_tilted_irradiance", "GTI"))
    if (row.get("terrestrial_radiation") is not None
            and ghi is None and row.get("direct_radiation") is None):
        texts.append(_measure(row, units, "terrestrial_radiation", "Terr"))
    segments += [Text(t) for t in texts]

    if _instant(row, "shortwave_radiation"):
        value = row["shortwave_radiation_instant"]
        segments.append(line(
            f"{radiation_level(value)[1]} GHI⚡: ", bold(fmt_num(value)),
            f" {unit(units, 'shortwave_radiation_instant', WM2)}",
        ))
    instants: list[str | None] = []
    if _instant(row, "direct_radiation"):
        instants.append(_measure(row, units, "direct_radiation_instant", "Direct⚡"))
    elif _instant(row, "direct_normal_irradiance"):
        instants.append(_measure(row, units, "direct_normal_irradiance_instant", "DNI⚡"))
    for name, title in (("diffuse_radiation", "DHI⚡"), ("global_tilted_irradiance", "GTI⚡"),
                        ("terrestrial_radiation", "Terr⚡")):
        if _instant(row, name):
            instants.append(_measure(row, units, f"{name}_instant", title))
    if row.get("sunshine_duration") is not None:
        instants.append(f"☀️  {fmt_duration(row['sunshine_duration'])}")
    if row.get("is_day") is not None:
        instants.append("Day" if row["is_day"] == 1 else "Night")
    instants.append(", ".join(
        f"{humanize_key(k)}: {fmt_num(v)}"
        for k, v in row.items() if k not in HOURLY_KNOWN and v is not None
    ))
    segments += [Text(t) for t in instants if t]
    return prefix + Text(" · ").join(segments)


def render_satellite_hourly(series: TimeSeries) -> list[Text]:
    lines: list[Text] = []
    for day, rows in group_by_day(zip_series(series, "hourly")):
        lines += [blank(), day_heading(day_label(day))]
        lines += [_hourly_row(row, series.units) for row in rows]
    return lines


def _daily_parts(row: dict[str, Any], units: dict[str, str]) -> list[Text]:
    parts: list[Text] = []
    rise, set_ = row.get("sunrise"), row.get("sunset")
    if rise and set_:
        parts.append(Text(f"🌅 {clock(rise)} → {clock(set_)}"))
    elif rise:
        parts.append(Text(f"🌅 Rise: {clock(rise)}"))
    elif set_:
        parts.append(Text(f"🌇 Set: {clock(set_)}"))
    if row.get("daylight_duration") is not None:
        parts.append(Text(f"💡 Daylight: {fmt_duration(row['daylight_duration'])}"))
    if row.get("sunshine_duration") is not None:
        parts.append(Text(f"☀️  Sunshine: {fmt_duration(row['sunshine_duration'])}"))
    total = row.get("shortwave_radiation_sum")
    if total is not None:
        text = f"{fmt_num(total)} {unit(units, 'shortwave_radiation_sum', 'MJ/m²')}"
        parts.append(line("⚡ Total GHI: ", bold(text)))
    rest = join([
        f"{humanize_key(k)}: {fmt_num(v)}"
        for k, v in row.items() if k not in DAILY_KNOWN and v is not None
    ])
    if rest:
        parts.append(Text(rest))
    return parts


def render_satellite_daily(series: TimeSeries) -> list[Text]:
    lines: list[Text] = []
    for row in zip_series(series, "daily"):
        lines += [blank(), line(bold(f"📅 {day_label(row['time'])}"))]
        if is_empty(row):
            lines.append(marker())
            continue
        lines += [Text("   ") + part for part in _daily_parts(row, series.units)]
    return lines


def render_satellite(response: ApiResponse, place: ResolvedLocation | None) -> list[Text]:
    lines = location_header(response, place, emoji="🛰 ")
    if response.hourly is not None:
        lines += render_satellite_hourly(response.hourly)
    if response.daily is not None:
        lines += render_satellite_daily(response.daily)
    return lines
