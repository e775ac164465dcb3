"""Human output for the marine forecast."""

from typing import Any

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse, Snapshot, TimeSeries
from openmeteo.reporting.human.base import (
    blank, bold, day_heading, dim, extras, join, line, location_header, marker, unit,
)
from openmeteo.reporting.symbols import clock, day_label, fmt_num, wind_dir
from openmeteo.reshape.zipper import group_by_day, is_empty, zip_series

NO_MARINE = "No marine data at this location"

KNOWN = frozenset({
    "time", "interval",
    "wave_height", "wave_direction", "wave_period", "wave_peak_period",
    "wind_wave_height", "wind_wave_direction", "wind_wave_period", "wind_wave_peak_period",
    "swell_wave_height", "swell_wave_direction", "swell_wave_period", "swell_wave_peak_period",
    "secondary_swell_wave_height", "secondary_swell_wave_direction",
    "secondary_swell_wave_period",
    "tertiary_swell_wave_height", "tertiary_swell_wave_direction",
    "tertiary_swell_wave_period",
    "ocean_current_velocity", "ocean_current_direction",
    "sea_surface_temperature", "sea_level_height_msl", "invert_barometer_height",
})
DAILY_KNOWN = frozenset({
    "time",
    "wave_height_max", "wave_direction_dominant", "wave_period_max",
    "wind_wave_height_max", "wind_wave_direction_dominant", "wind_wave_period_max",
    "wind_wave_peak_period_max",
    "swell_wave_height_max", "swell_wave_direction_dominant", "swell_wave_period_max",
    "swell_wave_peak_period_max",
})


def _waves(values: dict[str, Any], units: dict[str, str], prefix: str, peak: bool = True) -> str:
    """'1.2m ← SW (8s, peak 10s)' for one wave component."""
    height = values.get(f"{prefix}height")
    text = f"{fmt_num(height)}{unit(units, prefix + 'height', 'm')}"
    direction = values.get(f"{prefix}direction")
    if direction is not None:
        text += f" ← {wind_dir(direction)}"
    period = values.get(f"{prefix}period")
    if period is not None:
        peak_period = values.get(f"{prefix}peak_period") if peak else None
        tail = f", peak {fmt_num(peak_period)}s" if peak_period is not None else ""
        text += f" ({fmt_num(period)}s{tail})"
    return text


def render_marine_current(current: Snapshot) -> list[Text]:
    c, u = current.values, current.units
    lines = [blank(), line(bold("⏱  Now"), f" — {c.get('time') or 'now'}")]
    if is_empty(c, [k for k in c if k not in ("time", "interval")]):
        return lines + [blank(), marker(NO_MARINE)]
    if c.get("wave_height") is not None:
        lines.append(line("   🌊 Waves: ", bold(_waves(c, u, "wave_"))))
    if c.get("wind_wave_height") is not None:
        lines.append(line("   💨 Wind waves: " + _waves(c, u, "wind_wave_")))
    if c.get("swell_wave_height") is not None:
        lines.append(line("   🏄 Swell: " + _waves(c, u, "swell_wave_")))
    for ordinal, prefix in (("2nd", "secondary_swell_wave_"), ("3rd", "tertiary_swell_wave_")):
        if c.get(f"{prefix}height") is not None:
            lines.append(line(f"   🏄 {ordinal} swell: " + _waves(c, u, prefix, peak=False)))
    if c.get("sea_surface_temperature") is not None:
        sst = f"{fmt_num(c['sea_surface_temperature'])}{unit(u, 'sea_surface_temperature', '°C')}"
        lines.append(line("   🌡  SST: ", bold(sst)))
    if c.get("ocean_current_velocity") is not None:
        text = f"   🌀 Current: {fmt_num(c['ocean_current_velocity'])}"
        text += unit(u, "ocean_current_velocity", "km/h")
        if c.get("ocean_current_direction") is not None:
            text += f" → {wind_dir(c['ocean_current_direction'])}"
        lines.append(line(text))
    if c.get("sea_level_height_msl") is not None:
        level = f"{fmt_num(c['sea_level_height_msl'])}{unit(u, 'sea_level_height_msl', 'm')}"
        lines.append(line(f"   📏 Sea level: {level} MSL"))
    if c.get("invert_barometer_height") is not None:
        ib = f"{fmt_num(c['invert_barometer_height'])}{unit(u, 'invert_barometer_height', 'm')}"
        lines.append(line(f"   📊 IB effect: {ib}"))
    lines += [
        line(f"   {k.replace('_', ' ')}: {fmt_num(v)}")
        for k, v in c.items()
        if k not in KNOWN and v is not None
    ]
    return lines


def _hourly_row(row: dict[str, Any], units: dict[str, str]) -> Text | None:
    segments: list[str | None] = []
    if row.get("wave_height") is not None:
        text = f"🌊 {fmt_num(row['wave_height'])}{unit(units, 'wave_height', 'm')}"
        if row.get("wave_direction") is not None:
            text += f" ←{wind_dir(row['wave_direction'])}"
        if row.get("wave_period") is not None:
            text += f" {fmt_num(row['wave_period'])}s"
        segments.append(text)
    for emoji, prefix in (("💨", "wind_wave_"), ("🏄", "swell_wave_")):
        height = row.get(f"{prefix}height")
        if height is not None:
            text = f"{emoji} {fmt_num(height)}{unit(units, prefix + 'height', 'm')}"
            if row.get(f"{prefix}direction") is not None:
                text += f" ←{wind_dir(row[prefix + 'direction'])}"
            segments.append(text)
    if row.get("sea_surface_temperature") is not None:
        sst = row["sea_surface_temperature"]
        segments.append(f"🌡 {fmt_num(sst)}{unit(units, 'sea_surface_temperature', '°C')}")
    if row.get("ocean_current_velocity") is not None:
        text = f"🌀 {fmt_num(row['ocean_current_velocity'])}"
        text += unit(units, "ocean_current_velocity", "km/h")
        if row.get("ocean_current_direction") is not None:
            text += f" →{wind_dir(row['ocean_current_direction'])}"
        segments.append(text)
    if row.get("sea_level_height_msl") is not None:
        level = row["sea_level_height_msl"]
        segments.append(f"📏 {fmt_num(level)}{unit(units, 'sea_level_height_msl', 'm')}")
    rest = {k: v for k, v in row.items() if v is not None}
    segments.append(extras(rest, KNOWN))
    content = join(segments)
    if not content:
        return None
    return line("   ", dim(clock(row["time"])), "  " + content)


def render_marine_hourly(series: TimeSeries) -> list[Text]:
    """Hourly rows grouped by day; rows with nothing but nulls are left out."""
    lines: list[Text] = []
    for day, records in group_by_day(zip_series(series, "hourly")):
        rows = [r for r in (_hourly_row(rec, series.units) for rec in records) if r is not None]
        lines += [blank(), day_heading(day_label(day))]
        lines += rows or [marker(NO_MARINE)]
    return lines


def _daily_parts(row: dict[str, Any], units: dict[str, str]) -> list[str]:
    parts: list[str] = []
    for label, prefix in (("🌊 max ", "wave_"), ("💨 Wind: max ", "wind_wave_"),
                          ("🏄 Swell: max ", "swell_wave_")):
        height = row.get(f"{prefix}height_max")
        if height is None:
            continue
        text = f"{label}{fmt_num(height)}{unit(units, prefix + 'height_max', 'm')}"
        if row.get(f"{prefix}direction_dominant") is not None:
            text += f" ← {wind_dir(row[prefix + 'direction_dominant'])}"
        period = row.get(f"{prefix}period_max")
        if period is not None:
            peak = row.get(f"{prefix}peak_period_max")
            tail = f", peak {fmt_num(peak)}s" if peak is not None else ""
            text += f" (period max {fmt_num(period)}s{tail})"
        parts.append(text)
    rest = extras(row, DAILY_KNOWN, sep=" · ")
    if rest:
        parts.append(rest)
    return parts


def render_marine_daily(series: TimeSeries) -> list[Text]:
    lines: list[Text] = []
    for row in zip_series(series, "daily"):
        lines += [blank(), line(bold(f"📅 {day_label(row['time'])}"))]
        if is_empty(row):
            lines.append(marker())
            continue
        lines += [line("   " + part) for part in _daily_parts(row, series.units)]
    return lines


def render_marine(response: ApiResponse, place: ResolvedLocation | None) -> list[Text]:
    lines = location_header(response, place, emoji="🌊", elevation=False)
    if response.current is not None:
        lines += render_marine_current(response.current)
    if response.hourly is not None:
        lines += render_marine_hourly(response.hourly)
    if response.daily is not None:
        lines += render_marine_daily(response.daily)
    return lines
