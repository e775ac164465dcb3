"""Human output for forecast and historical weather."""

from typing import Any

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse, Snapshot, TimeSeries
from openmeteo.reporting.human.base import (
    NO_DATA, blank, bold, day_heading, dim, extras, line, location_header, marker, unit,
)
from openmeteo.reporting.symbols import (
    clock, day_label, fmt_num, humanize_key, wind_dir, wmo_emoji, wmo_text,
)
from openmeteo.reshape.zipper import group_by_day, is_empty, zip_series

HOURLY_KNOWN = frozenset({
    "time", "temperature_2m", "apparent_temperature", "weather_code", "relative_humidity_2m",
    "precipitation", "precipitation_probability", "cloud_cover", "wind_speed_10m",
    "wind_direction_10m",
})
DAILY_KNOWN = frozenset({
    "time", "temperature_2m_max", "temperature_2m_min", "temperature_2m_mean",
    "apparent_temperature_max", "apparent_temperature_min", "apparent_temperature_mean",
    "weather_code", "precipitation_sum", "precipitation_probability_max",
    "wind_speed_10m_max", "wind_gusts_10m_max", "sunrise", "sunset",
})
CURRENT_KNOWN = frozenset({
    "time", "interval", "temperature_2m", "apparent_temperature", "weather_code",
    "relative_humidity_2m", "cloud_cover", "wind_speed_10m", "wind_direction_10m",
    "wind_gusts_10m", "is_day", "precipitation", "rain", "showers", "snowfall",
    "pressure_msl", "surface_pressure",
})


def _hourly_row(row: dict[str, Any], units: dict[str, str]) -> Text:
    segments: list[Text] = []
    temp = row.get("temperature_2m")
    if temp is not None:
        feels = row.get("apparent_temperature")
        feels_text = f" (feels {fmt_num(feels)}°)" if feels is not None else ""
        segments.append(line(bold(f"{fmt_num(temp)}°"), feels_text))
    if row.get("weather_code") is not None:
        segments.append(Text(wmo_text(row["weather_code"])))
    if row.get("relative_humidity_2m") is not None:
        segments.append(Text(f"💧{fmt_num(row['relative_humidity_2m'])}%"))
    precip, prob = row.get("precipitation"), row.get("precipitation_probability")
    if precip is not None:
        text = f"{fmt_num(precip)}{unit(units, 'precipitation', 'mm')}"
        segments.append(Text(text + (f" ({fmt_num(prob)}%)" if prob is not None else "")))
    elif prob is not None:
        segments.append(Text(f"💧{fmt_num(prob)}% chance"))
    if row.get("cloud_cover") is not None and row.get("weather_code") is None:
        segments.append(Text(f"☁️{fmt_num(row['cloud_cover'])}%"))
    if row.get("wind_speed_10m") is not None:
        text = f"💨{fmt_num(row['wind_speed_10m'])}"
        if units.get("wind_speed_10m"):
            text += f" {units['wind_speed_10m']}"
        if row.get("wind_direction_10m") is not None:
            text += f" {wind_dir(row['wind_direction_10m'])}"
        segments.append(Text(text))
    rest = extras(row, HOURLY_KNOWN)
    if rest:
        segments.append(Text(rest))
    if not segments or is_empty(row):
        segments = [line(dim(NO_DATA))]
    return line("   ", dim(clock(row["time"])), "  ") + Text(" · ").join(segments)


def render_hourly(series: TimeSeries, section: str = "hourly") -> list[Text]:
    lines: list[Text] = []
    for day, rows in group_by_day(zip_series(series, section)):
        lines += [blank(), day_heading(day_label(day))]
        lines += [_hourly_row(row, series.units) for row in rows]
    return lines


def _daily_parts(row: dict[str, Any], units: dict[str, str]) -> list[str]:
    tmax, tmin, tmean = (row.get(f"temperature_2m_{s}") for s in ("max", "min", "mean"))
    parts: list[str] = []
    if tmax is not None and tmin is not None:
        text = f"🌡  {fmt_num(tmin)}°→{fmt_num(tmax)}°"
        parts.append(text + (f" (avg {fmt_num(tmean)}°)" if tmean is not None else ""))
    elif tmax is not None:
        parts.append(f"🌡  max {fmt_num(tmax)}°")
    elif tmin is not None:
        parts.append(f"🌡  min {fmt_num(tmin)}°")
    elif tmean is not None:
        parts.append(f"🌡  avg {fmt_num(tmean)}°")
    if row.get("weather_code") is not None:
        parts.append(f"{wmo_emoji(row['weather_code'])} {wmo_text(row['weather_code'])}")
    if row.get("precipitation_sum") is not None:
        text = f"🌧  {fmt_num(row['precipitation_sum'])}{unit(units, 'precipitation_sum', 'mm')}"
        prob = row.get("precipitation_probability_max")
        parts.append(text + (f" ({fmt_num(prob)}%)" if prob is not None else ""))
    if row.get("wind_speed_10m_max") is not None:
        speed = unit(units, "wind_speed_10m_max", "km/h")
        text = f"💨 max {fmt_num(row['wind_speed_10m_max'])}{speed}"
        gusts = row.get("wind_gusts_10m_max")
        parts.append(text + (f", gusts {fmt_num(gusts)}" if gusts is not None else ""))
    if row.get("sunrise") and row.get("sunset"):
        parts.append(f"🌅 {clock(row['sunrise'])}→{clock(row['sunset'])}")
    rest = extras(row, DAILY_KNOWN, sep=" · ")
    if rest:
        parts.append(rest)
    return parts


def render_daily(series: TimeSeries, section: str = "daily") -> list[Text]:
    lines: list[Text] = []
    for row in zip_series(series, section):
        lines += [blank(), line(bold(f"📅 {day_label(row['time'])}"))]
        if is_empty(row):
            lines.append(marker())
            continue
        lines += [line("   " + part) for part in _daily_parts(row, series.units)]
    return lines


def render_current(current: Snapshot) -> list[Text]:
    c, u = current.values, current.units
    lines = [blank(), line(bold("⏱  Now"), f" — {c.get('time') or 'now'}"), blank()]
    if c.get("temperature_2m") is not None:
        feels = c.get("apparent_temperature")
        lines.append(line(
            "   🌡  ",
            bold(f"{fmt_num(c['temperature_2m'])}{unit(u, 'temperature_2m', '°C')}"),
            f" (feels like {fmt_num(feels)}{unit(u, 'apparent_temperature', '°C')})"
            if feels is not None else "",
        ))
    if c.get("relative_humidity_2m") is not None:
        lines.append(line(f"   💧 {fmt_num(c['relative_humidity_2m'])}% humidity"))
    clouds = c.get("cloud_cover")
    if c.get("weather_code") is not None:
        lines.append(line(
            f"   {wmo_emoji(c['weather_code'])} ",
            bold(wmo_text(c["weather_code"])),
            f" ({fmt_num(clouds)}% clouds)" if clouds is not None else "",
        ))
    elif clouds is not None:
        lines.append(line(f"   ☁️  {fmt_num(clouds)}% clouds"))
    if c.get("wind_speed_10m") is not None:
        speed_unit = unit(u, "wind_speed_10m", "km/h")
        text = f"   💨 {fmt_num(c['wind_speed_10m'])} {speed_unit}"
        if c.get("wind_direction_10m") is not None:
            text += f" {wind_dir(c['wind_direction_10m'])}"
        if c.get("wind_gusts_10m") is not None:
            gust_unit = unit(u, "wind_gusts_10m", speed_unit)
            text += f", gusts {fmt_num(c['wind_gusts_10m'])} {gust_unit}"
        lines.append(line(text))
    if c.get("is_day") is not None:
        lines.append(line("   ☀️  Day" if c["is_day"] == 1 else "   🌙 Night"))
    precip = c.get("precipitation")
    if precip is not None and precip > 0:
        text = f"   🌧  {fmt_num(precip)}{unit(u, 'precipitation', 'mm')}"
        for key, label, default in (("rain", "rain", "mm"), ("snowfall", "snow", "cm")):
            value = c.get(key)
            if value is not None and value > 0:
                text += f" ({label}: {fmt_num(value)}{unit(u, key, default)})"
        lines.append(line(text))
    for key in ("surface_pressure", "pressure_msl"):
        if c.get(key) is not None:
            lines.append(line(f"   📊 {fmt_num(c[key])} {unit(u, key, 'hPa')}"))
            break
    lines += [
        line(f"   {humanize_key(k)}: {fmt_num(v)}") for k, v in c.items() if k not in CURRENT_KNOWN
    ]
    return lines


def render_weather(response: ApiResponse, place: ResolvedLocation | None) -> list[Text]:
    lines = location_header(response, place)
    if response.current is not None:
        lines += render_current(response.current)
    if response.hourly is not None:
        lines += render_hourly(response.hourly)
    if response.daily is not None:
        lines += render_daily(response.daily)
    return lines


def render_history(
    response: ApiResponse,
    place: ResolvedLocation | None,
    start_date: str | None,
    end_date: str | None,
) -> list[Text]:
    lines = location_header(response, place)
    period = line("   📅 Historical: ", bold(start_date or "?"), " → ", bold(end_date or "?"))
    lines += [blank(), period]
    if response.hourly is not None:
        lines += render_hourly(response.hourly)
    if response.daily is not None:
        lines += render_daily(response.daily)
    return lines
