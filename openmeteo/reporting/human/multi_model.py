"""Human output for ensemble and climate responses.

Both APIs return one column per model (and, for ensembles, per member).
The renderers here aggregate those columns into one mean/min/max per
variable and time step before printing.
"""

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse, TimeSeries
from openmeteo.reporting.human.base import (
    NO_DATA, blank, bold, day_heading, dim, line, location_header, marker,
)
from openmeteo.reporting.symbols import (
    clock, day_label, fmt_num, humanize_key, wind_dir, wmo_emoji, wmo_text,
)
from openmeteo.reshape.aggregate import (
    AggregatedRecord, AggregatedStat, Period, SourceMap, Tier, aggregate_series, choose_tier,
    rollup,
)
from openmeteo.reshape.zipper import group_by_day

Stats = dict[str, AggregatedStat | None]

ENSEMBLE_HOURLY_KNOWN = frozenset({
    "temperature_2m", "apparent_temperature", "weather_code", "relative_humidity_2m",
    "precipitation", "wind_speed_10m", "wind_direction_10m", "cloud_cover", "wind_gusts_10m",
    "rain", "snowfall", "snow_depth",
})
ENSEMBLE_DAILY_KNOWN = frozenset({
    "temperature_2m_max", "temperature_2m_min", "temperature_2m_mean",
    "apparent_temperature_max", "apparent_temperature_min", "apparent_temperature_mean",
    "precipitation_sum", "wind_speed_10m_max", "wind_speed_10m_mean", "wind_speed_10m_min",
    "wind_gusts_10m_max", "wind_gusts_10m_mean", "wind_gusts_10m_min",
    "wind_direction_10m_dominant", "wind_direction_100m_dominant",
})
CLIMATE_KNOWN = frozenset({
    "temperature_2m_max", "temperature_2m_min", "temperature_2m_mean",
    "precipitation_sum", "rain_sum", "snowfall_sum", "wind_speed_10m_max",
    "wind_speed_10m_mean", "relative_humidity_2m_max", "relative_humidity_2m_min",
    "relative_humidity_2m_mean", "cloud_cover_mean", "pressure_msl_mean",
    "shortwave_radiation_sum", "et0_fao_evapotranspiration", "soil_moisture_0_to_10cm_mean",
    "dew_point_2m_max", "dew_point_2m_min", "dew_point_2m_mean",
})


def base_units(series: TimeSeries, sources: SourceMap) -> dict[str, str]:
    """Units keyed by variable instead of by model/member column."""
    units: dict[str, str] = {}
    for column, value in series.units.items():
        source = sources.source(column)
        units.setdefault(source.variable if source else column, value)
    return units


def column_count(series: TimeSeries, sources: SourceMap) -> int:
    groups = sources.group(list(series.columns))
    return len(next(iter(groups.values()))) if groups else 1


def _spread(stat: AggregatedStat, suffix: str = "") -> tuple[str, str] | str:
    if stat.n > 1:
        median = f", med {fmt_num(stat.median)}{suffix}" if stat.median is not None else ""
        return dim(f" ({fmt_num(stat.min)}{suffix}–{fmt_num(stat.max)}{suffix}{median})")
    return ""


def _others(stats: Stats, known: frozenset[str]) -> list[Text]:
    return [
        line(f"{humanize_key(name)}: {fmt_num(s.mean)}", _spread(s))
        for name, s in stats.items()
        if name not in known and s is not None
    ]


def _ensemble_hour(record: AggregatedRecord, units: dict[str, str]) -> Text:
    s = record.stats
    segments: list[Text] = []
    temp = s.get("temperature_2m")
    if temp:
        feels = s.get("apparent_temperature")
        segments.append(line(
            bold(f"{fmt_num(temp.mean)}°"), _spread(temp),
            f" feels {fmt_num(feels.mean)}°" if feels else "",
        ))
    code = s.get("weather_code")
    if code:
        segments.append(Text(f"{wmo_emoji(code.mode)}{wmo_text(code.mode)}"))
    humidity = s.get("relative_humidity_2m")
    if humidity:
        segments.append(Text(f"💧{fmt_num(humidity.mean)}%"))
    precip = s.get("precipitation")
    if precip:
        amount = f"🌧 {fmt_num(precip.mean)}{units.get('precipitation', 'mm')}"
        segments.append(line(amount, _spread(precip)))
    wind = s.get("wind_speed_10m")
    if wind:
        direction = s.get("wind_direction_10m")
        segments.append(line(
            f"💨{fmt_num(wind.mean)} {units.get('wind_speed_10m', 'km/h')}", _spread(wind),
            f" {wind_dir(round(direction.mean))}" if direction else "",
        ))
    segments += _others(s, ENSEMBLE_HOURLY_KNOWN)
    if not segments:
        segments = [line(dim(NO_DATA))]
    return line("   ", dim(clock(record.time)), "  ") + Text(" · ").join(segments)


def _ensemble_day(stats: Stats, units: dict[str, str]) -> list[Text]:
    parts: list[Text] = []
    tmax, tmin = stats.get("temperature_2m_max"), stats.get("temperature_2m_min")
    tmean = stats.get("temperature_2m_mean")
    if tmax and tmin:
        spread = ""
        if tmax.n > 1:
            spread = dim(f" (spread: {fmt_num(tmin.min)}°–{fmt_num(tmax.max)}°)")
        parts.append(line(
            f"🌡  {fmt_num(tmin.mean)}°→{fmt_num(tmax.mean)}°", spread,
            f" avg {fmt_num(tmean.mean)}°" if tmean else "",
        ))
    elif tmean:
        parts.append(Text(f"🌡  avg {fmt_num(tmean.mean)}°"))
    precip = stats.get("precipitation_sum")
    if precip:
        amount = f"🌧  {fmt_num(precip.mean)}{units.get('precipitation_sum', 'mm')}"
        parts.append(line(amount, _spread(precip)))
    wind = stats.get("wind_speed_10m_max")
    if wind:
        speed = f"💨 max {fmt_num(wind.mean)} {units.get('wind_speed_10m_max', 'km/h')}"
        parts.append(line(speed, _spread(wind)))
    others = _others(stats, ENSEMBLE_DAILY_KNOWN)
    if others:
        parts.append(Text(" · ").join(others))
    if not parts:
        return [marker()]
    return [Text("   ") + p for p in parts]


def render_ensemble(
    response: ApiResponse,
    place: ResolvedLocation | None,
    sources: SourceMap,
) -> list[Text]:
    lines = location_header(response, place)
    lines.append(line("   📊 Ensemble: ", bold(", ".join(sources.models))))
    if response.hourly is not None:
        units = base_units(response.hourly, sources)
        members = dim(f" ({column_count(response.hourly, sources)} members)")
        records = aggregate_series(response.hourly, sources, "hourly", with_median=True)
        for day, rows in group_by_day([{"time": r.time, "record": r} for r in records]):
            lines += [blank(), day_heading(day_label(day)) + line(members)]
            lines += [_ensemble_hour(row["record"], units) for row in rows]
    if response.daily is not None:
        units = base_units(response.daily, sources)
        members = dim(f" ({column_count(response.daily, sources)} members)")
        for record in aggregate_series(response.daily, sources, "daily", with_median=True):
            lines += [blank(), line(bold(f"📅 {day_label(record.time)}"), members)]
            lines += _ensemble_day(record.stats, units)
    return lines


def _climate_row(stats: Stats, units: dict[str, str], many: bool) -> list[Text]:
    s = {name: stat for name, stat in stats.items() if stat is not None}
    parts: list[Text] = []

    tmax, tmin, tmean = (s.get(f"temperature_2m_{k}") for k in ("max", "min", "mean"))
    if tmax and tmin:
        spread = dim(f" (spread: {fmt_num(tmin.min)}°–{fmt_num(tmax.max)}°)") if many else ""
        parts.append(line(
            f"🌡  {fmt_num(tmin.mean)}°→{fmt_num(tmax.mean)}°", spread,
            f" avg {fmt_num(tmean.mean)}°" if tmean else "",
        ))
    elif tmean:
        spread = dim(f" ({fmt_num(tmean.min)}°–{fmt_num(tmean.max)}°)") if many else ""
        parts.append(line(f"🌡  avg {fmt_num(tmean.mean)}°", spread))
    elif tmax:
        parts.append(line(f"🌡  max {fmt_num(tmax.mean)}°", _spread(tmax, "°")))
    elif tmin:
        parts.append(line(f"🌡  min {fmt_num(tmin.mean)}°", _spread(tmin, "°")))

    if "precipitation_sum" in s:
        p = s["precipitation_sum"]
        spread = dim(f" ({fmt_num(p.min)}–{fmt_num(p.max)})") if many else ""
        parts.append(line(f"🌧  {fmt_num(p.mean)}{units.get('precipitation_sum', 'mm')}", spread))
    if "rain_sum" in s:
        rain = f"{fmt_num(s['rain_sum'].mean)}{units.get('rain_sum', 'mm')}"
        parts.append(Text(f"🌧  rain: {rain}"))
    if "snowfall_sum" in s:
        snow = f"{fmt_num(s['snowfall_sum'].mean)}{units.get('snowfall_sum', 'cm')}"
        parts.append(Text(f"🌨  snow: {snow}"))

    wmax, wmean = s.get("wind_speed_10m_max"), s.get("wind_speed_10m_mean")
    if wmax:
        text = f"💨 max {fmt_num(wmax.mean)} {units.get('wind_speed_10m_max', 'km/h')}"
        parts.append(Text(text + (f" (avg {fmt_num(wmean.mean)})" if wmean else "")))
    elif wmean:
        parts.append(Text(
            f"💨 avg {fmt_num(wmean.mean)} {units.get('wind_speed_10m_mean', 'km/h')}"
        ))

    for name, emoji, label, suffix in (
        ("relative_humidity_2m", "💧 ", "", "%"),
        ("dew_point_2m", "💧 ", "dew: ", "°"),
    ):
        mean, low, high = (s.get(f"{name}_{k}") for k in ("mean", "min", "max"))
        if mean:
            text = f"{emoji}{label}{fmt_num(mean.mean)}{suffix}"
            if low and high:
                text += f" ({fmt_num(low.mean)}{suffix}–{fmt_num(high.mean)}{suffix})"
            parts.append(Text(text))

    if "cloud_cover_mean" in s:
        parts.append(Text(f"☁️  {fmt_num(s['cloud_cover_mean'].mean)}%"))
    if "pressure_msl_mean" in s:
        parts.append(Text(f"📊 {fmt_num(s['pressure_msl_mean'].mean)} hPa"))
    if "shortwave_radiation_sum" in s:
        radiation = fmt_num(s["shortwave_radiation_sum"].mean)
        parts.append(Text(f"☀️  {radiation} {units.get('shortwave_radiation_sum', 'MJ/m²')}"))
    if "et0_fao_evapotranspiration" in s:
        et0 = fmt_num(s["et0_fao_evapotranspiration"].mean)
        parts.append(Text(f"💦 ET₀: {et0}{units.get('et0_fao_evapotranspiration', 'mm')}"))
    if "soil_moisture_0_to_10cm_mean" in s:
        soil = fmt_num(s["soil_moisture_0_to_10cm_mean"].mean)
        soil_unit = units.get("soil_moisture_0_to_10cm_mean", "m³/m³")
        parts.append(Text(f"🌱 soil: {soil} {soil_unit}"))

    others = _others(s, CLIMATE_KNOWN)
    if others:
        parts.append(Text(" · ").join(others))
    if not parts:
        return [marker()]
    return [Text("   ") + p for p in parts]


def _period_heading(period: Period, models: str) -> Text:
    return line(bold(f"📅 {period.label}"), models, dim(f" ({period.days} days)"))


def render_climate(
    response: ApiResponse,
    place: ResolvedLocation | None,
    sources: SourceMap,
    start_date: str | None,
    end_date: str | None,
) -> list[Text]:
    """Climate projections, rolled up to days, months or years by range length."""
    lines = location_header(response, place)
    lines.append(line("   🔬 Climate: ", bold(", ".join(sources.models))))
    lines.append(line(f"   📅 {start_date or '?'} → {end_date or '?'}"))
    series = response.daily
    if series is None:
        return lines

    units = base_units(series, sources)
    count = column_count(series, sources)
    many = count > 1
    models = dim(f" ({count} models)") if many else ""
    records = aggregate_series(series, sources, "daily")
    tier = choose_tier(len(records))
    if tier is Tier.DAILY:
        for record in records:
            lines += [blank(), line(bold(f"📅 {day_label(record.time)}"), models)]
            lines += _climate_row(record.stats, units, many)
        return lines
    for period in rollup(records, tier):
        lines += [blank(), _period_heading(period, models)]
        lines += _climate_row(period.stats, units, many)
    return lines
