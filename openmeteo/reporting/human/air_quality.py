"""Human output for air quality: AQI badges, pollutants and pollen."""

from typing import Any

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse, Snapshot, TimeSeries
from openmeteo.reporting.human.base import (
    blank, bold, day_heading, dim, join, line, location_header, marker, unit,
)
from openmeteo.reporting.symbols import clock, day_label, fmt_num, humanize_key
from openmeteo.reshape.zipper import group_by_day, is_empty, zip_series

UG = "μg/m³"

EU_BANDS = (
    (20, "Good", "🟢"),
    (40, "Fair", "🟡"),
    (60, "Moderate", "🟠"),
    (80, "Poor", "🔴"),
    (100, "Very poor", "🟣"),
)
US_BANDS = (
    (50, "Good", "🟢"),
    (100, "Moderate", "🟡"),
    (150, "Unhealthy (sensitive)", "🟠"),
    (200, "Unhealthy", "🔴"),
    (300, "Very unhealthy", "🟣"),
)
EU_TOP = ("Extremely poor", "⛔")
US_TOP = ("Hazardous", "⛔")

LABELS = {
    "pm10": "PM₁₀",
    "pm2_5": "PM₂.₅",
    "carbon_monoxide": "CO",
    "nitrogen_dioxide": "NO₂",
    "sulphur_dioxide": "SO₂",
    "ozone": "O₃",
    "carbon_dioxide": "CO₂",
    "ammonia": "NH₃",
    "methane": "CH₄",
    "uv_index": "UV",
    "uv_index_clear_sky": "UV☀",
    "dust": "Dust",
    "aerosol_optical_depth": "AOD",
    "european_aqi": "EU AQI",
    "us_aqi": "US AQI",
    "formaldehyde": "CH₂O",
    "nitrogen_monoxide": "NO",
    "peroxyacyl_nitrates": "PAN",
    "non_methane_volatile_organic_compounds": "NMVOC",
    "pm10_wildfires": "PM₁₀🔥",
    "sea_salt_aerosol": "Sea salt",
}
POLLEN = ("alder", "birch", "grass", "mugwort", "olive", "ragweed")
EU_PARTS = ("pm2_5", "pm10", "nitrogen_dioxide", "ozone", "sulphur_dioxide")
US_PARTS = EU_PARTS + ("carbon_monoxide",)

CURRENT_KNOWN = frozenset(
    {"time", "interval", "european_aqi", "us_aqi", "pm10", "pm2_5", "carbon_monoxide",
     "nitrogen_dioxide", "sulphur_dioxide", "ozone", "carbon_dioxide", "ammonia", "methane",
     "uv_index", "uv_index_clear_sky", "dust", "aerosol_optical_depth"}
    | {f"{p}_pollen" for p in POLLEN}
    | {f"european_aqi_{p}" for p in EU_PARTS}
    | {f"us_aqi_{p}" for p in US_PARTS}
)
HOURLY_KNOWN = frozenset({
    "time", "european_aqi", "us_aqi", "pm10", "pm2_5", "ozone", "nitrogen_dioxide",
    "carbon_monoxide", "sulphur_dioxide", "uv_index",
})


def _band(value: Any, bands: tuple, top: tuple[str, str]) -> tuple[str, str]:
    if value is None:
        return "?", "❓"
    for limit, text, emoji in bands:
        if value <= limit:
            return text, emoji
    return top


def eu_aqi(value: Any) -> tuple[str, str]:
    """(quality text, badge) for a European AQI value."""
    return _band(value, EU_BANDS, EU_TOP)


def us_aqi(value: Any) -> tuple[str, str]:
    return _band(value, US_BANDS, US_TOP)


def label(name: str) -> str:
    if name in LABELS:
        return LABELS[name]
    for prefix, short in (("european_aqi_", "EU "), ("us_aqi_", "US ")):
        if name.startswith(prefix):
            return short + label(name[len(prefix):])
    if name.endswith("_pollen"):
        return name[: -len("_pollen")].capitalize() + "🌿"
    return humanize_key(name)


def _measure(c: dict[str, Any], u: dict[str, str], names: tuple[str, ...], default=UG) -> str:
    return join([
        f"{LABELS[n]} {fmt_num(c[n])} {unit(u, n, default)}" for n in names if c.get(n) is not None
    ])


def _breakdown(c: dict[str, Any], prefix: str, parts: tuple[str, ...]) -> str:
    return join([
        f"{LABELS[p]}:{fmt_num(c[prefix + p])}" for p in parts if c.get(prefix + p) is not None
    ])


def render_aq_current(current: Snapshot) -> list[Text]:
    c, u = current.values, current.units
    lines = [blank(), line(bold("💨 Air Quality"), f" — {c.get('time') or 'now'}")]
    if is_empty(c, [k for k in c if k not in ("time", "interval")]):
        return lines + [blank(), marker("No air quality data at this location")]
    for key, grade in (("european_aqi", eu_aqi), ("us_aqi", us_aqi)):
        if c.get(key) is not None:
            text, emoji = grade(c[key])
            lines.append(line(f"   {emoji} {LABELS[key]}: ", bold(fmt_num(c[key])), f" — {text}"))
    groups = [
        _measure(c, u, ("pm10", "pm2_5")),
        _measure(c, u, ("ozone", "nitrogen_dioxide", "carbon_monoxide", "sulphur_dioxide")),
        join([_measure(c, u, ("carbon_dioxide",), "ppm"), _measure(c, u, ("ammonia", "methane"))]),
    ]
    other: list[str | None] = []
    if c.get("uv_index") is not None:
        clear = c.get("uv_index_clear_sky")
        other.append(
            f"☀️  UV {fmt_num(c['uv_index'])}"
            + (f" (clear sky: {fmt_num(clear)})" if clear is not None else "")
        )
    other.append(_measure(c, u, ("dust",)))
    if c.get("aerosol_optical_depth") is not None:
        other.append(f"AOD {fmt_num(c['aerosol_optical_depth'])}")
    groups.append(join(other))
    lines += [line("   " + g) for g in groups if g]

    pollen = join([
        f"{p.capitalize()} {fmt_num(c[p + '_pollen'])}"
        for p in POLLEN if c.get(f"{p}_pollen") is not None
    ])
    if pollen:
        lines.append(line(f"   🌿 Pollen (grains/m³): {pollen}"))
    for title, prefix, parts in (("EU", "european_aqi_", EU_PARTS), ("US", "us_aqi_", US_PARTS)):
        breakdown = _breakdown(c, prefix, parts)
        if breakdown:
            lines.append(line("   ", dim(f"{title} breakdown: {breakdown}")))
    lines += [
        line(f"   {label(k)}: {fmt_num(v)}")
        for k, v in c.items()
        if k not in CURRENT_KNOWN and v is not None
    ]
    return lines


def _hourly_row(row: dict[str, Any]) -> Text | None:
    segments: list[str | None] = []
    for key, grade, suffix in (("european_aqi", eu_aqi, "EU"), ("us_aqi", us_aqi, "US")):
        if row.get(key) is not None:
            segments.append(f"{grade(row[key])[1]}{fmt_num(row[key])}{suffix}")
    for key in ("pm10", "pm2_5", "ozone", "nitrogen_dioxide", "carbon_monoxide",
                "sulphur_dioxide", "uv_index"):
        if row.get(key) is not None:
            segments.append(f"{LABELS[key]} {fmt_num(row[key])}")
    segments += [
        f"{label(k)} {fmt_num(v)}"
        for k, v in row.items()
        if k not in HOURLY_KNOWN and v is not None
    ]
    content = join(segments)
    if not content:
        return None
    return line("   ", dim(clock(row["time"])), "  " + content)


def render_aq_hourly(series: TimeSeries) -> list[Text]:
    lines: list[Text] = []
    for day, records in group_by_day(zip_series(series, "hourly")):
        rows = [r for r in map(_hourly_row, records) if r is not None]
        lines += [blank(), day_heading(day_label(day))]
        lines += rows or [marker("No air quality data")]
    return lines


def render_air_quality(response: ApiResponse, place: ResolvedLocation | None) -> list[Text]:
    lines = location_header(response, place)
    if response.current is not None:
        lines += render_aq_current(response.current)
    if response.hourly is not None:
        lines += render_aq_hourly(response.hourly)
    return lines
