"""Shared labels, emoji and value formatting for all renderers."""

from datetime import date
from typing import Any

WMO_TEXT = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Rime fog",
    51: "Light drizzle",
    53: "Drizzle",
    55: "Dense drizzle",
    56: "Lt. freezing drizzle",
    57: "Freezing drizzle",
    61: "Light rain",
    63: "Rain",
    65: "Heavy rain",
    66: "Lt. freezing rain",
    67: "Freezing rain",
    71: "Light snow",
    73: "Snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Light showers",
    81: "Showers",
    82: "Heavy showers",
    85: "Light snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "T-storm, light hail",
    99: "T-storm, heavy hail",
}

COMPASS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def _code(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def wmo_text(value: Any) -> str:
    code = _code(value)
    if code is None:
        return "?"
    return WMO_TEXT.get(code, f"WMO {fmt_value(value)}")


def wmo_emoji(value: Any) -> str:
    code = _code(value)
    if code is None:
        return " "
    if code == 0:
        return "☀️"
    if code == 1:
        return "🌤"
    if code == 2:
        return "⛅"
    if code == 3:
        return "☁️"
    if code in (45, 48):
        return "🌫"
    if 51 <= code <= 57 or 61 <= code <= 67:
        return "🌧"
    if 71 <= code <= 77 or 85 <= code <= 86:
        return "🌨"
    if 80 <= code <= 82:
        return "🌦"
    if code >= 95:
        return "⛈"
    return "❓"


def wind_dir(degrees: Any) -> str:
    if degrees is None:
        return "?"
    return COMPASS[int(((float(degrees) % 360) + 22.5) // 45) % 8]


def fmt_value(value: Any) -> str:
    """Render a JSON scalar or list the way the porcelain format expects.

    Null becomes the empty string, integral floats drop their ``.0`` and
    lists are comma-joined.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, list):
        return ",".join(fmt_value(v) for v in value)
    return str(value)


def fmt_num(value: Any, missing: str = "—") -> str:
    return missing if value is None else fmt_value(value)


def round2(value: float) -> float:
    return round(float(value), 2)


def fmt_coords(latitude: float, longitude: float) -> str:
    ns = "N" if latitude >= 0 else "S"
    ew = "E" if longitude >= 0 else "W"
    return f"{fmt_value(round2(abs(latitude)))}°{ns}, {fmt_value(round2(abs(longitude)))}°{ew}"


def day_label(iso: str) -> str:
    """'2024-01-15' -> 'Mon Jan 15, 2024'; unparseable input is returned as is."""
    try:
        d = date.fromisoformat(iso[:10])
    except ValueError:
        return iso
    return d.strftime("%a %b %d, %Y")


def clock(iso: Any) -> str:
    return str(iso)[11:16] if iso else "?"


def humanize_key(key: str) -> str:
    return key.replace("_", " ")


def fmt_duration(seconds: Any) -> str:
    if seconds is None:
        return "—"
    total = int(round(float(seconds)))
    hours, minutes = divmod(total // 60, 60)
    return f"{hours}h {minutes}m"
