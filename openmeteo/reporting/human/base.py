"""Building blocks shared by the human renderers."""

from typing import Any

from rich.text import Text

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse
from openmeteo.reporting.symbols import fmt_coords, fmt_num, humanize_key

NO_DATA = "no data"

Part = str | tuple[str, str]


def line(*parts: Part) -> Text:
    return Text.assemble(*[p for p in parts if p])


def bold(text: str) -> tuple[str, str]:
    return (text, "bold")


def dim(text: str) -> tuple[str, str]:
    return (text, "dim")


def blank() -> Text:
    return Text("")


def heading(text: str) -> Text:
    return line(bold(text))


def day_heading(text: str) -> Text:
    return line(("📅 " + text, "bold blue"))


def marker(text: str = NO_DATA, indent: str = "   ") -> Text:
    return line(indent, dim(text))


def join(parts: list[str | None], sep: str = " · ") -> str:
    return sep.join(p for p in parts if p)


def extras(record: dict[str, Any], known: set[str] | frozenset[str], sep: str = ", ") -> str:
    """Variables no formatter claims, shown by name so nothing is dropped."""
    return sep.join(
        f"{humanize_key(k)}: {fmt_num(v)}" for k, v in record.items() if k not in known
    )


def location_header(
    response: ApiResponse,
    place: ResolvedLocation | None,
    emoji: str = "🌍",
    timezone: bool = True,
    elevation: bool = True,
) -> list[Text]:
    """'🌍 Berlin, Germany · 52.52°N, 13.41°E' plus timezone/elevation line."""
    name = place.label if place else ""
    coords = ""
    if response.latitude is not None and response.longitude is not None:
        coords = fmt_coords(response.latitude, response.longitude)
    first = line(f"{emoji} ", bold(name) if name else "", " · " if name and coords else "", coords)
    details = []
    if timezone:
        zone = response.timezone or "GMT"
        if response.timezone_abbreviation:
            zone += f" ({response.timezone_abbreviation})"
        details.append(zone)
    if elevation and response.elevation is not None:
        details.append(f"Elevation: {fmt_num(response.elevation)}m")
    if not details:
        return [first]
    return [first, line(dim("   " + " · ".join(details)))]


def unit(units: dict[str, str], name: str, default: str = "") -> str:
    return units.get(name, default)
