"""Pick a renderer for the output format and write the result to stdout."""

from typing import TextIO

from rich.console import Console
from rich.json import JSON
from rich.text import Text

from openmeteo.config.schema import OutputFormat
from openmeteo.models.reporting import View
from openmeteo.reporting import compact, porcelain
from openmeteo.reporting.human.air_quality import render_air_quality
from openmeteo.reporting.human.flood import render_flood
from openmeteo.reporting.human.forecast import render_history, render_weather
from openmeteo.reporting.human.marine import render_marine
from openmeteo.reporting.human.multi_model import render_climate, render_ensemble
from openmeteo.reporting.human.places import render_elevation, render_geo
from openmeteo.reporting.human.satellite import render_satellite
from openmeteo.reshape.aggregate import SourceMap


def _human(view: View) -> list[Text]:
    response, place = view.response, view.place
    match view.command:
        case "weather":
            return render_weather(response, place)
        case "history":
            return render_history(response, place, view.start_date, view.end_date)
        case "ensemble":
            return render_ensemble(response, place, SourceMap(view.variables, view.models))
        case "climate":
            sources = SourceMap(view.variables, view.models)
            return render_climate(response, place, sources, view.start_date, view.end_date)
        case "marine":
            return render_marine(response, place)
        case "air-quality":
            return render_air_quality(response, place)
        case "flood":
            return render_flood(response, place)
        case "satellite":
            return render_satellite(response, place)
        case "geo":
            return render_geo(view.results)
        case "elevation":
            return render_elevation(
                list(view.latitudes), list(view.longitudes), view.elevations, place
            )
    raise ValueError(f"no human renderer for {view.command!r}")


def _porcelain(view: View) -> list[str]:
    if view.command == "geo":
        return porcelain.geo_lines(view.results)
    if view.command == "elevation":
        return porcelain.elevation_lines(
            list(view.latitudes), list(view.longitudes), view.elevations
        )
    return porcelain.render_porcelain(view.response)


def _compact(view: View) -> list[str]:
    if view.command == "geo":
        return compact.render_geo_compact(view.results)
    if view.command == "elevation":
        return compact.render_elevation_compact(
            list(view.latitudes), list(view.longitudes), view.elevations
        )
    return compact.render_compact(view.response, view.place)


def render_lines(view: View, fmt: OutputFormat) -> list[Text] | list[str]:
    match fmt:
        case OutputFormat.HUMAN:
            return _human(view)
        case OutputFormat.PORCELAIN:
            return _porcelain(view)
        case OutputFormat.LLM:
            return _compact(view)
        case OutputFormat.RAW:
            return [view.response.text.rstrip("\n")]


def render_text(view: View, fmt: OutputFormat) -> str:
    """Uncoloured output as one string."""
    return "\n".join(
        line.plain if isinstance(line, Text) else line for line in render_lines(view, fmt)
    )


def make_console(file: TextIO, color: bool) -> Console:
    return Console(
        file=file,
        color_system="auto" if color else None,
        force_terminal=True if color else None,
        highlight=False,
        soft_wrap=True,
        emoji=False,
        markup=False,
    )


def emit(view: View, fmt: OutputFormat, file: TextIO, color: bool = False) -> None:
    if fmt is OutputFormat.RAW:
        if color:
            make_console(file, color).print(JSON(view.response.text))
        else:
            file.write(view.response.text.rstrip("\n") + "\n")
        return
    if fmt is not OutputFormat.HUMAN:
        file.write(render_text(view, fmt) + "\n")
        return
    console = make_console(file, color)
    for line in render_lines(view, fmt):
        console.print(line)
