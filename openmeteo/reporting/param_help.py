"""Variable reference (``openmeteo <command> help --hourly-params``) in every format."""

import json

from openmeteo.config.schema import OutputFormat
from openmeteo.endpoints.base import EndpointSpec
from openmeteo.errors import UsageError
from openmeteo.models.common import Category

NAME_WIDTH = 30


def _groups(spec: EndpointSpec, category: Category):
    groups = spec.catalog.get(category)
    if not groups:
        raise UsageError(
            f"'{spec.name}' has no {category.value} variables", command=spec.name
        )
    return groups


def _human(spec: EndpointSpec, category: Category) -> list[str]:
    groups = _groups(spec, category)
    lines = [f"{category.value.capitalize()} variables for 'openmeteo {spec.name}':", ""]
    for group in groups:
        if group.title:
            lines.append(f"{group.title}:")
        for v in group.variables:
            lines.append(f"  {v.name:<{NAME_WIDTH - 1}} {v.description}".rstrip())
        lines.append("")
    note = spec.notes.get(category)
    if note:
        lines += [f"Note: {note}", ""]
    example = [v.name for g in groups for v in g.variables][:3]
    lines.append(f"Usage: {category.flag}={','.join(example)}")
    return lines


def render_param_help(spec: EndpointSpec, category: Category, fmt: OutputFormat) -> str:
    """Raises UsageError when the endpoint has no variables of ``category``."""
    if fmt is OutputFormat.HUMAN:
        return "\n".join(_human(spec, category))
    entries = [(g.title, v) for g in _groups(spec, category) for v in g.variables]
    if fmt is OutputFormat.PORCELAIN:
        return "\n".join(f"{v.name}={v.description}" for _, v in entries)
    if fmt is OutputFormat.LLM:
        rows = [f"{v.name}\t{title}\t{v.description}" for title, v in entries]
        return "\n".join(["variable\tgroup\tdescription", *rows])
    return json.dumps(
        [{"name": v.name, "group": title, "description": v.description} for title, v in entries],
        indent=2,
        ensure_ascii=False,
    )
