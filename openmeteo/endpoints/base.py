"""Static per-endpoint descriptors: variable catalogs, defaults and suggestion rules."""

from dataclasses import dataclass, field
from fnmatch import fnmatchcase

from openmeteo.models.common import Category


@dataclass(frozen=True)
class Variable:
    name: str
    description: str


@dataclass(frozen=True)
class VariableGroup:
    title: str
    variables: tuple[Variable, ...]


@dataclass(frozen=True)
class SuggestionRule:
    """Maps a misplaced variable name to a corrective message.

    ``targets`` lists the replacement names the message recommends; each must
    exist in the endpoint's catalog for ``category``.
    """

    category: Category
    patterns: tuple[str, ...]
    message: str
    targets: tuple[str, ...] = ()

    def matches(self, name: str) -> bool:
        return any(fnmatchcase(name, p) for p in self.patterns)


@dataclass(frozen=True)
class EndpointSpec:
    name: str
    title: str
    base_url: str
    catalog: dict[Category, tuple[VariableGroup, ...]] = field(default_factory=dict)
    defaults: dict[Category, tuple[str, ...]] = field(default_factory=dict)
    suggestions: tuple[SuggestionRule, ...] = ()
    models: tuple[str, ...] = ()
    model_kind: str = ""
    forecast_days: tuple[int, int] | None = None
    past_days: tuple[int, int | None] | None = None
    date_bounds: tuple[str, str] | None = None
    unsupported: dict[Category, str] = field(default_factory=dict)
    notes: dict[Category, str] = field(default_factory=dict)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(c for c in Category if c in self.catalog)

    def known(self, category: Category) -> frozenset[str]:
        return frozenset(
            v.name for group in self.catalog.get(category, ()) for v in group.variables
        )

    def suggest(self, category: Category, name: str) -> str | None:
        for rule in self.suggestions:
            if rule.category is category and rule.matches(name):
                return rule.message
        return None


def parse_catalog(text: str) -> tuple[VariableGroup, ...]:
    """Build variable groups from an indented reference table.

    A line ending in ':' starts a group; indented lines are
    ``name  description`` pairs. Entries before any heading go in an
    untitled group.
    """
    groups: list[VariableGroup] = []
    title = ""
    current: list[Variable] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if not line.startswith(" ") and line.rstrip().endswith(":"):
            if current:
                groups.append(VariableGroup(title, tuple(current)))
            title, current = line.strip()[:-1], []
            continue
        name, _, description = line.strip().partition(" ")
        current.append(Variable(name, description.strip()))
    if current:
        groups.append(VariableGroup(title, tuple(current)))
    return tuple(groups)


def rule(category: Category, patterns: str, message: str, *targets: str) -> SuggestionRule:
    """Shorthand: ``patterns`` is a '|'-separated list of glob patterns."""
    return SuggestionRule(category, tuple(patterns.split("|")), message, targets)


def use(*names: str, prefix: str = "not a daily variable. Use ", suffix: str = "") -> str:
    quoted = [f"'{n}'" for n in names]
    if len(quoted) == 1:
        joined = quoted[0]
    elif len(quoted) == 2:
        joined = f"{quoted[0]} and/or {quoted[1]}"
    else:
        joined = ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
    return f"{prefix}{joined}{suffix}"


def redirect(
    category: Category,
    patterns: str,
    *targets: str,
    prefix: str = "not a daily variable. Use ",
    suffix: str = "",
) -> SuggestionRule:
    """A rule whose message recommends ``targets`` by name."""
    return rule(category, patterns, use(*targets, prefix=prefix, suffix=suffix), *targets)
