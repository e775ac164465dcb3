"""Statistics across models or ensemble members, and period rollups."""

import calendar
import math
import re
from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Any

from openmeteo.models.response import TimeSeries
from openmeteo.reshape.zipper import zip_series

_MEMBER_RE = re.compile(r"^member(\d+)(?:_(.+))?$")


def round_half_away(value: float, digits: int) -> float:
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Source:
    variable: str
    model: str | None = None
    member: int | None = None


class SourceMap:
    """Associates response columns with the variables and models requested.

    Recognised columns are ``<var>``, ``<var>_<model>``, ``<var>_memberNN``
    and ``<var>_memberNN_<model>``. Anything else is its own group.
    """

    def __init__(self, variables: list[str], models: tuple[str, ...] | list[str] = ()):
        # longest first so temperature_2m_max is tried before temperature_2m
        self.variables = sorted(set(variables), key=len, reverse=True)
        self.models = tuple(models)

    def source(self, column: str) -> Source | None:
        for variable in self.variables:
            if column == variable:
                return Source(variable)
            if not column.startswith(variable + "_"):
                continue
            rest = column[len(variable) + 1:]
            if rest in self.models:
                return Source(variable, model=rest)
            m = _MEMBER_RE.match(rest)
            if m and (m.group(2) is None or m.group(2) in self.models):
                return Source(variable, model=m.group(2), member=int(m.group(1)))
        return None

    def group(self, columns: list[str]) -> dict[str, list[str]]:
        groups: dict[str, list[str]] = {}
        for column in columns:
            source = self.source(column)
            key = source.variable if source else column
            groups.setdefault(key, []).append(column)
        return groups

    def member_columns(self, columns: list[str]) -> dict[str, list[str]]:
        """Only the ``memberNN`` columns, grouped by variable."""
        groups: dict[str, list[str]] = {}
        for column in columns:
            source = self.source(column)
            if source and source.member is not None:
                groups.setdefault(source.variable, []).append(column)
        return groups


@dataclass(frozen=True)
class AggregatedStat:
    mean: float
    min: float
    max: float
    n: int
    median: float | None = None
    mode: float | None = None


def _numbers(values: list[Any]) -> list[float]:
    return [
        v for v in values
        if isinstance(v, (int, float)) and not isinstance(v, bool) and not math.isnan(v)
    ]


def median(values: list[float]) -> float:
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def mode(values: list[float]) -> float:
    counts = Counter(values)
    best = max(counts.values())
    return min(v for v, c in counts.items() if c == best)


def percentile(ordered: list[float], q: float) -> float:
    return ordered[min(int(len(ordered) * q), len(ordered) - 1)]


def aggregate(
    values: list[Any],
    digits: int = 1,
    with_median: bool = False,
    with_mode: bool = False,
) -> AggregatedStat | None:
    """Mean/min/max (and optionally median and mode) over non-null values.

    Returns None only when no value is numeric.
    """
    nums = _numbers(values)
    if not nums:
        return None

    def r(v: float) -> float:
        return round_half_away(v, digits)

    return AggregatedStat(
        mean=r(sum(nums) / len(nums)),
        min=r(min(nums)),
        max=r(max(nums)),
        n=len(nums),
        median=r(median(nums)) if with_median else None,
        mode=mode(nums) if with_mode else None,
    )


@dataclass(frozen=True)
class AggregatedRecord:
    time: str
    stats: dict[str, AggregatedStat | None]


def aggregate_series(
    series: TimeSeries,
    sources: SourceMap,
    section: str = "daily",
    digits: int = 1,
    with_median: bool = False,
) -> list[AggregatedRecord]:
    """Collapse every group of model/member columns into one stat per step."""
    records = zip_series(series, section)
    groups = sources.group(list(series.columns))
    return [
        AggregatedRecord(
            time=record["time"],
            stats={
                variable: aggregate(
                    [record[c] for c in columns],
                    digits=digits,
                    with_median=with_median,
                    with_mode="weather_code" in variable,
                )
                for variable, columns in groups.items()
            },
        )
        for record in records
    ]


class Tier(StrEnum):
    DAILY = "daily"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def choose_tier(days: int) -> Tier:
    if days <= 31:
        return Tier.DAILY
    if days <= 730:
        return Tier.MONTHLY
    return Tier.YEARLY


@dataclass(frozen=True)
class Period:
    key: str
    label: str
    days: int
    stats: dict[str, AggregatedStat | None]


def _period_label(key: str, tier: Tier) -> str:
    if tier is Tier.MONTHLY:
        year, month = key.split("-")
        return f"{calendar.month_name[int(month)]} {year}"
    return key


def _combine(
    stats: list[AggregatedStat | None], summed: bool, digits: int
) -> AggregatedStat | None:
    present = [s for s in stats if s is not None]
    if not present:
        return None

    def r(v: float) -> float:
        return round_half_away(v, digits)

    if summed:
        return AggregatedStat(
            mean=r(sum(s.mean for s in present)),
            min=r(sum(s.min for s in present)),
            max=r(sum(s.max for s in present)),
            n=present[0].n,
        )
    return AggregatedStat(
        mean=r(sum(s.mean for s in present) / len(present)),
        min=r(min(s.min for s in present)),
        max=r(max(s.max for s in present)),
        n=present[0].n,
    )


def rollup(records: list[AggregatedRecord], tier: Tier, digits: int = 1) -> list[Period]:
    """Re-bucket daily aggregates into months or years.

    ``_sum`` variables add up per-day values; everything else takes the mean
    of means, the min of mins and the max of maxes.
    """
    width = 7 if tier is Tier.MONTHLY else 4
    buckets: dict[str, list[AggregatedRecord]] = {}
    for record in records:
        buckets.setdefault(record.time[:width], []).append(record)

    periods = []
    for key, members in buckets.items():
        variables = list(members[0].stats)
        periods.append(
            Period(
                key=key,
                label=_period_label(key, tier),
                days=len(members),
                stats={
                    v: _combine([m.stats.get(v) for m in members], v.endswith("_sum"), digits)
                    for v in variables
                },
            )
        )
    return periods


@dataclass(frozen=True)
class MemberStats:
    mean: float
    median: float
    min: float
    max: float
    p25: float
    p75: float
    count: int


def member_stats(values: list[Any], digits: int = 2) -> MemberStats | None:
    """Distribution of ensemble member values at one time step."""
    nums = sorted(_numbers(values))
    if not nums:
        return None

    def r(v: float) -> float:
        return round_half_away(v, digits)

    return MemberStats(
        mean=r(sum(nums) / len(nums)),
        median=r(median(nums)),
        min=nums[0],
        max=nums[-1],
        p25=r(percentile(nums, 0.25)),
        p75=r(percentile(nums, 0.75)),
        count=len(nums),
    )
