"""Column-to-row reshaping of hourly/daily sections."""

from itertools import groupby
from typing import Any

from openmeteo.errors import MalformedResponseError
from openmeteo.models.response import TimeSeries

Record = dict[str, Any]


def zip_series(series: TimeSeries, section: str = "section") -> list[Record]:
    """Turn parallel arrays into one record per time step.

    Every column must be exactly as long as ``time``.
    """
    n = len(series.time)
    for name, values in series.columns.items():
        if len(values) != n:
            raise MalformedResponseError(
                f"{section}.{name} has {len(values)} values but {section}.time has {n}"
            )
    return [
        {"time": t, **{name: values[i] for name, values in series.columns.items()}}
        for i, t in enumerate(series.time)
    ]


def day_of(record: Record) -> str:
    return str(record["time"])[:10]


def group_by_day(records: list[Record]) -> list[tuple[str, list[Record]]]:
    """Group consecutive records by calendar day, keeping input order."""
    return [(day, list(rows)) for day, rows in groupby(records, key=day_of)]


def is_empty(record: Record, keys: list[str] | None = None) -> bool:
    """True when every non-time value (or every value in ``keys``) is null."""
    names = keys if keys is not None else [k for k in record if k != "time"]
    return all(record.get(k) is None for k in names)
