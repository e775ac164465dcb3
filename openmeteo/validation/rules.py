"""Input validation that collects every error before failing."""

import calendar
import re
from datetime import date

from openmeteo.endpoints.base import EndpointSpec
from openmeteo.errors import ValidationError
from openmeteo.models.common import Category

NUMBER_RE = re.compile(r"^-?[0-9]+\.?[0-9]*$")
INTEGER_RE = re.compile(r"^[0-9]+$")
DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def split_list(value: str | None) -> list[str]:
    """Split a comma list, dropping empty tokens."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Validator:
    """Accumulates validation errors for one invocation.

    Each check returns the parsed value, or None when the input was absent or
    invalid. Call ``raise_if_errors`` once all checks have run.
    """

    def __init__(self) -> None:
        self.errors: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def raise_if_errors(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)

    def number(
        self,
        flag: str,
        value: str | None,
        low: float | None = None,
        high: float | None = None,
    ) -> float | None:
        if value is None or value == "":
            return None
        if not NUMBER_RE.match(value):
            self.error(f"{flag}: '{value}' is not a valid number")
            return None
        number = float(value)
        if low is not None and high is not None and not low <= number <= high:
            self.error(f"{flag}: {value} is out of range ({low:g} to {high:g})")
            return None
        return number

    def latitude(self, value: str | None, flag: str = "--lat") -> float | None:
        return self.number(flag, value, -90, 90)

    def longitude(self, value: str | None, flag: str = "--lon") -> float | None:
        return self.number(flag, value, -180, 180)

    def integer(
        self,
        flag: str,
        value: str | None,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int | None:
        if value is None or value == "":
            return None
        if not INTEGER_RE.match(value):
            self.error(f"{flag}: '{value}' is not a valid integer")
            return None
        number = int(value)
        if minimum is not None and number < minimum:
            self.error(f"{flag}: {value} is below minimum ({minimum})")
            return None
        if maximum is not None and number > maximum:
            self.error(f"{flag}: {value} is above maximum ({maximum})")
            return None
        return number

    def bounded(
        self, flag: str, value: str | None, bounds: tuple[int, int | None] | None
    ) -> int | None:
        low, high = bounds if bounds else (0, None)
        return self.integer(flag, value, low, high)

    def choice(self, flag: str, value: str | None, choices: tuple[str, ...]) -> str | None:
        if value is None or value == "":
            return None
        if value not in choices:
            self.error(f"{flag}: '{value}' is not valid. Must be one of: {', '.join(choices)}")
            return None
        return value

    def iso_date(self, flag: str, value: str | None) -> date | None:
        if value is None or value == "":
            return None
        m = DATE_RE.match(value)
        if not m:
            self.error(
                f"{flag}: '{value}' is not a valid date. Use YYYY-MM-DD format (e.g. 2024-01-15)"
            )
            return None
        year, month, day = (int(g) for g in m.groups())
        if not 1 <= month <= 12:
            self.error(f"{flag}: invalid month '{m.group(2)}' in '{value}'")
            return None
        if not 1 <= day <= calendar.monthrange(year, month)[1]:
            self.error(f"{flag}: invalid day '{m.group(3)}' in '{value}'")
            return None
        return date(year, month, day)

    def date_range(
        self,
        start: str | None,
        end: str | None,
        bounds: tuple[str, str] | None = None,
    ) -> tuple[date | None, date | None]:
        """Check syntax, pairing, ordering and optional bounds of a date range."""
        start_d = self.iso_date("--start-date", start)
        end_d = self.iso_date("--end-date", end)
        if start and not end:
            self.error("--start-date requires --end-date")
        elif end and not start:
            self.error("--end-date requires --start-date")
        if start_d and end_d and start_d > end_d:
            self.error(f"--start-date ({start}) must not be after --end-date ({end})")
        if bounds:
            first, last = bounds
            if start_d and start_d < date.fromisoformat(first):
                self.error(f"--start-date: {start} is before the available range ({first})")
            if end_d and end_d > date.fromisoformat(last):
                self.error(f"--end-date: {end} is after the available range ({last})")
        return start_d, end_d

    def models(self, flag: str, value: str | None, spec: EndpointSpec) -> list[str]:
        names = split_list(value)
        if not spec.models:
            return names
        valid = []
        for name in names:
            if name in spec.models:
                valid.append(name)
            else:
                self.error(
                    f"{flag}: '{name}' is not a valid {spec.model_kind} model. "
                    f"Valid models: {', '.join(spec.models)}"
                )
        return valid

    def variables(self, spec: EndpointSpec, category: Category, value: str | None) -> list[str]:
        """Check a variable list against the endpoint's suggestion rules.

        Names no rule recognises are passed through for the upstream API to
        judge.
        """
        names = split_list(value)
        if not names:
            return []
        if category in spec.unsupported:
            self.error(f"{category.flag}: {spec.unsupported[category]}")
            return []
        for name in names:
            suggestion = spec.suggest(category, name)
            if suggestion:
                self.error(f"{category.flag}: '{name}' is {suggestion}")
        return names
