"""Validated request parameters for one invocation."""

from dataclasses import dataclass, field, replace

from openmeteo.models.common import Category
from openmeteo.models.location import ResolvedLocation


@dataclass(frozen=True)
class ParsedRequest:
    """Everything needed to build the upstream query.

    ``options`` keeps insertion order, which is the order the query string
    is emitted in. Empty values are dropped when the query is built.
    """

    command: str
    base_url: str
    latitude: str | None = None
    longitude: str | None = None
    city: str | None = None
    country: str | None = None
    variables: dict[Category, list[str]] = field(default_factory=dict)
    options: dict[str, str | None] = field(default_factory=dict)
    models: tuple[str, ...] = ()
    place: ResolvedLocation | None = None

    @property
    def start_date(self) -> str | None:
        return self.options.get("start_date")

    @property
    def end_date(self) -> str | None:
        return self.options.get("end_date")

    @property
    def needs_resolution(self) -> bool:
        return self.latitude is None and bool(self.city)

    def with_location(self, location: ResolvedLocation) -> "ParsedRequest":
        return replace(
            self,
            latitude=str(location.latitude),
            longitude=str(location.longitude),
            place=location,
        )

    def query(self) -> dict[str, str]:
        params: dict[str, str | None] = {
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        for category in Category:
            names = self.variables.get(category)
            if names:
                params[category.value] = ",".join(names)
        params.update(self.options)
        return {k: v for k, v in params.items() if v is not None and v != ""}
