"""What a renderer needs to know about one completed request."""

from dataclasses import dataclass

from openmeteo.models.location import ResolvedLocation
from openmeteo.models.response import ApiResponse


@dataclass(frozen=True)
class View:
    command: str
    response: ApiResponse
    place: ResolvedLocation | None = None
    variables: tuple[str, ...] = ()
    models: tuple[str, ...] = ()
    start_date: str | None = None
    end_date: str | None = None
    # elevation lookups echo the requested coordinates
    latitudes: tuple[float, ...] = ()
    longitudes: tuple[float, ...] = ()

    @property
    def results(self) -> list[dict]:
        """Geocoding search results."""
        return [r for r in self.response.body.get("results") or [] if isinstance(r, dict)]

    @property
    def elevations(self) -> list:
        values = self.response.body.get("elevation")
        return values if isinstance(values, list) else []
