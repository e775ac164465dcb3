"""City name to coordinates via the Geocoding API."""

import logging

from openmeteo.endpoints.geocoding import GEOCODING_URL
from openmeteo.errors import ResolutionError
from openmeteo.ingest.client import OpenMeteoClient
from openmeteo.models.location import ResolvedLocation

logger = logging.getLogger(__name__)


def search_params(
    name: str,
    count: int = 1,
    language: str = "en",
    country: str | None = None,
) -> dict[str, str | None]:
    return {
        "name": name,
        "count": str(count),
        "language": language,
        "format": "json",
        "countryCode": country,
    }


class LocationResolver:
    def __init__(self, client: OpenMeteoClient):
        self.client = client

    def search(
        self,
        name: str,
        count: int = 1,
        language: str = "en",
        country: str | None = None,
    ) -> list[dict]:
        response = self.client.get(GEOCODING_URL, search_params(name, count, language, country))
        results = response.body.get("results") or []
        return [r for r in results if isinstance(r, dict)]

    def resolve(self, city: str, country: str | None = None) -> ResolvedLocation:
        """Resolve ``city`` to its top geocoding match.

        A country filter that matches nothing is retried once without the
        filter; a hit on the retry is used with a single warning.
        """
        results = self.search(city, country=country)
        if not results and country:
            results = self.search(city)
            if results:
                top = results[0]
                logger.warning(
                    "no match for '%s' in country '%s', using '%s, %s' instead. "
                    "Country filters take ISO 3166-1 alpha-2 codes (e.g. GB, DE, US)",
                    city, country, top.get("name", city), top.get("country_code", "?"),
                )
        if not results:
            where = f" (country: {country})" if country else ""
            raise ResolutionError(f"location not found: '{city}'{where}")

        top = results[0]
        try:
            location = ResolvedLocation(
                latitude=float(top["latitude"]),
                longitude=float(top["longitude"]),
                name=top.get("name") or city,
                country=top.get("country") or "",
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ResolutionError(f"failed to resolve coordinates for '{city}'") from e
        logger.debug(
            "resolved '%s' -> %s (%s, %s)",
            city, location.label, location.latitude, location.longitude,
        )
        return location
