"""Command pipeline: resolve location, fetch, and describe the result for rendering."""

import logging
from typing import TextIO

from openmeteo.config.schema import AppConfig
from openmeteo.errors import ResolutionError
from openmeteo.ingest.client import OpenMeteoClient
from openmeteo.ingest.geocoder import LocationResolver
from openmeteo.models.reporting import View
from openmeteo.models.request import ParsedRequest
from openmeteo.reporting.render import emit
from openmeteo.validation.rules import split_list

logger = logging.getLogger(__name__)


class CommandPipeline:
    def __init__(self, config: AppConfig, client: OpenMeteoClient | None = None):
        self.config = config
        self.client = client or OpenMeteoClient(api_key=config.api_key)
        self.resolver = LocationResolver(self.client)

    def fetch(self, request: ParsedRequest) -> View:
        """Resolve the city if needed, issue the request and wrap the response.

        At most two geocoding calls (the country-filter fallback) precede the
        single data request.
        """
        if request.needs_resolution:
            request = request.with_location(self.resolver.resolve(request.city, request.country))

        response = self.client.get(request.base_url, request.query())

        if request.command == "geo" and not response.body.get("results"):
            query, country = request.options.get("name"), request.options.get("countryCode")
            where = f" (country: {country})" if country else ""
            raise ResolutionError(f"no results found for '{query}'{where}")

        variables = [name for names in request.variables.values() for name in names]
        latitudes = longitudes = ()
        if request.command == "elevation":
            latitudes = tuple(float(x) for x in split_list(request.latitude))
            longitudes = tuple(float(x) for x in split_list(request.longitude))

        return View(
            command=request.command,
            response=response,
            place=request.place,
            variables=tuple(dict.fromkeys(variables)),
            models=request.models,
            start_date=request.start_date,
            end_date=request.end_date,
            latitudes=latitudes,
            longitudes=longitudes,
        )

    def run(self, request: ParsedRequest, out: TextIO) -> int:
        view = self.fetch(request)
        emit(view, self.config.output_format, out, color=self.config.color)
        return 0
