"""Geocoding API (openmeteo geo and city resolution)."""

from openmeteo.endpoints.base import EndpointSpec

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"

GEOCODING = EndpointSpec(
    name="geo",
    title="Search locations by name (Geocoding API)",
    base_url=GEOCODING_URL,
)
