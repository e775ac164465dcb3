"""Elevation API (openmeteo elevation)."""

from openmeteo.endpoints.base import EndpointSpec

ELEVATION_URL = "https://api.open-meteo.com/v1/elevation"
MAX_COORDINATES = 100

ELEVATION = EndpointSpec(
    name="elevation",
    title="Terrain elevation lookup (Elevation API)",
    base_url=ELEVATION_URL,
)
