"""Lookup of endpoint descriptors by command name."""

from openmeteo.endpoints.air_quality import AIR_QUALITY
from openmeteo.endpoints.archive import ARCHIVE
from openmeteo.endpoints.base import EndpointSpec
from openmeteo.endpoints.climate import CLIMATE
from openmeteo.endpoints.elevation import ELEVATION
from openmeteo.endpoints.ensemble import ENSEMBLE
from openmeteo.endpoints.flood import FLOOD
from openmeteo.endpoints.forecast import FORECAST
from openmeteo.endpoints.geocoding import GEOCODING
from openmeteo.endpoints.marine import MARINE
from openmeteo.endpoints.satellite import SATELLITE

ENDPOINTS: dict[str, EndpointSpec] = {
    spec.name: spec
    for spec in (
        FORECAST, GEOCODING, ARCHIVE, ENSEMBLE, CLIMATE, MARINE,
        AIR_QUALITY, FLOOD, ELEVATION, SATELLITE,
    )
}
