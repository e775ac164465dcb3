"""Tests for city name resolution."""

import logging

import pytest
import respx
from httpx import Response

from openmeteo.endpoints.geocoding import GEOCODING_URL
from openmeteo.errors import ResolutionError
from openmeteo.ingest.client import OpenMeteoClient
from openmeteo.ingest.geocoder import LocationResolver, search_params
from openmeteo.tests.helpers import load_fixture


@pytest.fixture
def resolver(tmp_path) -> LocationResolver:
    return LocationResolver(OpenMeteoClient(temp_dir=tmp_path))


class TestSearchParams:
    def test_country_optional(self):
        assert search_params("Paris")["countryCode"] is None
        assert search_params("Paris", country="FR")["countryCode"] == "FR"


class TestResolve:
    @respx.mock
    def test_top_match(self, resolver):
        route = respx.get(GEOCODING_URL).mock(
            return_value=Response(200, json=load_fixture("geocoding_london.json"))
        )
        location = resolver.resolve("London", "GB")
        assert (location.latitude, location.longitude) == (51.50853, -0.12574)
        assert location.label == "London, United Kingdom"
        assert route.call_count == 1
        params = route.calls.last.request.url.params
        assert params["countryCode"] == "GB"
        assert params["count"] == "1"

    @respx.mock
    def test_country_fallback_warns_once(self, resolver, caplog):
        route = respx.get(GEOCODING_URL).mock(side_effect=[
            Response(200, json={"generationtime_ms": 0.1}),
            Response(200, json=load_fixture("geocoding_london.json")),
        ])
        with caplog.at_level(logging.WARNING, logger="openmeteo"):
            location = resolver.resolve("London", "UK")
        assert location.name == "London"
        assert route.call_count == 2
        assert "countryCode" not in route.calls.last.request.url.params
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "no match for 'London' in country 'UK', using 'London, GB' instead" in (
            warnings[0].getMessage()
        )

    @respx.mock
    def test_not_found(self, resolver):
        respx.get(GEOCODING_URL).mock(return_value=Response(200, json={}))
        expected = r"location not found: 'Atlantis' \(country: GR\)"
        with pytest.raises(ResolutionError, match=expected):
            resolver.resolve("Atlantis", "GR")

    @respx.mock
    def test_not_found_without_country_searches_once(self, resolver):
        route = respx.get(GEOCODING_URL).mock(return_value=Response(200, json={"results": []}))
        with pytest.raises(ResolutionError) as exc:
            resolver.resolve("Atlantis")
        assert str(exc.value) == "location not found: 'Atlantis'"
        assert exc.value.exit_code == 1
        assert route.call_count == 1

    @respx.mock
    def test_result_without_coordinates(self, resolver):
        respx.get(GEOCODING_URL).mock(
            return_value=Response(200, json={"results": [{"name": "Nowhere"}]})
        )
        with pytest.raises(ResolutionError, match="failed to resolve coordinates"):
            resolver.resolve("Nowhere")
