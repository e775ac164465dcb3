"""Tests for the HTTP client."""

from pathlib import Path

import httpx
import pytest
import respx
from httpx import Response

from openmeteo.endpoints.forecast import FORECAST_URL
from openmeteo.errors import MalformedResponseError, NetworkError, UpstreamError
from openmeteo.ingest.client import OpenMeteoClient, mask_api_key

REASON = "Cannot initialize WeatherVariable from invalid String value foo"


@pytest.fixture
def client(tmp_path: Path) -> OpenMeteoClient:
    return OpenMeteoClient(temp_dir=tmp_path)


class TestBuildUrl:
    def test_drops_empty_params(self):
        url = OpenMeteoClient().build_url(
            FORECAST_URL, {"latitude": "52.52", "timezone": "", "models": None, "hourly": "a,b"}
        )
        assert url == f"{FORECAST_URL}?latitude=52.52&hourly=a,b"

    def test_api_key_switches_host(self):
        url = OpenMeteoClient(api_key="secret").build_url(FORECAST_URL, {"latitude": "1"})
        assert url == "https://customer-api.open-meteo.com/v1/forecast?latitude=1&apikey=secret"

    def test_prefix_not_doubled(self):
        client = OpenMeteoClient(api_key="k")
        url = client.build_url("https://customer-api.open-meteo.com/v1/forecast", {})
        assert url.startswith("https://customer-api.open-meteo.com/")

    def test_no_params(self):
        assert OpenMeteoClient().build_url(FORECAST_URL, {}) == FORECAST_URL

    def test_mask(self):
        assert mask_api_key("https://x/y?a=1&apikey=secret&b=2") == "https://x/y?a=1&apikey=***&b=2"


class TestFetch:
    @respx.mock
    def test_success(self, client, tmp_path):
        respx.get(FORECAST_URL).mock(return_value=Response(200, json={"latitude": 1.0}))
        response = client.get(FORECAST_URL, {"latitude": "1"})
        assert response.latitude == 1.0
        assert list(tmp_path.iterdir()) == []

    @respx.mock
    def test_sends_user_agent(self, client):
        route = respx.get(FORECAST_URL).mock(return_value=Response(200, json={}))
        client.fetch(FORECAST_URL)
        assert route.calls.last.request.headers["User-Agent"] == "openmeteo-cli/1.1.0"

    @respx.mock
    def test_upstream_reason(self, client, tmp_path):
        respx.get(FORECAST_URL).mock(return_value=Response(
            400, json={"error": True, "reason": REASON}
        ))
        with pytest.raises(UpstreamError) as exc:
            client.fetch(FORECAST_URL)
        assert exc.value.status_code == 400
        assert "invalid String value foo" in str(exc.value)
        assert exc.value.exit_code == 2
        assert list(tmp_path.iterdir()) == []

    @respx.mock
    def test_upstream_without_reason_echoes_body(self, client):
        respx.get(FORECAST_URL).mock(return_value=Response(503, text="Service Unavailable"))
        with pytest.raises(UpstreamError, match="Service Unavailable"):
            client.fetch(FORECAST_URL)

    @respx.mock
    def test_network_error(self, client, tmp_path):
        respx.get(FORECAST_URL).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(NetworkError) as exc:
            client.fetch(FORECAST_URL)
        assert exc.value.exit_code == 2
        assert FORECAST_URL in str(exc.value)
        assert list(tmp_path.iterdir()) == []

    @respx.mock
    def test_timeout_is_network_error(self, client):
        respx.get(FORECAST_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(NetworkError):
            client.fetch(FORECAST_URL)

    @respx.mock
    def test_no_retry(self, client):
        route = respx.get(FORECAST_URL).mock(return_value=Response(500, text="boom"))
        with pytest.raises(UpstreamError):
            client.fetch(FORECAST_URL)
        assert route.call_count == 1

    @respx.mock
    def test_malformed_body(self, client):
        respx.get(FORECAST_URL).mock(return_value=Response(200, text="<html>"))
        with pytest.raises(MalformedResponseError):
            client.get(FORECAST_URL, {})

    @respx.mock
    def test_api_key_not_logged(self, tmp_path, caplog):
        respx.get("https://customer-api.open-meteo.com/v1/forecast").mock(
            return_value=Response(200, json={})
        )
        client = OpenMeteoClient(api_key="topsecret", temp_dir=tmp_path)
        with caplog.at_level("DEBUG", logger="openmeteo"):
            client.get(FORECAST_URL, {"latitude": "1"})
        assert "apikey=***" in caplog.text
        assert "topsecret" not in caplog.text
