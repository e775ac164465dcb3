"""Tests for the fetch-and-describe step behind every data command."""

import io

import pytest
import respx
from httpx import Response

from openmeteo.commands.builders import build_request
from openmeteo.commands.parsers import build_parser
from openmeteo.config.schema import AppConfig, OutputFormat
from openmeteo.endpoints.elevation import ELEVATION_URL
from openmeteo.endpoints.geocoding import GEOCODING_URL
from openmeteo.endpoints.marine import MARINE_URL
from openmeteo.ingest.client import OpenMeteoClient
from openmeteo.pipeline.command_pipeline import CommandPipeline
from openmeteo.tests.helpers import TODAY, load_fixture


def request_for(*argv: str, config: AppConfig):
    return build_request(build_parser().parse_args(list(argv)), config, TODAY)


@pytest.fixture
def pipeline(app_config, tmp_path) -> CommandPipeline:
    return CommandPipeline(app_config, client=OpenMeteoClient(temp_dir=tmp_path))


class TestFetch:
    @respx.mock
    def test_resolves_city_once(self, pipeline, app_config):
        geo = respx.get(GEOCODING_URL).mock(
            return_value=Response(200, json=load_fixture("geocoding_london.json"))
        )
        marine = respx.get(MARINE_URL).mock(
            return_value=Response(200, json={"latitude": 51.5, "longitude": -0.125})
        )
        view = pipeline.fetch(request_for("marine", "--city=London", config=app_config))
        assert geo.call_count == 1
        assert marine.call_count == 1
        assert view.place.name == "London"
        assert view.variables[0] == "wave_height"

    @respx.mock
    def test_elevation_echoes_coordinates(self, pipeline, app_config):
        respx.get(ELEVATION_URL).mock(
            return_value=Response(200, json={"elevation": [38.0, 1234.5]})
        )
        view = pipeline.fetch(
            request_for("elevation", "--lat=52.52,46.5", "--lon=13.41,8.0", config=app_config)
        )
        assert view.latitudes == (52.52, 46.5)
        assert view.longitudes == (13.41, 8.0)
        assert view.elevations == [38.0, 1234.5]


class TestRun:
    @respx.mock
    def test_writes_selected_format(self, tmp_path):
        respx.get(ELEVATION_URL).mock(return_value=Response(200, json={"elevation": [38.0]}))
        config = AppConfig(output_format=OutputFormat.PORCELAIN)
        pipeline = CommandPipeline(config, client=OpenMeteoClient(temp_dir=tmp_path))
        out = io.StringIO()
        request = request_for("elevation", "--lat=52.52", "--lon=13.41", config=config)
        assert pipeline.run(request, out) == 0
        assert out.getvalue().splitlines()[0] == "count=1"
