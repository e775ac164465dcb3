"""End-to-end tests through ``main`` with the HTTP layer mocked."""

import json
from datetime import date, timedelta

import respx
from httpx import Response

from openmeteo.cli import main
from openmeteo.endpoints.climate import CLIMATE_URL
from openmeteo.endpoints.forecast import FORECAST_URL
from openmeteo.endpoints.geocoding import GEOCODING_URL
from openmeteo.tests.helpers import load_fixture

CUSTOMER_FORECAST_URL = "https://customer-api.open-meteo.com/v1/forecast"


class TestWeather:
    @respx.mock
    def test_current_for_city(self, capsys):
        geo = respx.get(GEOCODING_URL).mock(
            return_value=Response(200, json=load_fixture("geocoding_london.json"))
        )
        forecast = respx.get(FORECAST_URL).mock(
            return_value=Response(200, json=load_fixture("forecast_current.json"))
        )
        assert main(["weather", "--current", "--city=London"]) == 0

        assert geo.call_count == 1
        params = forecast.calls.last.request.url.params
        assert params["latitude"] == "51.50853"
        assert params["longitude"] == "-0.12574"
        assert "temperature_2m" in params["current"].split(",")
        assert "hourly" not in params
        assert params["timezone"] == "auto"

        out = capsys.readouterr().out
        assert "London, United Kingdom" in out
        assert "18.4°C" in out
        assert "Overcast" in out

    @respx.mock
    def test_forecast_since_window(self, capsys):
        route = respx.get(FORECAST_URL).mock(
            return_value=Response(200, json=load_fixture("forecast_hourly.json"))
        )
        argv = ["weather", "--lat=52.52", "--lon=13.41", "--forecast-days=7",
                "--forecast-since=3", "--porcelain"]
        assert main(argv) == 0
        today = date.today()
        params = route.calls.last.request.url.params
        assert params["start_date"] == (today + timedelta(days=2)).isoformat()
        assert params["end_date"] == (today + timedelta(days=6)).isoformat()
        assert "forecast_days" not in params

    @respx.mock
    def test_forecast_since_out_of_range(self, capsys):
        argv = ["weather", "--lat=52.52", "--lon=13.41", "--forecast-days=7",
                "--forecast-since=8"]
        assert main(argv) == 1
        assert not respx.calls
        assert "beyond the forecast range" in capsys.readouterr().err

    @respx.mock
    def test_global_format_flag_before_command(self, capsys):
        respx.get(FORECAST_URL).mock(
            return_value=Response(200, json=load_fixture("forecast_hourly.json"))
        )
        assert main(["--llm", "weather", "--lat=52.52", "--lon=13.41"]) == 0
        assert capsys.readouterr().out.startswith("meta\tlat:52.52")

    @respx.mock
    def test_raw_echoes_body(self, capsys):
        body = load_fixture("forecast_hourly.json")
        respx.get(FORECAST_URL).mock(return_value=Response(200, json=body))
        assert main(["weather", "--lat=52.52", "--lon=13.41", "--raw"]) == 0
        assert json.loads(capsys.readouterr().out) == body


class TestClimate:
    @respx.mock
    def test_two_models_aggregated(self, capsys):
        route = respx.get(CLIMATE_URL).mock(
            return_value=Response(200, json=load_fixture("climate_two_models.json"))
        )
        argv = [
            "climate", "--lat=52.52", "--lon=13.41", "--start-date=2040-01-01",
            "--end-date=2040-01-03", "--models=MRI_AGCM3_2_S,EC_Earth3P_HR",
            "--daily-params=temperature_2m_max",
        ]
        assert main(argv) == 0
        assert route.calls.last.request.url.params["models"] == "MRI_AGCM3_2_S,EC_Earth3P_HR"
        out = capsys.readouterr().out
        assert "max 11° (10°–12°)" in out
        assert "max 12° (12°–12°)" in out
        assert "max 15° (14°–16°)" in out


class TestLocalErrors:
    @respx.mock
    def test_air_quality_daily_rejected(self, capsys):
        assert main(["air-quality", "--lat=52.52", "--lon=13.41", "--daily-params=pm10"]) == 1
        assert not respx.calls
        err = capsys.readouterr().err
        assert "Air Quality API does not have daily variables" in err

    @respx.mock
    def test_elevation_mismatched_lists(self, capsys):
        assert main(["elevation", "--lat=10,20", "--lon=10"]) == 1
        assert not respx.calls
        err = capsys.readouterr().err
        assert "openmeteo: error: --lat has 2 value(s) but --lon has 1" in err

    @respx.mock
    def test_errors_batched(self, capsys):
        assert main(["weather", "--lat=100", "--lon=200"]) == 1
        err = capsys.readouterr().err.splitlines()
        assert err[0] == "openmeteo: error: --lat: 100 is out of range (-90 to 90)"
        assert err[1] == "openmeteo: error: --lon: 200 is out of range (-180 to 180)"

    def test_unknown_flag(self, capsys):
        assert main(["weather", "--bogus"]) == 1
        assert "unrecognized arguments: --bogus" in capsys.readouterr().err

    def test_missing_location(self, capsys):
        assert main(["weather"]) == 1
        err = capsys.readouterr().err
        assert "location required" in err
        assert "Run 'openmeteo weather --help' for usage." in err


class TestUpstream:
    @respx.mock
    def test_api_error_exit_2(self, capsys):
        respx.get(FORECAST_URL).mock(
            return_value=Response(400, json={"error": True, "reason": "Latitude must be in range"})
        )
        assert main(["weather", "--lat=1", "--lon=2"]) == 2
        err = capsys.readouterr().err
        assert "openmeteo: error: API error (HTTP 400): Latitude must be in range" in err

    @respx.mock
    def test_city_not_found(self, capsys):
        respx.get(GEOCODING_URL).mock(return_value=Response(200, json={}))
        assert main(["weather", "--city=Atlantis"]) == 1
        assert "location not found: 'Atlantis'" in capsys.readouterr().err

    @respx.mock
    def test_geo_no_results(self, capsys):
        respx.get(GEOCODING_URL).mock(return_value=Response(200, json={}))
        assert main(["geo", "--search=Atlantis"]) == 1
        assert "no results found for 'Atlantis'" in capsys.readouterr().err

    @respx.mock
    def test_api_key_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("OPENMETEO_API_KEY", "k123")
        route = respx.get(CUSTOMER_FORECAST_URL).mock(
            return_value=Response(200, json=load_fixture("forecast_hourly.json"))
        )
        assert main(["weather", "--lat=1", "--lon=2", "--porcelain"]) == 0
        assert route.calls.last.request.url.params["apikey"] == "k123"

    @respx.mock
    def test_verbose_logs_masked_url(self, capsys):
        respx.get(CUSTOMER_FORECAST_URL).mock(
            return_value=Response(200, json=load_fixture("forecast_hourly.json"))
        )
        assert main(["weather", "--lat=1", "--lon=2", "--verbose", "--api-key=zzz"]) == 0
        err = capsys.readouterr().err
        assert f"openmeteo: GET {CUSTOMER_FORECAST_URL}?" in err
        assert "apikey=***" in err
        assert "zzz" not in err


class TestConfigDefaults:
    @respx.mock
    def test_configured_city_and_units(self, config_file, capsys):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("city: London\ncountry: GB\ntemperature_unit: fahrenheit\n")
        geo = respx.get(GEOCODING_URL).mock(
            return_value=Response(200, json=load_fixture("geocoding_london.json"))
        )
        forecast = respx.get(FORECAST_URL).mock(
            return_value=Response(200, json=load_fixture("forecast_current.json"))
        )
        assert main(["weather", "--current", "--porcelain"]) == 0
        assert geo.calls.last.request.url.params["countryCode"] == "GB"
        assert forecast.calls.last.request.url.params["temperature_unit"] == "fahrenheit"

    def test_broken_config_file(self, config_file, capsys):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("colour: blue\n")
        assert main(["weather", "--lat=1", "--lon=2"]) == 1
        assert "colour" in capsys.readouterr().err


class TestTopLevel:
    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == "openmeteo 1.1.0"

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "weather" in capsys.readouterr().out

    def test_param_help(self, capsys):
        assert main(["weather", "help", "--hourly-params"]) == 0
        assert "Hourly variables for 'openmeteo weather':" in capsys.readouterr().out

    def test_param_help_porcelain(self, capsys):
        assert main(["marine", "help", "--daily-params", "--porcelain"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert all("=" in line for line in out)

    def test_param_help_unknown_topic(self, capsys):
        assert main(["weather", "help", "--bogus"]) == 1
        assert "unknown help topic: --bogus" in capsys.readouterr().err

    def test_command_help(self, capsys):
        assert main(["weather", "help"]) == 0
        assert "--forecast-since" in capsys.readouterr().out
