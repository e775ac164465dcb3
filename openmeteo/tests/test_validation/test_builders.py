"""Tests for turning parsed arguments into requests."""

import pytest

from openmeteo.commands.builders import build_request
from openmeteo.commands.parsers import build_parser
from openmeteo.config.schema import AppConfig
from openmeteo.errors import UsageError, ValidationError
from openmeteo.models.common import Category
from openmeteo.tests.helpers import TODAY


def build(*argv: str, config: AppConfig | None = None):
    args = build_parser().parse_args(list(argv))
    return build_request(args, config or AppConfig(), TODAY)


def errors_of(*argv: str, config: AppConfig | None = None) -> list[str]:
    with pytest.raises(ValidationError) as exc:
        build(*argv, config=config)
    return exc.value.messages()


class TestForecastSince:
    def test_window_from_day_n(self):
        request = build("weather", "--lat=51.5", "--lon=-0.1", "--forecast-days=7",
                        "--forecast-since=3")
        assert request.start_date == "2024-06-03"
        assert request.end_date == "2024-06-07"
        query = request.query()
        assert "forecast_days" not in query
        assert query["start_date"] == "2024-06-03"

    def test_defaults_to_seven_days(self):
        request = build("weather", "--lat=1", "--lon=2", "--forecast-since=2")
        assert (request.start_date, request.end_date) == ("2024-06-02", "2024-06-07")

    def test_beyond_range(self):
        assert errors_of(
            "weather", "--lat=1", "--lon=2", "--forecast-days=7", "--forecast-since=8"
        ) == ["--forecast-since: 8 is beyond the forecast range (7 days)"]

    def test_exclusive_with_start_date(self):
        errors = errors_of(
            "weather", "--lat=1", "--lon=2", "--forecast-since=2",
            "--start-date=2024-06-01", "--end-date=2024-06-03",
        )
        assert errors == ["--forecast-since and --start-date are mutually exclusive"]

    def test_must_be_positive(self):
        assert errors_of("weather", "--lat=1", "--lon=2", "--forecast-since=0") == [
            "--forecast-since: 0 is below minimum (1)"
        ]


class TestWeatherSelection:
    def test_hourly_defaults_when_nothing_requested(self):
        request = build("weather", "--lat=1", "--lon=2")
        assert set(request.variables) == {Category.HOURLY}

    def test_current_only(self):
        request = build("weather", "--current", "--lat=1", "--lon=2")
        assert set(request.variables) == {Category.CURRENT}

    def test_current_with_forecast_window_adds_hourly(self):
        request = build("weather", "--current", "--forecast-days=3", "--lat=1", "--lon=2")
        assert set(request.variables) == {Category.CURRENT, Category.HOURLY}

    def test_daily_flag_only(self):
        request = build("weather", "--daily", "--lat=1", "--lon=2")
        assert set(request.variables) == {Category.DAILY}
        assert "temperature_2m_max" in request.variables[Category.DAILY]

    def test_explicit_params_kept_in_order(self):
        request = build("weather", "--lat=1", "--lon=2", "--hourly-params=rain,temperature_2m")
        assert request.query()["hourly"] == "rain,temperature_2m"

    def test_timezone_defaults_to_auto(self):
        assert build("weather", "--lat=1", "--lon=2").query()["timezone"] == "auto"

    def test_all_errors_reported_together(self):
        errors = errors_of(
            "weather", "--lat=95", "--lon=2", "--forecast-days=20",
            "--daily-params=temperature_2m", "--temperature-unit=kelvin",
        )
        assert len(errors) == 4

    def test_location_required(self):
        with pytest.raises(UsageError, match="location required"):
            build("weather")


class TestConfigLocation:
    def test_configured_coordinates(self):
        request = build("weather", config=AppConfig(lat=48.85, lon=2.35))
        assert (request.latitude, request.longitude) == ("48.85", "2.35")

    def test_configured_city(self):
        request = build("weather", config=AppConfig(city="Paris", country="FR"))
        assert (request.city, request.country) == ("Paris", "FR")
        assert request.needs_resolution

    def test_cli_location_wins(self):
        request = build("weather", "--city=Oslo", config=AppConfig(lat=1, lon=2))
        assert request.city == "Oslo"
        assert request.latitude is None

    def test_configured_units(self):
        config = AppConfig(temperature_unit="fahrenheit")
        query = build("weather", "--lat=1", "--lon=2", config=config).query()
        assert query["temperature_unit"] == "fahrenheit"
        query = build(
            "weather", "--lat=1", "--lon=2", "--temperature-unit=celsius", config=config
        ).query()
        assert query["temperature_unit"] == "celsius"


class TestRequiredArguments:
    @pytest.mark.parametrize("argv, flag", [
        (["history", "--lat=1", "--lon=2"], "--start-date"),
        (["ensemble", "--lat=1", "--lon=2"], "--models"),
        (["climate", "--lat=1", "--lon=2", "--start-date=2040-01-01",
          "--end-date=2040-01-03"], "--models"),
        (["geo"], "--search"),
    ])
    def test_missing(self, argv, flag):
        with pytest.raises(UsageError, match=f"missing required argument: {flag}"):
            build(*argv)


class TestEndpointRules:
    def test_air_quality_has_no_daily(self):
        errors = errors_of("air-quality", "--lat=1", "--lon=2", "--daily-params=pm10")
        assert "Air Quality API does not have daily variables" in errors[0]

    def test_climate_models_and_bias_flag(self):
        request = build(
            "climate", "--lat=1", "--lon=2", "--start-date=2040-01-01",
            "--end-date=2040-01-03", "--models=MRI_AGCM3_2_S,EC_Earth3P_HR",
            "--disable-bias-correction",
        )
        query = request.query()
        assert query["models"] == "MRI_AGCM3_2_S,EC_Earth3P_HR"
        assert query["disable_bias_correction"] == "true"
        assert request.models == ("MRI_AGCM3_2_S", "EC_Earth3P_HR")

    def test_satellite_tilt_coupling(self):
        errors = errors_of(
            "satellite", "--lat=1", "--lon=2", "--hourly-params=global_tilted_irradiance"
        )
        assert errors == [
            "'global_tilted_irradiance' requires --tilt and --azimuth. "
            "Example: --tilt=35 --azimuth=0"
        ]
        request = build(
            "satellite", "--lat=1", "--lon=2", "--hourly-params=global_tilted_irradiance",
            "--tilt=35", "--azimuth=0",
        )
        assert request.query()["tilt"] == "35"

    def test_flood_ensemble(self):
        query = build("flood", "--lat=1", "--lon=2", "--ensemble").query()
        assert query["ensemble"] == "true"
        assert query["daily"] == "river_discharge"


class TestElevation:
    def test_lists(self):
        request = build("elevation", "--lat=10,20", "--lon=30,40")
        assert request.query() == {"latitude": "10,20", "longitude": "30,40"}

    def test_mismatched_lengths(self):
        assert errors_of("elevation", "--lat=10,20", "--lon=10") == [
            "--lat has 2 value(s) but --lon has 1. They must have the same number of elements."
        ]

    def test_city_and_coordinates(self):
        errors = errors_of("elevation", "--city=Oslo", "--lat=10")
        assert "cannot use --city together with --lat/--lon" in errors

    def test_too_many(self):
        coords = ",".join(["1"] * 101)
        errors = errors_of("elevation", f"--lat={coords}", f"--lon={coords}")
        assert errors == ["too many coordinates: 101 pairs given, maximum is 100"]


class TestGeo:
    def test_search_params(self):
        request = build("geo", "--search=Springfield", "--country=US")
        assert request.query() == {
            "name": "Springfield", "count": "5", "language": "en", "format": "json",
            "countryCode": "US",
        }

    def test_count_bounds(self):
        assert errors_of("geo", "--search=x", "--count=500") == [
            "--count: 500 is above maximum (100)"
        ]
