"""Tests for the batching validator."""

from datetime import date

import pytest

from openmeteo.endpoints.air_quality import AIR_QUALITY
from openmeteo.endpoints.climate import CLIMATE
from openmeteo.endpoints.forecast import FORECAST
from openmeteo.errors import ValidationError
from openmeteo.models.common import Category
from openmeteo.validation.rules import Validator, split_list


class TestSplitList:
    def test_drops_empty_tokens(self):
        assert split_list("a,,b, c ,") == ["a", "b", "c"]

    def test_none(self):
        assert split_list(None) == []


class TestNumbers:
    def test_latitude_range(self):
        v = Validator()
        assert v.latitude("52.52") == 52.52
        assert v.latitude("-90") == -90
        assert v.latitude("91") is None
        assert v.errors == ["--lat: 91 is out of range (-90 to 90)"]

    def test_longitude_not_a_number(self):
        v = Validator()
        assert v.longitude("east") is None
        assert v.errors == ["--lon: 'east' is not a valid number"]

    def test_absent_is_not_an_error(self):
        v = Validator()
        assert v.latitude(None) is None
        assert v.number("--tilt", "") is None
        assert v.errors == []

    def test_integer_bounds(self):
        v = Validator()
        assert v.integer("--forecast-days", "16", 0, 16) == 16
        assert v.integer("--forecast-days", "17", 0, 16) is None
        assert v.integer("--forecast-since", "0", 1) is None
        assert v.integer("--count", "-1", 1, 100) is None
        assert v.errors == [
            "--forecast-days: 17 is above maximum (16)",
            "--forecast-since: 0 is below minimum (1)",
            "--count: '-1' is not a valid integer",
        ]

    def test_bounded_open_ended(self):
        v = Validator()
        assert v.bounded("--past-days", "5000", (0, None)) == 5000
        assert v.errors == []


class TestChoice:
    def test_rejects_unknown(self):
        v = Validator()
        assert v.choice("--wind-speed-unit", "knots", ("kmh", "ms", "mph", "kn")) is None
        assert v.errors == [
            "--wind-speed-unit: 'knots' is not valid. Must be one of: kmh, ms, mph, kn"
        ]


class TestDates:
    def test_valid(self):
        assert Validator().iso_date("--start-date", "2024-02-29") == date(2024, 2, 29)

    def test_bad_format(self):
        v = Validator()
        v.iso_date("--start-date", "2024/01/15")
        assert "Use YYYY-MM-DD format" in v.errors[0]

    def test_bad_month_and_day(self):
        v = Validator()
        v.iso_date("--start-date", "2024-13-01")
        v.iso_date("--end-date", "2023-02-29")
        assert v.errors == [
            "--start-date: invalid month '13' in '2024-13-01'",
            "--end-date: invalid day '29' in '2023-02-29'",
        ]

    def test_range_returns_dates(self):
        v = Validator()
        assert v.date_range("2024-01-01", "2024-01-31") == (date(2024, 1, 1), date(2024, 1, 31))
        assert v.errors == []

    def test_range_ordering(self):
        v = Validator()
        v.date_range("2024-02-01", "2024-01-01")
        assert v.errors == ["--start-date (2024-02-01) must not be after --end-date (2024-01-01)"]

    def test_range_requires_both(self):
        v = Validator()
        v.date_range("2024-02-01", None)
        v.date_range(None, "2024-02-01")
        assert v.errors == ["--start-date requires --end-date", "--end-date requires --start-date"]

    def test_climate_bounds(self):
        v = Validator()
        v.date_range("1949-12-31", "2051-01-01", CLIMATE.date_bounds)
        assert v.errors == [
            "--start-date: 1949-12-31 is before the available range (1950-01-01)",
            "--end-date: 2051-01-01 is after the available range (2050-12-31)",
        ]


class TestModels:
    def test_allow_list(self):
        v = Validator()
        assert v.models("--models", "MRI_AGCM3_2_S,bogus", CLIMATE) == ["MRI_AGCM3_2_S"]
        assert len(v.errors) == 1
        assert v.errors[0].startswith("--models: 'bogus' is not a valid climate model.")
        assert "EC_Earth3P_HR" in v.errors[0]

    def test_open_list_passes_through(self):
        v = Validator()
        assert v.models("--model", "icon_seamless", FORECAST) == ["icon_seamless"]
        assert v.errors == []


class TestVariables:
    def test_suggestions_batched(self):
        v = Validator()
        names = v.variables(FORECAST, Category.DAILY, "temperature_2m,precipitation,sunrise")
        assert names == ["temperature_2m", "precipitation", "sunrise"]
        assert v.errors == [
            "--daily-params: 'temperature_2m' is not a daily variable. "
            "Use 'temperature_2m_max' and/or 'temperature_2m_min'",
            "--daily-params: 'precipitation' is not a daily variable. Use 'precipitation_sum'",
        ]

    def test_unknown_names_pass_through(self):
        v = Validator()
        assert v.variables(FORECAST, Category.HOURLY, "brand_new_variable") == [
            "brand_new_variable"
        ]
        assert v.errors == []

    def test_unsupported_category(self):
        v = Validator()
        assert v.variables(AIR_QUALITY, Category.DAILY, "pm10") == []
        assert v.errors == [
            "--daily-params: Air Quality API does not have daily variables. "
            "Use --hourly-params instead"
        ]

    def test_raise_collects_everything(self):
        v = Validator()
        v.latitude("100")
        v.variables(FORECAST, Category.DAILY, "temperature_2m")
        with pytest.raises(ValidationError) as exc:
            v.raise_if_errors()
        assert len(exc.value.messages()) == 2
        assert exc.value.exit_code == 1
