"""Tests for the human-readable renderers."""

from openmeteo.models.location import ResolvedLocation
from openmeteo.reporting.human.air_quality import eu_aqi, render_air_quality, us_aqi
from openmeteo.reporting.human.flood import render_flood, severity
from openmeteo.reporting.human.forecast import render_history, render_weather
from openmeteo.reporting.human.marine import render_marine
from openmeteo.reporting.human.multi_model import render_climate, render_ensemble
from openmeteo.reporting.human.places import render_elevation, render_geo
from openmeteo.reporting.human.satellite import render_satellite
from openmeteo.reshape.aggregate import SourceMap
from openmeteo.tests.helpers import load_fixture, make_response

LONDON = ResolvedLocation(51.50853, -0.12574, "London", "United Kingdom")


def plain(lines) -> str:
    return "\n".join(t.plain for t in lines)


class TestWeather:
    def test_current(self):
        out = plain(render_weather(make_response(load_fixture("forecast_current.json")), LONDON))
        assert out.splitlines()[0] == "🌍 London, United Kingdom · 51.5°N, 0.12°W"
        assert "Europe/London (BST) · Elevation: 23m" in out
        assert "18.4°C (feels like 17.1°C)" in out
        assert "62% humidity" in out
        assert "Overcast (88% clouds)" in out
        assert "14.2 km/h SW, gusts 29.5 km/h" in out
        assert "Day" in out

    def test_header_without_timezone_abbreviation(self):
        body = {"latitude": 1.0, "longitude": 2.0, "timezone": "GMT"}
        out = plain(render_weather(make_response(body), None))
        assert out.splitlines()[1] == "   GMT"

    def test_hourly_and_daily_with_gaps(self):
        out = plain(render_weather(make_response(load_fixture("forecast_hourly.json")), None))
        assert "📅 Mon Jan 15, 2024" in out
        assert "📅 Tue Jan 16, 2024" in out
        assert "00:00  1.5°" in out
        assert "Light rain" in out
        assert "-1.3°→4.2°" in out
        # the second day is null everywhere
        assert out.count("no data") == 2

    def test_history_period(self):
        response = make_response(load_fixture("forecast_hourly.json"))
        out = plain(render_history(response, None, "2024-01-15", "2024-01-16"))
        assert "Historical: 2024-01-15 → 2024-01-16" in out


class TestMultiModel:
    def test_climate_daily_aggregates(self):
        response = make_response(load_fixture("climate_two_models.json"))
        sources = SourceMap(["temperature_2m_max"], ("MRI_AGCM3_2_S", "EC_Earth3P_HR"))
        out = plain(render_climate(response, None, sources, "2040-01-01", "2040-01-03"))
        assert "Climate: MRI_AGCM3_2_S, EC_Earth3P_HR" in out
        assert "📅 Sun Jan 01, 2040 (2 models)" in out
        assert "🌡  max 11° (10°–12°)" in out
        assert "🌡  max 12° (12°–12°)" in out
        assert "🌡  max 15° (14°–16°)" in out

    def test_climate_monthly_rollup(self):
        days = [f"2040-{m:02d}-{d:02d}" for m in (1, 2) for d in range(1, 29)]
        body = {
            "latitude": 1.0, "longitude": 2.0, "timezone": "GMT",
            "daily": {"time": days, "temperature_2m_mean": [10.0] * 28 + [None] * 28},
        }
        out = plain(render_climate(
            make_response(body), None, SourceMap(["temperature_2m_mean"]), days[0], days[-1]
        ))
        assert "📅 January 2040 (28 days)" in out
        assert "🌡  avg 10°" in out
        assert "February 2040" in out
        assert "no data" in out

    def test_ensemble_members(self):
        body = {
            "latitude": 1.0, "longitude": 2.0, "timezone": "GMT",
            "hourly_units": {"temperature_2m": "°C"},
            "hourly": {
                "time": ["2024-06-01T00:00", "2024-06-01T01:00"],
                "temperature_2m": [10.0, None],
                "temperature_2m_member01": [12.0, None],
            },
        }
        out = plain(render_ensemble(
            make_response(body), None, SourceMap(["temperature_2m"], ("icon_seamless",))
        ))
        assert "Ensemble: icon_seamless" in out
        assert "(2 members)" in out
        assert "00:00  11° (10–12, med 11)" in out
        assert "01:00  no data" in out


class TestOtherApis:
    def test_marine_no_data(self):
        body = {
            "latitude": 1.0, "longitude": 2.0, "timezone": "GMT",
            "hourly": {"time": ["2024-06-01T00:00"], "wave_height": [None]},
        }
        assert "No marine data at this location" in plain(render_marine(make_response(body), None))

    def test_air_quality_badges(self):
        assert eu_aqi(15) == ("Good", "🟢")
        assert eu_aqi(150) == ("Extremely poor", "⛔")
        assert us_aqi(120)[0] == "Unhealthy (sensitive)"
        body = {
            "latitude": 1.0, "longitude": 2.0, "timezone": "GMT",
            "current": {"time": "2024-06-01T12:00", "european_aqi": 35, "pm10": 12.5},
        }
        out = plain(render_air_quality(make_response(body), None))
        assert "EU AQI: 35 — Fair" in out
        assert "PM₁₀ 12.5 μg/m³" in out

    def test_air_quality_empty_current(self):
        body = {"current": {"time": "2024-06-01T12:00", "interval": 3600, "pm10": None}}
        out = plain(render_air_quality(make_response(body), None))
        assert "No air quality data at this location" in out

    def test_flood_members_summary(self):
        body = {
            "latitude": 1.0, "longitude": 2.0,
            "daily": {
                "time": ["2024-06-01", "2024-06-02"],
                "river_discharge": [120.0, None],
                "river_discharge_member01": [100.0, None],
                "river_discharge_member02": [140.0, None],
            },
        }
        out = plain(render_flood(make_response(body), None))
        assert "Ensemble: 2 members" in out
        assert "Discharge: 120 m³/s — High" in out
        assert "mean: 120 · median: 120 · range: 100–140" in out
        assert "No river data at this location" in out

    def test_flood_severity(self):
        assert severity(0) == ("Dry", "🏜️")
        assert severity(9.9)[0] == "Low"
        assert severity(5000)[0] == "Extreme"

    def test_satellite_daily(self):
        body = {
            "latitude": 1.0, "longitude": 2.0, "timezone": "GMT",
            "daily": {
                "time": ["2024-06-01", "2024-06-02"],
                "sunshine_duration": [36000.0, None],
                "shortwave_radiation_sum": [25.4, None],
            },
        }
        out = plain(render_satellite(make_response(body), None))
        assert "Sunshine: 10h 0m" in out
        assert "Total GHI: 25.4 MJ/m²" in out
        assert "no data" in out


class TestPlaces:
    def test_geo(self):
        out = plain(render_geo(load_fixture("geocoding_london.json")["results"]))
        assert "📍 London, England, United Kingdom [GB]" in out
        assert "51.50853°N, 0.12574°W" in out
        assert "Pop: 7556900" in out
        assert "Postcodes: E1, EC1" in out

    def test_geo_result_without_coordinates(self):
        out = plain(render_geo([{"name": "Atlantis", "population": 12, "timezone": "UTC"}]))
        assert "📍 Atlantis" in out
        assert "Pop: 12" in out
        assert "°N" not in out and "°S" not in out
        assert "Timezone: UTC" in out

    def test_elevation_many(self):
        out = plain(render_elevation([10.0, -20.0], [30.0, 40.0], [120.0, None]))
        assert "2 locations" in out
        assert "10°N, 30°E  →  120 m" in out
        assert "20°S, 40°E  →  N/A" in out
