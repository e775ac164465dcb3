"""GloFAS Flood API (openmeteo flood)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, redirect, rule
from openmeteo.models.common import Category

FLOOD_URL = "https://flood-api.open-meteo.com/v1/flood"

D = Category.DAILY

DAILY = parse_catalog("""
River Discharge:
  river_discharge               Daily river discharge rate (m³/s)
  river_discharge_mean          Mean from ensemble members
  river_discharge_median        Median from ensemble members
  river_discharge_max           Maximum from ensemble members
  river_discharge_min           Minimum from ensemble members
  river_discharge_p25           25th percentile from ensemble members
  river_discharge_p75           75th percentile from ensemble members
""")

WRONG_API = "not available in the Flood API. Use "

SUGGESTIONS = (
    rule(
        D,
        "temperature_2m*|apparent_temperature*|wind_speed_10m*|wind_direction_10m*"
        "|cloud_cover*|precipitation*|snowfall*|rain*|weather_code|is_day|sunrise|sunset"
        "|pressure_msl|surface_pressure|relative_humidity_2m*",
        f"{WRONG_API}'openmeteo weather' or 'openmeteo history' for weather data",
    ),
    rule(
        D,
        "wave_height*|wave_direction*|wave_period*|swell_wave_*|ocean_current_*"
        "|sea_surface_temperature|sea_level_height_msl",
        f"{WRONG_API}'openmeteo marine' for marine data",
    ),
    rule(
        D,
        "pm10|pm2_5|european_aqi|us_aqi|ozone|nitrogen_dioxide|carbon_monoxide"
        "|sulphur_dioxide|dust|uv_index*",
        f"{WRONG_API}'openmeteo air-quality' for air quality data",
    ),
    redirect(
        D, "river_discharge_average|river_discharge_avg", "river_discharge_mean",
        prefix="not a valid variable. Use ",
    ),
)

NO_SUB_DAILY = "the Flood API only provides daily variables. Use --daily-params instead"

FLOOD = EndpointSpec(
    name="flood",
    title="River discharge / flood forecasts (GloFAS Flood API)",
    base_url=FLOOD_URL,
    catalog={D: DAILY},
    defaults={D: ("river_discharge",)},
    suggestions=SUGGESTIONS,
    models=(
        "seamless_v4", "forecast_v4", "consolidated_v4",
        "seamless_v3", "forecast_v3", "consolidated_v3",
    ),
    model_kind="flood",
    forecast_days=(0, 210),
    past_days=(0, None),
    unsupported={Category.HOURLY: NO_SUB_DAILY, Category.CURRENT: NO_SUB_DAILY},
    notes={
        D: "Statistical variables (mean/median/max/min/p25/p75) are only available\n"
        "for forecasts, not for consolidated historical data. Use --ensemble to get\n"
        "all 50 individual ensemble members.",
    },
)
