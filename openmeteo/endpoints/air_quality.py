"""Air Quality API (openmeteo air-quality)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, rule
from openmeteo.models.common import Category

AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"

C, H = Category.CURRENT, Category.HOURLY

VARIABLES = parse_catalog("""
Pollutants:
  pm10                          Particulate matter PM10 (μg/m³)
  pm2_5                         Particulate matter PM2.5 (μg/m³)
  carbon_monoxide               Carbon monoxide CO (μg/m³)
  nitrogen_dioxide              Nitrogen dioxide NO₂ (μg/m³)
  sulphur_dioxide               Sulphur dioxide SO₂ (μg/m³)
  ozone                         Ozone O₃ (μg/m³)
  carbon_dioxide                Carbon dioxide CO₂ (ppm)
  ammonia                       Ammonia NH₃ (μg/m³)
  methane                       Methane CH₄ (μg/m³)
Indices:
  european_aqi                  European Air Quality Index
  us_aqi                        United States Air Quality Index
  european_aqi_pm2_5            European AQI for PM2.5
  european_aqi_pm10             European AQI for PM10
  european_aqi_nitrogen_dioxide European AQI for NO₂
  european_aqi_ozone            European AQI for O₃
  european_aqi_sulphur_dioxide  European AQI for SO₂
  us_aqi_pm2_5                  US AQI for PM2.5
  us_aqi_pm10                   US AQI for PM10
  us_aqi_nitrogen_dioxide       US AQI for NO₂
  us_aqi_ozone                  US AQI for O₃
  us_aqi_sulphur_dioxide        US AQI for SO₂
  us_aqi_carbon_monoxide        US AQI for CO
Other:
  aerosol_optical_depth         Aerosol optical depth at 550nm
  dust                          Saharan dust (μg/m³)
  uv_index                      UV index
  uv_index_clear_sky            UV index under clear sky conditions
Pollen:
  alder_pollen                  Alder pollen (grains/m³, Europe only)
  birch_pollen                  Birch pollen (grains/m³, Europe only)
  grass_pollen                  Grass pollen (grains/m³, Europe only)
  mugwort_pollen                Mugwort pollen (grains/m³, Europe only)
  olive_pollen                  Olive pollen (grains/m³, Europe only)
  ragweed_pollen                Ragweed pollen (grains/m³, Europe only)
""")

WEATHER_PATTERNS = (
    "temperature_2m*|apparent_temperature*|wind_speed_10m*|wind_direction_10m*"
    "|wind_gusts_10m*|cloud_cover*|precipitation*|snowfall*|rain*|weather_code|is_day"
    "|sunrise|sunset|pressure_msl|surface_pressure|relative_humidity_2m*"
)
MARINE_PATTERNS = (
    "wave_height*|wave_direction*|wave_period*|swell_wave_*|ocean_current_*"
    "|sea_surface_temperature|sea_level_height_msl"
)

SUGGESTIONS = tuple(
    rule(
        category, patterns,
        f"not available in Air Quality API. Use 'openmeteo {cmd}' for {what} data",
    )
    for category in (H, C)
    for patterns, cmd, what in (
        (WEATHER_PATTERNS, "weather", "weather"),
        (MARINE_PATTERNS, "marine", "marine"),
    )
)

AIR_QUALITY = EndpointSpec(
    name="air-quality",
    title="Air quality & pollen forecasts (Air Quality API)",
    base_url=AIR_QUALITY_URL,
    catalog={C: VARIABLES, H: VARIABLES},
    defaults={
        C: (
            "european_aqi", "us_aqi", "pm10", "pm2_5", "carbon_monoxide", "nitrogen_dioxide",
            "sulphur_dioxide", "ozone", "uv_index", "dust",
        ),
        H: ("pm10", "pm2_5", "european_aqi", "us_aqi", "ozone", "nitrogen_dioxide", "uv_index"),
    },
    suggestions=SUGGESTIONS,
    forecast_days=(0, 7),
    past_days=(0, 92),
    unsupported={
        Category.DAILY: (
            "Air Quality API does not have daily variables. Use --hourly-params instead"
        ),
    },
    notes={H: "Pollen is available for Europe only and is seasonal."},
)
