"""Satellite Radiation API (openmeteo satellite)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, redirect, rule
from openmeteo.models.common import Category

SATELLITE_URL = "https://satellite-api.open-meteo.com/v1/archive"

H, D = Category.HOURLY, Category.DAILY

RADIATION = (
    "shortwave_radiation", "direct_radiation", "diffuse_radiation",
    "direct_normal_irradiance", "global_tilted_irradiance", "terrestrial_radiation",
)
TILTED = frozenset({"global_tilted_irradiance", "global_tilted_irradiance_instant"})

HOURLY = parse_catalog("""
Radiation (backward-averaged over the preceding hour):
  shortwave_radiation           GHI, global horizontal irradiance (W/m²)
  direct_radiation              Direct solar radiation (W/m²)
  diffuse_radiation             DHI, diffuse horizontal irradiance (W/m²)
  direct_normal_irradiance      DNI, direct normal irradiance (W/m²)
  global_tilted_irradiance      GTI, tilted plane (requires --tilt/--azimuth)
  terrestrial_radiation         Top-of-atmosphere radiation (W/m²)
Instantaneous:
  shortwave_radiation_instant   GHI at the indicated time (W/m²)
  direct_radiation_instant      Direct radiation at the indicated time (W/m²)
  diffuse_radiation_instant     DHI at the indicated time (W/m²)
  direct_normal_irradiance_instant DNI at the indicated time (W/m²)
  global_tilted_irradiance_instant GTI at the indicated time (requires --tilt/--azimuth)
  terrestrial_radiation_instant Top-of-atmosphere radiation at the indicated time (W/m²)
Other:
  is_day                        1 = day, 0 = night
  sunshine_duration             Sunshine duration (seconds)
""")

DAILY = parse_catalog("""
Sun & Radiation:
  sunrise                       Sunrise time (ISO 8601)
  sunset                        Sunset time (ISO 8601)
  daylight_duration             Daylight duration (seconds)
  sunshine_duration             Sunshine duration (seconds)
  shortwave_radiation_sum       Total shortwave radiation (MJ/m²)
""")

WRONG_API = "not available in the Satellite API. Use "
WEATHER_PATTERNS = (
    "temperature_2m*|apparent_temperature*|wind_speed_10m*|wind_direction_10m*"
    "|cloud_cover*|precipitation*|snowfall*|rain*|weather_code"
)
DAILY_ONLY = "only available as a daily variable"

SUGGESTIONS = (
    rule(H, "sunrise|sunset|daylight_duration", DAILY_ONLY),
    redirect(
        H, "shortwave_radiation_sum", "shortwave_radiation",
        prefix="a daily variable. Use ", suffix=" for hourly",
    ),
    rule(
        H, WEATHER_PATTERNS + "|pressure_msl|surface_pressure|relative_humidity_2m*|dew_point_2m*",
        f"{WRONG_API}'openmeteo weather' for weather data",
    ),
    rule(
        H,
        "wave_height*|wave_direction*|wave_period*|swell_wave_*|ocean_current_*"
        "|sea_surface_temperature",
        f"{WRONG_API}'openmeteo marine' for marine data",
    ),
    rule(
        H,
        "pm10|pm2_5|european_aqi|us_aqi|ozone|nitrogen_dioxide|carbon_monoxide"
        "|sulphur_dioxide|dust|uv_index*",
        f"{WRONG_API}'openmeteo air-quality' for air quality data",
    ),
    rule(H, "river_discharge*", f"{WRONG_API}'openmeteo flood' for flood data"),
    redirect(
        D, "|".join(RADIATION), "shortwave_radiation_sum",
        prefix="an hourly variable, not daily. Use ", suffix=" for daily totals",
    ),
    rule(
        D, "*_instant",
        "an hourly variable. Instant values are not available as daily aggregates",
    ),
    rule(D, "is_day", "only available as an hourly variable"),
    rule(D, WEATHER_PATTERNS, f"{WRONG_API}'openmeteo weather' for weather data"),
)

SATELLITE = EndpointSpec(
    name="satellite",
    title="Satellite solar radiation data (Solar Irradiance API)",
    base_url=SATELLITE_URL,
    catalog={H: HOURLY, D: DAILY},
    defaults={
        H: (
            "shortwave_radiation", "direct_radiation", "diffuse_radiation",
            "direct_normal_irradiance",
        ),
    },
    suggestions=SUGGESTIONS,
    models=(
        "satellite_radiation_seamless", "best_match", "ecmwf_ifs", "ecmwf_ifs025",
        "ecmwf_aifs025", "icon_seamless", "icon_global", "icon_eu", "icon_d2",
        "gfs_seamless", "gfs025", "gem_seamless", "jma_seamless", "jma_gsm", "jma_msm",
        "kma_seamless", "kma_gdps", "cma_grapes_global", "bom_access_global",
        "meteofrance_seamless", "meteofrance_arpege_world", "arpege_world",
        "metno_seamless", "knmi_seamless", "knmi_harmonie_arome_europe", "dmi_seamless",
        "dmi_harmonie_arome_europe", "ukmo_seamless", "era5_seamless", "era5",
        "era5_land", "era5_ensemble", "cerra",
    ),
    model_kind="satellite/NWP",
    forecast_days=(0, 1),
    past_days=(0, None),
    unsupported={
        Category.CURRENT: (
            "the Satellite API has no current conditions. Use --hourly-params instead"
        ),
    },
    notes={
        H: "Data is currently unavailable for North America.\n"
        "Use *_instant variants for instantaneous values at the indicated time.",
    },
)
