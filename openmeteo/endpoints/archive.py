"""Historical Weather API (openmeteo history)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, redirect, rule
from openmeteo.models.common import Category

ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"

H, D = Category.HOURLY, Category.DAILY

HOURLY = parse_catalog("""
Temperature & Humidity:
  temperature_2m                Air temperature at 2m
  relative_humidity_2m          Relative humidity at 2m
  dew_point_2m                  Dew point at 2m
  apparent_temperature          Feels-like temperature
Precipitation:
  precipitation                 Total precipitation (mm)
  rain                          Rain amount (mm)
  snowfall                      Snowfall amount (cm)
  snow_depth                    Snow depth on ground (m)
Weather:
  weather_code                  WMO weather interpretation code
  cloud_cover                   Total cloud cover (%)
  cloud_cover_low               Low-level cloud cover
  cloud_cover_mid               Mid-level cloud cover
  cloud_cover_high              High-level cloud cover
Pressure:
  pressure_msl                  Mean sea level pressure (hPa)
  surface_pressure              Surface pressure (hPa)
Wind:
  wind_speed_10m                Wind speed at 10m
  wind_speed_100m               Wind speed at 100m
  wind_direction_10m            Wind direction at 10m
  wind_direction_100m           Wind direction at 100m
  wind_gusts_10m                Wind gusts at 10m
Solar Radiation:
  shortwave_radiation           Global horizontal irradiance (W/m²)
  direct_radiation              Direct beam radiation
  diffuse_radiation             Diffuse horizontal irradiance
  direct_normal_irradiance      Direct normal irradiance DNI
  global_tilted_irradiance      Tilted surface irradiance
  sunshine_duration             Seconds of sunshine per hour
Soil:
  soil_temperature_0_to_7cm     Soil temperature 0-7cm
  soil_temperature_7_to_28cm    Soil temperature 7-28cm
  soil_temperature_28_to_100cm  Soil temperature 28-100cm
  soil_temperature_100_to_255cm Soil temperature 100-255cm
  soil_moisture_0_to_7cm        Soil moisture 0-7cm
  soil_moisture_7_to_28cm       Soil moisture 7-28cm
  soil_moisture_28_to_100cm     Soil moisture 28-100cm
  soil_moisture_100_to_255cm    Soil moisture 100-255cm
Other:
  et0_fao_evapotranspiration    Reference ET₀ (FAO method)
  vapour_pressure_deficit       Vapour pressure deficit (kPa)
  is_day                        1 if daytime, 0 if night
""")

DAILY = parse_catalog("""
Temperature:
  temperature_2m_max            Maximum daily temperature
  temperature_2m_min            Minimum daily temperature
  temperature_2m_mean           Mean daily temperature
  apparent_temperature_max      Maximum feels-like temperature
  apparent_temperature_min      Minimum feels-like temperature
  apparent_temperature_mean     Mean feels-like temperature
Humidity & Clouds:
  relative_humidity_2m_max      Maximum relative humidity at 2m
  relative_humidity_2m_min      Minimum relative humidity at 2m
  relative_humidity_2m_mean     Mean relative humidity at 2m
  dew_point_2m_max              Maximum dew point at 2m
  dew_point_2m_min              Minimum dew point at 2m
  dew_point_2m_mean             Mean dew point at 2m
  cloud_cover_max               Maximum cloud cover (%)
  cloud_cover_min               Minimum cloud cover (%)
  cloud_cover_mean              Mean cloud cover (%)
Precipitation:
  precipitation_sum             Total daily precipitation (mm)
  rain_sum                      Total daily rain (mm)
  snowfall_sum                  Total daily snowfall (cm)
  precipitation_hours           Hours with precipitation
Wind:
  wind_speed_10m_max            Maximum daily wind speed at 10m
  wind_gusts_10m_max            Maximum daily wind gusts at 10m
  wind_direction_10m_dominant   Dominant wind direction (degrees)
Sun & Weather:
  weather_code                  WMO code for dominant weather
  sunrise                       Sunrise time (ISO 8601)
  sunset                        Sunset time (ISO 8601)
  sunshine_duration             Daily sunshine duration (s)
  daylight_duration             Daylight duration (s)
Radiation & Evapotranspiration:
  shortwave_radiation_sum       Total daily solar radiation (MJ/m²)
  et0_fao_evapotranspiration    Daily reference ET₀ (mm)
""")

HOURLY_ONLY = "only available as an hourly variable, not daily"
DAILY_ONLY = "only available as a daily variable"
FOR_HOURLY = {"prefix": "a daily variable. Use ", "suffix": " for hourly"}

SUGGESTIONS = (
    redirect(D, "precipitation", "precipitation_sum"),
    rule(
        D,
        "precipitation_probability|precipitation_probability_max"
        "|precipitation_probability_min|precipitation_probability_mean",
        "not available in the Historical Weather API",
    ),
    redirect(
        D, "temperature_2m", "temperature_2m_max", "temperature_2m_min", "temperature_2m_mean"
    ),
    redirect(
        D, "apparent_temperature",
        "apparent_temperature_max", "apparent_temperature_min", "apparent_temperature_mean",
    ),
    redirect(D, "wind_speed_10m", "wind_speed_10m_max"),
    redirect(D, "wind_gusts_10m", "wind_gusts_10m_max"),
    redirect(D, "wind_direction_10m", "wind_direction_10m_dominant"),
    redirect(D, "rain", "rain_sum"),
    rule(D, "showers|showers_sum", "not available in the Historical Weather API"),
    redirect(D, "snowfall", "snowfall_sum"),
    redirect(
        D, "relative_humidity_2m",
        "relative_humidity_2m_max", "relative_humidity_2m_min", "relative_humidity_2m_mean",
    ),
    redirect(D, "dew_point_2m", "dew_point_2m_max", "dew_point_2m_min", "dew_point_2m_mean"),
    redirect(D, "cloud_cover", "cloud_cover_max", "cloud_cover_min", "cloud_cover_mean"),
    rule(D, "pressure_msl|surface_pressure|visibility|is_day", HOURLY_ONLY),
    redirect(
        H, "temperature_2m_max|temperature_2m_min|temperature_2m_mean", "temperature_2m",
        **FOR_HOURLY,
    ),
    redirect(
        H,
        "apparent_temperature_max|apparent_temperature_min|apparent_temperature_mean",
        "apparent_temperature",
        **FOR_HOURLY,
    ),
    redirect(H, "precipitation_sum", "precipitation", **FOR_HOURLY),
    rule(H, "precipitation_hours", DAILY_ONLY),
    redirect(H, "wind_speed_10m_max", "wind_speed_10m", **FOR_HOURLY),
    redirect(H, "wind_gusts_10m_max", "wind_gusts_10m", **FOR_HOURLY),
    redirect(H, "wind_direction_10m_dominant", "wind_direction_10m", **FOR_HOURLY),
    redirect(H, "rain_sum", "rain", **FOR_HOURLY),
    redirect(H, "snowfall_sum", "snowfall", **FOR_HOURLY),
    rule(H, "sunrise|sunset|daylight_duration", DAILY_ONLY),
)

ARCHIVE = EndpointSpec(
    name="history",
    title="Historical weather (Archive API)",
    base_url=ARCHIVE_URL,
    catalog={H: HOURLY, D: DAILY},
    defaults={
        H: (
            "temperature_2m", "relative_humidity_2m", "apparent_temperature", "precipitation",
            "weather_code", "cloud_cover", "wind_speed_10m", "wind_direction_10m",
        ),
    },
    suggestions=SUGGESTIONS,
    models=(
        "best_match", "ecmwf_ifs", "ecmwf_ifs_analysis_long_window", "era5_seamless",
        "era5", "era5_land", "era5_ensemble", "cerra",
    ),
    model_kind="reanalysis",
    notes={
        H: "Available variables depend on the model chosen (--model).\n"
        "ERA5 data is available from 1940, CERRA from 1985, and ECMWF IFS from 2017.",
    },
)
