"""Ensemble API (openmeteo ensemble)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, redirect, rule
from openmeteo.models.common import Category

ENSEMBLE_URL = "https://ensemble-api.open-meteo.com/v1/ensemble"

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
  visibility                    Horizontal visibility (m)
  pressure_msl                  Mean sea level pressure (hPa)
  surface_pressure              Surface pressure (hPa)
  cape                          Convective Available Potential Energy (J/kg)
Wind:
  wind_speed_10m                Wind speed at 10m
  wind_direction_10m            Wind direction at 10m
  wind_gusts_10m                Wind gusts at 10m
Radiation:
  shortwave_radiation           Global horizontal irradiance (W/m²)
  et0_fao_evapotranspiration    Reference ET₀ (FAO method)
""")

DAILY = parse_catalog("""
Temperature:
  temperature_2m_max            Maximum daily temperature
  temperature_2m_min            Minimum daily temperature
  temperature_2m_mean           Mean daily temperature
  apparent_temperature_max      Maximum feels-like temperature
  apparent_temperature_min      Minimum feels-like temperature
  apparent_temperature_mean     Mean feels-like temperature
Precipitation:
  precipitation_sum             Total daily precipitation (mm)
  rain_sum                      Total daily rain (mm)
  snowfall_sum                  Total daily snowfall (cm)
  precipitation_hours           Hours with precipitation
Wind:
  wind_speed_10m_max            Maximum daily wind speed at 10m
  wind_speed_10m_min            Minimum daily wind speed at 10m
  wind_speed_10m_mean           Mean daily wind speed at 10m
  wind_gusts_10m_max            Maximum daily wind gusts at 10m
  wind_gusts_10m_min            Minimum daily wind gusts at 10m
  wind_gusts_10m_mean           Mean daily wind gusts at 10m
  wind_direction_10m_dominant   Dominant wind direction (degrees)
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
Pressure & Stability:
  pressure_msl_max              Maximum sea level pressure (hPa)
  pressure_msl_min              Minimum sea level pressure (hPa)
  pressure_msl_mean             Mean sea level pressure (hPa)
  surface_pressure_max          Maximum surface pressure (hPa)
  surface_pressure_min          Minimum surface pressure (hPa)
  surface_pressure_mean         Mean surface pressure (hPa)
  cape_max                      Maximum CAPE (J/kg)
  cape_min                      Minimum CAPE (J/kg)
  cape_mean                     Mean CAPE (J/kg)
Radiation:
  shortwave_radiation_sum       Total daily solar radiation (MJ/m²)
""")

NOT_IN_ENSEMBLE = "not available in the Ensemble API"
FOR_HOURLY = {"prefix": "a daily variable. Use ", "suffix": " for hourly"}


def _spread(base: str) -> tuple[str, str, str]:
    return f"{base}_max", f"{base}_min", f"{base}_mean"


SUGGESTIONS = (
    redirect(D, "precipitation", "precipitation_sum"),
    *(
        redirect(D, base, *_spread(base))
        for base in (
            "temperature_2m", "apparent_temperature", "wind_speed_10m", "wind_gusts_10m",
        )
    ),
    redirect(D, "wind_direction_10m", "wind_direction_10m_dominant"),
    redirect(D, "rain", "rain_sum"),
    redirect(D, "snowfall", "snowfall_sum"),
    *(
        redirect(D, base, *_spread(base))
        for base in (
            "relative_humidity_2m", "dew_point_2m", "cloud_cover", "pressure_msl",
            "surface_pressure", "cape",
        )
    ),
    rule(D, "visibility", "only available as an hourly variable, not daily"),
    rule(D, "weather_code", "only available as an hourly variable in ensemble, not daily"),
    rule(D, "is_day", NOT_IN_ENSEMBLE),
    *(
        redirect(H, "|".join(_spread(base)), base, **FOR_HOURLY)
        for base in (
            "temperature_2m", "apparent_temperature", "wind_speed_10m", "wind_gusts_10m",
        )
    ),
    redirect(H, "precipitation_sum", "precipitation", **FOR_HOURLY),
    rule(H, "precipitation_hours", "only available as a daily variable"),
    redirect(H, "wind_direction_10m_dominant", "wind_direction_10m", **FOR_HOURLY),
    redirect(H, "rain_sum", "rain", **FOR_HOURLY),
    redirect(H, "snowfall_sum", "snowfall", **FOR_HOURLY),
    rule(H, "sunrise|sunset|daylight_duration|is_day", NOT_IN_ENSEMBLE),
)

ENSEMBLE = EndpointSpec(
    name="ensemble",
    title="Ensemble model forecasts (Ensemble API)",
    base_url=ENSEMBLE_URL,
    catalog={H: HOURLY, D: DAILY},
    defaults={H: ("temperature_2m", "precipitation", "weather_code", "wind_speed_10m")},
    suggestions=SUGGESTIONS,
    models=(
        "icon_seamless", "icon_global", "icon_eu", "icon_d2",
        "gfs_seamless", "gfs025", "gfs05", "gfs_graphcast025",
        "ecmwf_ifs025", "ecmwf_aifs025",
        "gem_global", "bom_access_global_ensemble",
        "ukmo_seamless", "ukmo_global_ensemble_20km", "ukmo_uk_ensemble_2km",
        "meteoswiss_icon_ch1", "meteoswiss_icon_ch2",
    ),
    model_kind="ensemble",
    forecast_days=(0, 35),
    past_days=(0, 92),
)
