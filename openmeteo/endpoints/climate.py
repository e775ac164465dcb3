"""CMIP6 Climate API (openmeteo climate)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, redirect, rule
from openmeteo.models.common import Category

CLIMATE_URL = "https://climate-api.open-meteo.com/v1/climate"

D = Category.DAILY

DAILY = parse_catalog("""
Temperature:
  temperature_2m_max            Maximum daily temperature
  temperature_2m_min            Minimum daily temperature
  temperature_2m_mean           Mean daily temperature
Humidity:
  relative_humidity_2m_max      Maximum relative humidity at 2m
  relative_humidity_2m_min      Minimum relative humidity at 2m
  relative_humidity_2m_mean     Mean relative humidity at 2m
  dew_point_2m_max              Maximum dew point at 2m
  dew_point_2m_min              Minimum dew point at 2m
  dew_point_2m_mean             Mean dew point at 2m
Precipitation:
  precipitation_sum             Total daily precipitation (mm)
  rain_sum                      Total daily rain (mm)
  snowfall_sum                  Total daily snowfall (cm)
Wind & Pressure:
  wind_speed_10m_mean           Mean daily wind speed at 10m
  wind_speed_10m_max            Maximum daily wind speed at 10m
  pressure_msl_mean             Mean sea level pressure (hPa)
  cloud_cover_mean              Mean cloud cover (%)
Radiation & Soil:
  shortwave_radiation_sum       Total daily solar radiation (MJ/m²)
  et0_fao_evapotranspiration    Daily reference ET₀ (mm)
  soil_moisture_0_to_10cm_mean  Mean soil moisture 0-10cm (m³/m³)
""")

NOT_CLIMATE = {"prefix": "not a climate daily variable. Use "}
NOT_IN_CLIMATE = "not available in the Climate API"
WIND_CHOICE = "'wind_speed_10m_mean' or 'wind_speed_10m_max'"

SUGGESTIONS = (
    redirect(D, "precipitation", "precipitation_sum", **NOT_CLIMATE),
    redirect(
        D, "temperature_2m", "temperature_2m_max", "temperature_2m_min", "temperature_2m_mean",
        **NOT_CLIMATE,
    ),
    redirect(D, "rain", "rain_sum", **NOT_CLIMATE),
    redirect(D, "snowfall", "snowfall_sum", **NOT_CLIMATE),
    rule(
        D, "wind_speed_10m", f"not a climate daily variable. Use {WIND_CHOICE}",
        "wind_speed_10m_mean", "wind_speed_10m_max",
    ),
    redirect(
        D, "relative_humidity_2m",
        "relative_humidity_2m_max", "relative_humidity_2m_min", "relative_humidity_2m_mean",
        **NOT_CLIMATE,
    ),
    redirect(
        D, "dew_point_2m", "dew_point_2m_max", "dew_point_2m_min", "dew_point_2m_mean",
        **NOT_CLIMATE,
    ),
    redirect(D, "cloud_cover", "cloud_cover_mean", **NOT_CLIMATE),
    redirect(D, "pressure_msl", "pressure_msl_mean", **NOT_CLIMATE),
    redirect(D, "shortwave_radiation", "shortwave_radiation_sum", **NOT_CLIMATE),
    redirect(D, "soil_moisture_0_to_10cm", "soil_moisture_0_to_10cm_mean", **NOT_CLIMATE),
    redirect(
        D, "et0_fao_evapotranspiration_sum", "et0_fao_evapotranspiration",
        prefix="incorrect suffix. Use ",
    ),
    rule(
        D,
        "weather_code|is_day|visibility|cloud_cover_low|cloud_cover_mid|cloud_cover_high"
        "|apparent_temperature|apparent_temperature_max|apparent_temperature_min"
        "|apparent_temperature_mean|wind_direction_10m|wind_direction_10m_dominant"
        "|wind_gusts_10m|wind_gusts_10m_max|precipitation_probability*"
        "|sunrise|sunset|daylight_duration",
        NOT_IN_CLIMATE,
    ),
    redirect(
        D, "surface_pressure", "pressure_msl_mean", prefix=f"{NOT_IN_CLIMATE}. Use ",
    ),
    rule(
        D, "wind_speed_10m_min", f"not available. Use {WIND_CHOICE}",
        "wind_speed_10m_mean", "wind_speed_10m_max",
    ),
)

DAILY_ONLY_API = "the Climate API only provides daily variables. Use --daily-params instead"

CLIMATE = EndpointSpec(
    name="climate",
    title="Climate change projections (CMIP6 Climate API)",
    base_url=CLIMATE_URL,
    catalog={D: DAILY},
    defaults={
        D: ("temperature_2m_max", "temperature_2m_min", "temperature_2m_mean", "precipitation_sum"),
    },
    suggestions=SUGGESTIONS,
    models=(
        "CMCC_CM2_VHR4", "FGOALS_f3_H", "HiRAM_SIT_HR", "MRI_AGCM3_2_S",
        "EC_Earth3P_HR", "MPI_ESM1_2_XR", "NICAM16_8S",
    ),
    model_kind="climate",
    date_bounds=("1950-01-01", "2050-12-31"),
    unsupported={
        Category.HOURLY: DAILY_ONLY_API,
        Category.CURRENT: DAILY_ONLY_API,
    },
)
