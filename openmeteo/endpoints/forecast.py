"""Forecast API (openmeteo weather)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, redirect, rule
from openmeteo.models.common import Category

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

C, H, D = Category.CURRENT, Category.HOURLY, Category.DAILY

HOURLY = parse_catalog("""
Temperature & Humidity:
  temperature_2m                Air temperature at 2m height
  relative_humidity_2m          Relative humidity at 2m
  dew_point_2m                  Dew point at 2m
  apparent_temperature          Feels-like temperature (wind chill / heat index)
  wet_bulb_temperature_2m       Wet bulb temperature at 2m
Precipitation:
  precipitation                 Total precipitation (rain + showers + snow)
  precipitation_probability     Probability of precipitation (%)
  rain                          Rain amount
  showers                       Convective precipitation (short, intense)
  snowfall                      Snowfall amount (cm)
  snow_depth                    Snow depth on ground (m)
Weather:
  weather_code                  WMO weather interpretation code
  cloud_cover                   Total cloud cover (%)
  cloud_cover_low               Low-level cloud cover (%)
  cloud_cover_mid               Mid-level cloud cover (%)
  cloud_cover_high              High-level cloud cover (%)
  visibility                    Horizontal visibility (m)
  is_day                        1 if daytime, 0 if night
Pressure:
  pressure_msl                  Mean sea level pressure (hPa)
  surface_pressure              Surface pressure (hPa)
Wind:
  wind_speed_10m                Wind speed at 10m (km/h)
  wind_speed_80m                Wind speed at 80m
  wind_speed_120m               Wind speed at 120m
  wind_speed_180m               Wind speed at 180m
  wind_direction_10m            Wind direction at 10m (degrees)
  wind_direction_80m            Wind direction at 80m
  wind_direction_120m           Wind direction at 120m
  wind_direction_180m           Wind direction at 180m
  wind_gusts_10m                Wind gusts at 10m
Temperature at Height:
  temperature_80m               Temperature at 80m
  temperature_120m              Temperature at 120m
  temperature_180m              Temperature at 180m
Solar Radiation:
  shortwave_radiation           Global horizontal irradiance (W/m²)
  direct_radiation              Direct beam radiation (W/m²)
  diffuse_radiation             Diffuse horizontal irradiance (W/m²)
  direct_normal_irradiance      Direct normal irradiance DNI (W/m²)
  global_tilted_irradiance      Tilted surface irradiance (W/m²)
  terrestrial_radiation         Terrestrial long-wave radiation (W/m²)
  sunshine_duration             Seconds of sunshine per hour
Soil:
  soil_temperature_0cm          Soil temperature at surface
  soil_temperature_6cm          Soil temperature at 6cm depth
  soil_temperature_18cm         Soil temperature at 18cm depth
  soil_temperature_54cm         Soil temperature at 54cm depth
  soil_moisture_0_to_1cm        Soil moisture 0-1cm (m³/m³)
  soil_moisture_1_to_3cm        Soil moisture 1-3cm
  soil_moisture_3_to_9cm        Soil moisture 3-9cm
  soil_moisture_9_to_27cm       Soil moisture 9-27cm
  soil_moisture_27_to_81cm      Soil moisture 27-81cm
Evapotranspiration:
  evapotranspiration            Actual evapotranspiration (mm)
  et0_fao_evapotranspiration    Reference ET₀ (FAO method)
  vapour_pressure_deficit       Vapour pressure deficit (kPa)
Atmosphere:
  cape                          Convective Available Potential Energy (J/kg)
  lifted_index                  Atmospheric instability index
  convective_inhibition         Convective inhibition CIN (J/kg)
  freezing_level_height         Height of 0°C isotherm (m)
  boundary_layer_height         Planetary boundary layer height (m)
UV:
  uv_index                      UV index
  uv_index_clear_sky            UV index under clear sky conditions
""")

DAILY = parse_catalog("""
Temperature:
  temperature_2m_max            Maximum daily temperature
  temperature_2m_min            Minimum daily temperature
  apparent_temperature_max      Maximum daily feels-like temperature
  apparent_temperature_min      Minimum daily feels-like temperature
Precipitation:
  precipitation_sum             Total daily precipitation (mm)
  rain_sum                      Total daily rain (mm)
  showers_sum                   Total daily convective precipitation (mm)
  snowfall_sum                  Total daily snowfall (cm)
  precipitation_hours           Hours with precipitation
  precipitation_probability_max Max precipitation probability (%)
  precipitation_probability_min Min precipitation probability (%)
  precipitation_probability_mean Mean precipitation probability (%)
Wind:
  wind_speed_10m_max            Maximum daily wind speed at 10m
  wind_gusts_10m_max            Maximum daily wind gusts at 10m
  wind_direction_10m_dominant   Dominant wind direction at 10m (degrees)
Sun & Daylight:
  weather_code                  WMO code for dominant weather
  sunrise                       Sunrise time (ISO 8601)
  sunset                        Sunset time (ISO 8601)
  daylight_duration             Daylight duration (seconds)
  sunshine_duration             Sunshine duration (seconds)
UV:
  uv_index_max                  Maximum daily UV index
  uv_index_clear_sky_max        Maximum UV index under clear sky
Radiation & Evapotranspiration:
  shortwave_radiation_sum       Total daily solar radiation (MJ/m²)
  et0_fao_evapotranspiration    Daily reference ET₀ (mm)
""")

CURRENT = parse_catalog("""
  temperature_2m                Current temperature at 2m
  relative_humidity_2m          Current relative humidity at 2m
  apparent_temperature          Current feels-like temperature
  is_day                        1 if daytime, 0 if night
  weather_code                  WMO weather interpretation code
  cloud_cover                   Current cloud cover (%)
  pressure_msl                  Mean sea level pressure (hPa)
  surface_pressure              Surface pressure (hPa)
  wind_speed_10m                Current wind speed at 10m
  wind_direction_10m            Current wind direction at 10m (degrees)
  wind_gusts_10m                Current wind gusts at 10m
  precipitation                 Current precipitation (mm)
  rain                          Current rain (mm)
  showers                       Current convective precipitation (mm)
  snowfall                      Current snowfall (cm)
""")

HOURLY_ONLY = "only available as an hourly variable, not daily"
HOURLY_OR_CURRENT = "only available as an hourly/current variable, not daily"
DAILY_ONLY = "only available as a daily variable"
FOR_HOURLY = {"prefix": "a daily variable. Use ", "suffix": " for hourly"}

SUGGESTIONS = (
    redirect(D, "precipitation", "precipitation_sum"),
    redirect(
        D, "precipitation_probability",
        "precipitation_probability_max", "precipitation_probability_min",
        "precipitation_probability_mean",
    ),
    redirect(D, "temperature_2m", "temperature_2m_max", "temperature_2m_min"),
    redirect(D, "apparent_temperature", "apparent_temperature_max", "apparent_temperature_min"),
    redirect(D, "wind_speed_10m", "wind_speed_10m_max"),
    redirect(D, "wind_gusts_10m", "wind_gusts_10m_max"),
    redirect(D, "wind_direction_10m", "wind_direction_10m_dominant"),
    redirect(D, "rain", "rain_sum"),
    redirect(D, "showers", "showers_sum"),
    redirect(D, "snowfall", "snowfall_sum"),
    rule(D, "relative_humidity_2m", HOURLY_OR_CURRENT),
    rule(D, "dew_point_2m", HOURLY_ONLY),
    rule(D, "cloud_cover|cloud_cover_low|cloud_cover_mid|cloud_cover_high", HOURLY_OR_CURRENT),
    rule(D, "pressure_msl|surface_pressure", HOURLY_OR_CURRENT),
    rule(D, "visibility", HOURLY_ONLY),
    rule(D, "is_day", HOURLY_OR_CURRENT),
    redirect(H, "temperature_2m_max|temperature_2m_min", "temperature_2m", **FOR_HOURLY),
    redirect(
        H, "apparent_temperature_max|apparent_temperature_min", "apparent_temperature",
        **FOR_HOURLY,
    ),
    redirect(H, "precipitation_sum", "precipitation", **FOR_HOURLY),
    redirect(
        H,
        "precipitation_probability_max|precipitation_probability_min"
        "|precipitation_probability_mean",
        "precipitation_probability",
        **FOR_HOURLY,
    ),
    rule(H, "precipitation_hours", DAILY_ONLY),
    redirect(H, "wind_speed_10m_max", "wind_speed_10m", **FOR_HOURLY),
    redirect(H, "wind_gusts_10m_max", "wind_gusts_10m", **FOR_HOURLY),
    redirect(H, "wind_direction_10m_dominant", "wind_direction_10m", **FOR_HOURLY),
    redirect(H, "rain_sum", "rain", **FOR_HOURLY),
    redirect(H, "showers_sum", "showers", **FOR_HOURLY),
    redirect(H, "snowfall_sum", "snowfall", **FOR_HOURLY),
    rule(H, "sunrise|sunset|daylight_duration", DAILY_ONLY),
    rule(
        C,
        "temperature_2m_max|temperature_2m_min|apparent_temperature_max|apparent_temperature_min",
        "a daily variable, not available for current conditions",
    ),
    *(
        redirect(C, f"{base}_sum", base, prefix="a daily variable. Use ", suffix=" for current")
        for base in ("precipitation", "rain", "showers", "snowfall")
    ),
    rule(C, "precipitation_probability*", "not available for current conditions"),
    rule(C, "sunrise|sunset|daylight_duration|precipitation_hours", DAILY_ONLY),
)

FORECAST = EndpointSpec(
    name="weather",
    title="Weather forecast (Forecast API)",
    base_url=FORECAST_URL,
    catalog={C: CURRENT, H: HOURLY, D: DAILY},
    defaults={
        C: (
            "temperature_2m", "relative_humidity_2m", "apparent_temperature", "is_day",
            "weather_code", "cloud_cover", "wind_speed_10m", "wind_direction_10m",
            "wind_gusts_10m",
        ),
        H: (
            "temperature_2m", "relative_humidity_2m", "apparent_temperature",
            "precipitation_probability", "precipitation", "weather_code", "cloud_cover",
            "wind_speed_10m", "wind_direction_10m",
        ),
        D: (
            "weather_code", "temperature_2m_max", "temperature_2m_min",
            "apparent_temperature_max", "apparent_temperature_min", "sunrise", "sunset",
            "precipitation_sum", "precipitation_probability_max", "wind_speed_10m_max",
            "wind_gusts_10m_max",
        ),
    },
    suggestions=SUGGESTIONS,
    forecast_days=(0, 16),
    past_days=(0, 92),
    notes={
        C: "Current conditions are a snapshot of the latest available data\n"
        "(typically updated every 15 minutes).",
    },
)
