"""Marine API (openmeteo marine)."""

from openmeteo.endpoints.base import EndpointSpec, parse_catalog, redirect, rule
from openmeteo.models.common import Category

MARINE_URL = "https://marine-api.open-meteo.com/v1/marine"

C, H, D = Category.CURRENT, Category.HOURLY, Category.DAILY

HOURLY = parse_catalog("""
Waves (combined sea):
  wave_height                   Significant wave height (m)
  wave_direction                Mean wave direction (degrees)
  wave_period                   Mean wave period (s)
  wave_peak_period              Peak wave period (s)
Wind Waves:
  wind_wave_height              Wind-generated wave height (m)
  wind_wave_direction           Wind wave direction (degrees)
  wind_wave_period              Wind wave period (s)
  wind_wave_peak_period         Wind wave peak period (s)
Swell (primary):
  swell_wave_height             Primary swell height (m)
  swell_wave_direction          Primary swell direction (degrees)
  swell_wave_period             Primary swell period (s)
  swell_wave_peak_period        Primary swell peak period (s)
Swell (secondary / tertiary):
  secondary_swell_wave_height   Secondary swell height
  secondary_swell_wave_direction Secondary swell direction
  secondary_swell_wave_period   Secondary swell period
  tertiary_swell_wave_height    Tertiary swell height
  tertiary_swell_wave_direction Tertiary swell direction
  tertiary_swell_wave_period    Tertiary swell period
Ocean:
  ocean_current_velocity        Ocean current speed (km/h)
  ocean_current_direction       Ocean current direction (degrees)
  sea_surface_temperature       Sea surface temperature (°C)
  sea_level_height_msl          Sea level height above MSL (m)
  invert_barometer_height       Inverted barometer effect (m)
""")

DAILY = parse_catalog("""
Waves (combined):
  wave_height_max               Max daily wave height (m)
  wave_direction_dominant       Dominant wave direction (degrees)
  wave_period_max               Max daily wave period (s)
Wind Waves:
  wind_wave_height_max          Max daily wind wave height
  wind_wave_direction_dominant  Dominant wind wave direction
  wind_wave_period_max          Max daily wind wave period
  wind_wave_peak_period_max     Max daily wind wave peak period
Swell:
  swell_wave_height_max         Max daily swell height
  swell_wave_direction_dominant Dominant swell direction
  swell_wave_period_max         Max daily swell period
  swell_wave_peak_period_max    Max daily swell peak period
""")

CURRENT = parse_catalog("""
  wave_height                   Current significant wave height
  wave_direction                Current mean wave direction
  wave_period                   Current mean wave period
  wave_peak_period              Current peak wave period
  wind_wave_height              Current wind wave height
  wind_wave_direction           Current wind wave direction
  wind_wave_period              Current wind wave period
  wind_wave_peak_period         Current wind wave peak period
  swell_wave_height             Current swell height
  swell_wave_direction          Current swell direction
  swell_wave_period             Current swell period
  swell_wave_peak_period        Current swell peak period
  ocean_current_velocity        Current ocean current speed
  ocean_current_direction       Current ocean current direction
  sea_surface_temperature       Current sea surface temperature
""")

# hourly name -> daily aggregate
DAILY_FORMS = {
    f"{prefix}wave_{measure}": f"{prefix}wave_{measure}_{stat}"
    for prefix in ("", "wind_", "swell_")
    for measure, stat in (("height", "max"), ("direction", "dominant"), ("period", "max"))
}
DAILY_FORMS["wind_wave_peak_period"] = "wind_wave_peak_period_max"
DAILY_FORMS["swell_wave_peak_period"] = "swell_wave_peak_period_max"

HOURLY_OR_CURRENT = "only available as an hourly/current variable, not daily"

SUGGESTIONS = (
    *(redirect(D, hourly, daily) for hourly, daily in DAILY_FORMS.items()),
    rule(
        D, "wave_peak_period",
        "not a daily variable. Use 'wind_wave_peak_period_max' or 'swell_wave_peak_period_max'",
        "wind_wave_peak_period_max", "swell_wave_peak_period_max",
    ),
    rule(
        D,
        "ocean_current_velocity|ocean_current_direction|sea_surface_temperature"
        "|sea_level_height_msl|invert_barometer_height"
        "|secondary_swell_wave_*|tertiary_swell_wave_*",
        HOURLY_OR_CURRENT,
    ),
    *(
        redirect(H, daily, hourly, prefix="a daily variable. Use ", suffix=" for hourly")
        for hourly, daily in DAILY_FORMS.items()
    ),
    rule(
        C, "|".join(DAILY_FORMS.values()),
        "a daily variable, not available for current conditions",
    ),
)

MARINE = EndpointSpec(
    name="marine",
    title="Marine / wave forecasts (Marine API)",
    base_url=MARINE_URL,
    catalog={C: CURRENT, H: HOURLY, D: DAILY},
    defaults={
        C: (
            "wave_height", "wave_direction", "wave_period", "wind_wave_height",
            "wind_wave_direction", "wind_wave_period", "swell_wave_height",
            "swell_wave_direction", "swell_wave_period", "sea_surface_temperature",
            "ocean_current_velocity", "ocean_current_direction",
        ),
        H: (
            "wave_height", "wave_direction", "wave_period", "wind_wave_height",
            "wind_wave_direction", "swell_wave_height", "swell_wave_direction",
            "ocean_current_velocity", "ocean_current_direction", "sea_surface_temperature",
        ),
    },
    suggestions=SUGGESTIONS,
    models=(
        "best_match", "meteofrance_wave", "meteofrance_currents", "ewam", "gwam",
        "ecmwf_wam", "ecmwf_wam025", "ncep_gfswave025", "ncep_gfswave016", "era5_ocean",
    ),
    model_kind="marine",
    forecast_days=(0, 16),
    past_days=(0, 92),
)
