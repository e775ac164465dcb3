"""Built-in defaults, environment variable names and the config file template."""

VERSION = "1.1.0"
PROG = "openmeteo"

API_KEY_ENV = "OPENMETEO_API_KEY"
CONFIG_ENV = "OPENMETEO_CONFIG"
NO_COLOR_ENV = "NO_COLOR"

DEFAULT_TIMEZONE = "auto"
DEFAULT_FORECAST_SINCE_DAYS = 7
DEFAULT_GEO_COUNT = 5
DEFAULT_GEO_LANGUAGE = "en"

# key -> description, in display order
CONFIG_KEYS: dict[str, str] = {
    "api_key": "OpenMeteo API key for commercial access",
    "city": "Default city name (e.g. London)",
    "country": "Default country code, ISO 3166-1 alpha-2 (e.g. GB)",
    "lat": "Default latitude (e.g. 51.5)",
    "lon": "Default longitude (e.g. -0.12)",
    "format": "Default output format: human, porcelain, llm, raw",
    "temperature_unit": "Default temperature unit: celsius, fahrenheit",
    "wind_speed_unit": "Default wind speed unit: kmh, ms, mph, kn",
    "precipitation_unit": "Default precipitation unit: mm, inch",
    "timezone": "Default timezone: auto, or IANA name (e.g. Europe/London)",
    "verbose": "Enable verbose mode: true, false",
}

# shown by 'config show' for keys the file leaves unset
BUILTIN_VALUES: dict[str, str] = {
    "format": "human",
    "temperature_unit": "celsius",
    "wind_speed_unit": "kmh",
    "precipitation_unit": "mm",
    "timezone": DEFAULT_TIMEZONE,
    "verbose": "false",
}

CONFIG_TEMPLATE = """\
# openmeteo CLI configuration (YAML)
# Lines starting with '#' are comments.
#
# Precedence: CLI flags > environment variables > this file > built-in defaults
#
# Run 'openmeteo config help' for available keys and their descriptions.

# API key for commercial access (OPENMETEO_API_KEY takes precedence)
# api_key: your_key_here

# Default location
# city: London
# country: GB
# lat: 51.5
# lon: -0.12

# Default output format: human, porcelain, llm, raw
# format: human

# Default units
# temperature_unit: celsius
# wind_speed_unit: kmh
# precipitation_unit: mm

# Default timezone (IANA name or 'auto')
# timezone: auto

# Verbose mode: true or false
# verbose: false
"""
