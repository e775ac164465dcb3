"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class OutputFormat(StrEnum):
    HUMAN = "human"
    PORCELAIN = "porcelain"
    LLM = "llm"
    RAW = "raw"


class TemperatureUnit(StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WindSpeedUnit(StrEnum):
    KMH = "kmh"
    MS = "ms"
    MPH = "mph"
    KN = "kn"


class PrecipitationUnit(StrEnum):
    MM = "mm"
    INCH = "inch"


class LengthUnit(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class CellSelection(StrEnum):
    LAND = "land"
    SEA = "sea"
    NEAREST = "nearest"


class AirQualityDomain(StrEnum):
    AUTO = "auto"
    CAMS_EUROPE = "cams_europe"
    CAMS_GLOBAL = "cams_global"


class TemporalResolution(StrEnum):
    HOURLY = "hourly"
    NATIVE = "native"


class FileConfig(BaseModel):
    """Contents of the YAML config file. Every key is optional."""

    model_config = {"extra": "forbid"}

    api_key: str | None = None
    city: str | None = None
    country: str | None = None
    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=180.0)
    format: OutputFormat | None = None
    temperature_unit: TemperatureUnit | None = None
    wind_speed_unit: WindSpeedUnit | None = None
    precipitation_unit: PrecipitationUnit | None = None
    timezone: str | None = None
    verbose: bool | None = None


class AppConfig(BaseModel):
    """Effective settings for one invocation, after applying precedence."""

    model_config = {"extra": "forbid", "frozen": True}

    api_key: str | None = None
    output_format: OutputFormat = OutputFormat.HUMAN
    verbose: bool = False
    color: bool = False
    city: str | None = None
    country: str | None = None
    lat: float | None = None
    lon: float | None = None
    temperature_unit: TemperatureUnit | None = None
    wind_speed_unit: WindSpeedUnit | None = None
    precipitation_unit: PrecipitationUnit | None = None
    timezone: str | None = None
