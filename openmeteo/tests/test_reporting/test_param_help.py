"""Tests for the per-command variable reference."""

import json

import pytest

from openmeteo.config.schema import OutputFormat
from openmeteo.endpoints.air_quality import AIR_QUALITY
from openmeteo.endpoints.forecast import FORECAST
from openmeteo.errors import UsageError
from openmeteo.models.common import Category
from openmeteo.reporting.param_help import render_param_help


class TestParamHelp:
    def test_human(self):
        lines = render_param_help(FORECAST, Category.HOURLY, OutputFormat.HUMAN).splitlines()
        assert lines[0] == "Hourly variables for 'openmeteo weather':"
        assert lines[2] == "Temperature & Humidity:"
        assert lines[3].startswith("  temperature_2m ")
        assert lines[3].endswith("Air temperature at 2m height")
        assert lines[-1] == (
            "Usage: --hourly-params=temperature_2m,relative_humidity_2m,dew_point_2m"
        )

    def test_porcelain(self):
        text = render_param_help(FORECAST, Category.HOURLY, OutputFormat.PORCELAIN)
        assert text.splitlines()[0] == "temperature_2m=Air temperature at 2m height"

    def test_llm(self):
        lines = render_param_help(FORECAST, Category.HOURLY, OutputFormat.LLM).splitlines()
        assert lines[0] == "variable\tgroup\tdescription"
        assert lines[1] == "temperature_2m\tTemperature & Humidity\tAir temperature at 2m height"

    def test_raw_is_json(self):
        entries = json.loads(render_param_help(FORECAST, Category.DAILY, OutputFormat.RAW))
        names = [e["name"] for e in entries]
        assert "temperature_2m_max" in names
        assert set(entries[0]) == {"name", "group", "description"}

    def test_every_catalog_name_listed(self):
        text = render_param_help(FORECAST, Category.CURRENT, OutputFormat.PORCELAIN)
        listed = {line.split("=", 1)[0] for line in text.splitlines()}
        assert listed == FORECAST.known(Category.CURRENT)

    def test_missing_category(self):
        with pytest.raises(UsageError, match="'air-quality' has no daily variables"):
            render_param_help(AIR_QUALITY, Category.DAILY, OutputFormat.HUMAN)
