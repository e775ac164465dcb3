"""Fixture loading shared by the test modules."""

import json
from datetime import date
from pathlib import Path

from openmeteo.models.response import ApiResponse, decode_response

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TODAY = date(2024, 6, 1)


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def make_response(body: dict) -> ApiResponse:
    return decode_response(json.dumps(body))
