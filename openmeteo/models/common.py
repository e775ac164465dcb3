"""Shared enums used across models and endpoints."""

from enum import StrEnum


class Category(StrEnum):
    CURRENT = "current"
    HOURLY = "hourly"
    DAILY = "daily"

    @property
    def flag(self) -> str:
        return f"--{self.value}-params"

    @property
    def units_key(self) -> str:
        return f"{self.value}_units"
