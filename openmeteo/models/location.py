"""Resolved geographic location."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedLocation:
    latitude: float
    longitude: float
    name: str = ""
    country: str = ""

    @property
    def label(self) -> str:
        return ", ".join(p for p in (self.name, self.country) if p)
