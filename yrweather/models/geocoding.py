"""Location resolution models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPlace:
    name: str
    admin_region: str
    country: str
    lat: float
    lon: float

    @property
    def display_name(self) -> str:
        parts = [self.name, self.admin_region, self.country]
        return ", ".join(p for p in parts if p)


@dataclass(frozen=True)
class LocationQuery:
    params: str  # e.g. "lat=59.91&lon=10.75", "zip=0150", "q=Oslo"
    display_name: str
