"""Pluggable collaborator interfaces.

Geocoding and astronomy are optional: a backend works without them and
must not fail when they do.
"""

from datetime import date
from typing import Protocol

from yrweather.models.geocoding import GeoPlace
from yrweather.models.weather import Astronomy, WeatherData


class Geocoder(Protocol):
    def search(self, name: str) -> list[GeoPlace]:
        """Return candidate places for a name, best match first."""


class AstronomyProvider(Protocol):
    def get_astronomy(self, lat: float, lon: float, day: date) -> Astronomy:
        """Return sun and moon events for a calendar day."""


class Backend(Protocol):
    def fetch(self, location: str, num_days: int) -> WeatherData:
        """Resolve ``location`` and return current conditions and a forecast."""
