"""Canonical weather models shared by every backend and the display front end."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum

# Stand-in for timestamps that could not be parsed
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)


class WeatherCode(StrEnum):
    UNKNOWN = "unknown"
    SUNNY = "sunny"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    VERY_CLOUDY = "very_cloudy"
    FOG = "fog"
    LIGHT_SHOWERS = "light_showers"
    LIGHT_SLEET_SHOWERS = "light_sleet_showers"
    LIGHT_SLEET = "light_sleet"
    THUNDERY_SHOWERS = "thundery_showers"
    LIGHT_SNOW = "light_snow"
    HEAVY_SNOW = "heavy_snow"
    LIGHT_RAIN = "light_rain"
    HEAVY_SHOWERS = "heavy_showers"
    HEAVY_RAIN = "heavy_rain"
    LIGHT_SNOW_SHOWERS = "light_snow_showers"
    HEAVY_SNOW_SHOWERS = "heavy_snow_showers"
    THUNDERY_HEAVY_RAIN = "thundery_heavy_rain"
    THUNDERY_SNOW_SHOWERS = "thundery_snow_showers"


@dataclass(frozen=True)
class Condition:
    """Weather at one instant, normalized.

    Optional values are None when the provider did not report them:
    - temperature in Celsius
    - precipitation in metres
    - wind speed in km/h, direction in degrees
    - relative humidity in percent
    """

    time: datetime
    code: WeatherCode
    temp_c: float | None = None
    precip_m: float | None = None
    windspeed_kmph: float | None = None
    winddir_degree: int | None = None
    humidity: int | None = None
    symbol_code: str | None = None


@dataclass(frozen=True)
class Astronomy:
    sunrise: datetime | None = None
    sunset: datetime | None = None
    moonrise: datetime | None = None
    moonset: datetime | None = None


@dataclass(frozen=True)
class Day:
    date: date
    slots: list[Condition] = field(default_factory=list)
    astronomy: Astronomy | None = None


@dataclass(frozen=True)
class WeatherData:
    location: str
    current: Condition
    forecast: list[Day] = field(default_factory=list)
    coordinates: tuple[float, float] | None = None  # (lat, lon)
