"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from yrweather.config.defaults import (
    DEFAULT_BACKEND,
    DEFAULT_DAYS,
    DEFAULT_USER_AGENT,
    GEONAMES_BASE_URL,
    SUNRISE_BASE_URL,
    YR_BASE_URL,
)


class YrConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = YR_BASE_URL
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    debug: bool = False


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = False
    base_url: str = GEONAMES_BASE_URL
    username: str = ""  # falls back to GEONAMES_USERNAME
    max_rows: int = Field(default=1, ge=1)


class AstronomyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = False
    base_url: str = SUNRISE_BASE_URL


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    backend: str = DEFAULT_BACKEND
    days: int = Field(default=DEFAULT_DAYS, ge=0, le=10)
    yr: YrConfig = YrConfig()
    geocoding: GeocodingConfig = GeocodingConfig()
    astronomy: AstronomyConfig = AstronomyConfig()
