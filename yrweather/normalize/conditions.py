"""Map one raw forecast time step onto a canonical Condition."""

import logging
from datetime import datetime

from yrweather.models.weather import ZERO_TIME, Condition, WeatherCode
from yrweather.models.yr import Period, TimeStep
from yrweather.normalize.symbols import lookup

logger = logging.getLogger(__name__)

MM_PER_M = 1000.0
WIND_SPEED_DIVISOR = 3.6


def map_condition(sample: TimeStep) -> Condition:
    """Normalize a time step. Never raises for a decoded sample.

    The category comes from the 6-hour summary, else the 1-hour summary.
    Precipitation prefers the 6-hour amount and falls back to the 1-hour
    amount. Fields the provider left out stay None.
    """
    data = sample.data
    details = data.instant.details
    code, symbol_code = _resolve_code(data.next_6_hours, data.next_1_hours)

    precip_mm = _first_present(
        _precipitation(data.next_6_hours), _precipitation(data.next_1_hours)
    )

    return Condition(
        time=parse_time(sample.time),
        code=code,
        temp_c=details.air_temperature,
        precip_m=precip_mm / MM_PER_M if precip_mm is not None else None,
        windspeed_kmph=(
            details.wind_speed / WIND_SPEED_DIVISOR
            if details.wind_speed is not None
            else None
        ),
        winddir_degree=_round(details.wind_from_direction),
        humidity=_round(details.relative_humidity),
        symbol_code=symbol_code,
    )


def parse_time(value: str) -> datetime:
    """Parse an RFC 3339 timestamp; unparseable input yields ZERO_TIME."""
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        logger.warning("Unparseable sample time %r, using zero time", value)
        return ZERO_TIME


def _resolve_code(*periods: Period | None) -> tuple[WeatherCode, str | None]:
    for period in periods:
        if period is None:
            continue
        code = lookup(period.symbol_code)
        if code is not None:
            return code, period.symbol_code
    return WeatherCode.UNKNOWN, None


def _precipitation(period: Period | None) -> float | None:
    return period.precipitation_amount if period is not None else None


def _first_present(*values: float | None) -> float | None:
    for value in values:
        if value is not None:
            return value
    return None


def _round(value: float | None) -> int | None:
    return int(round(value)) if value is not None else None
