"""met.no sunrise 3.0 client for sun and moon rise/set times."""

import logging
from datetime import date, datetime

from yrweather.config.defaults import DEFAULT_USER_AGENT, SUNRISE_BASE_URL
from yrweather.errors import ResponseValidationError
from yrweather.ingest.http import get_json
from yrweather.models.weather import Astronomy

logger = logging.getLogger(__name__)


class SunriseClient:
    def __init__(
        self,
        base_url: str = SUNRISE_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    def get_astronomy(self, lat: float, lon: float, day: date) -> Astronomy:
        """Fetch sun and moon events for one UTC calendar day."""
        sun = self._events("sun", lat, lon, day)
        moon = self._events("moon", lat, lon, day)
        return Astronomy(
            sunrise=_event_time(sun, "sunrise"),
            sunset=_event_time(sun, "sunset"),
            moonrise=_event_time(moon, "moonrise"),
            moonset=_event_time(moon, "moonset"),
        )

    def _events(self, body_name: str, lat: float, lon: float, day: date) -> dict:
        url = f"{self.base_url}/{body_name}"
        params = {
            "lat": f"{lat:.4f}",
            "lon": f"{lon:.4f}",
            "date": day.isoformat(),
            "offset": "+00:00",
        }
        payload, body = get_json(url, headers={"User-Agent": self.user_agent}, params=params)
        properties = payload.get("properties") if isinstance(payload, dict) else None
        if not isinstance(properties, dict):
            raise ResponseValidationError(
                f"Erroneous {body_name} response body: {body}", url=url, body=body
            )
        return properties


def _event_time(properties: dict, key: str) -> datetime | None:
    """Return the event time, or None when the body does not rise/set that day."""
    event = properties.get(key)
    value = event.get("time") if isinstance(event, dict) else None
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        logger.warning("Unparseable %s time: %r", key, value)
        return None
