"""GeoNames search client used to turn free-text place names into coordinates."""

import logging
import os

from yrweather.config.defaults import DEFAULT_USER_AGENT, GEONAMES_BASE_URL
from yrweather.errors import DecodeError, ResponseValidationError
from yrweather.ingest.http import get_json
from yrweather.models.geocoding import GeoPlace

logger = logging.getLogger(__name__)


class GeoNamesClient:
    def __init__(
        self,
        username: str | None = None,
        base_url: str = GEONAMES_BASE_URL,
        max_rows: int = 1,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.username = username or os.environ.get("GEONAMES_USERNAME", "")
        self.base_url = base_url
        self.max_rows = max_rows
        self.user_agent = user_agent

    def search(self, name: str) -> list[GeoPlace]:
        """Return the best matches for ``name``, best first. May be empty."""
        params = {"q": name, "maxRows": self.max_rows, "username": self.username}
        payload, body = get_json(
            self.base_url, headers={"User-Agent": self.user_agent}, params=params
        )
        if not isinstance(payload, dict):
            raise ResponseValidationError(
                f"Unexpected geocoding response: {body}", url=self.base_url, body=body
            )

        # GeoNames reports failures (bad username, quota) in a "status" object
        status = payload.get("status")
        if status is not None:
            message = status.get("message", "unknown error") if isinstance(status, dict) else status
            logger.error("GeoNames error for %r: %s", name, message)
            raise ResponseValidationError(
                f"Geocoding failed: {message}", url=self.base_url, body=body
            )

        try:
            return [_parse_place(p) for p in payload.get("geonames", [])]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DecodeError(
                f"Unable to decode geocoding result: {e}", url=self.base_url, body=body
            ) from e


def _parse_place(raw: dict) -> GeoPlace:
    # lat/lng arrive as strings
    return GeoPlace(
        name=raw.get("name") or raw.get("toponymName", ""),
        admin_region=raw.get("adminName1", ""),
        country=raw.get("countryName", ""),
        lat=float(raw["lat"]),
        lon=float(raw["lng"]),
    )
