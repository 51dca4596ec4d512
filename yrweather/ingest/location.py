"""Classify a free-form location string into a forecast query."""

import logging
import re

from yrweather.capabilities import Geocoder
from yrweather.errors import LocationNotFoundError
from yrweather.models.geocoding import LocationQuery

logger = logging.getLogger(__name__)

# Order matters: first match wins
LAT_LON_PATTERN = re.compile(r"-?[0-9]*(\.[0-9]+)?,-?[0-9]*(\.[0-9]+)?")
POSTAL_CODE_PATTERN = re.compile(r"[0-9].*")


def classify_location(location: str, geocoder: Geocoder | None = None) -> LocationQuery:
    """Turn a location string into query parameters and a display name.

    "lat,lon" pairs pass through as coordinates, strings starting with a digit
    are postal codes, anything else is a place name. Place names are resolved
    through ``geocoder`` when one is given, otherwise sent as ``q=``.
    """
    coords = _parse_lat_lon(location)
    if coords is not None:
        lat, lon = coords
        params = f"lat={lat}&lon={lon}"
        return LocationQuery(params=params, display_name=params)

    if POSTAL_CODE_PATTERN.fullmatch(location):
        params = f"zip={location}"
        return LocationQuery(params=params, display_name=params)

    if geocoder is None:
        params = f"q={location}"
        return LocationQuery(params=params, display_name=params)

    places = geocoder.search(location)
    if not places:
        raise LocationNotFoundError(f"No location found for {location!r}")
    best = places[0]
    logger.info("Resolved %r to %s (%s, %s)", location, best.display_name, best.lat, best.lon)
    return LocationQuery(
        params=f"lat={best.lat}&lon={best.lon}",
        display_name=best.display_name,
    )


def _parse_lat_lon(location: str) -> tuple[str, str] | None:
    """Return the (lat, lon) text if ``location`` is a numeric pair, else None.

    The pattern also admits degenerate strings such as "," or "-,-"; those
    fail numeric parsing and are left to the other rules.
    """
    if not LAT_LON_PATTERN.fullmatch(location):
        return None
    lat, lon = location.split(",")
    try:
        float(lat)
        float(lon)
    except ValueError:
        return None
    return lat, lon
