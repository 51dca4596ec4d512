"""yr.no backend: location string in, normalized WeatherData out."""

import logging

from yrweather.capabilities import AstronomyProvider, Geocoder
from yrweather.config.schema import AppConfig
from yrweather.ingest.geonames_client import GeoNamesClient
from yrweather.ingest.location import classify_location
from yrweather.ingest.sunrise_client import SunriseClient
from yrweather.ingest.yr_client import ForecastClient
from yrweather.models.weather import Day, WeatherData
from yrweather.normalize.conditions import map_condition
from yrweather.normalize.days import group_by_day
from yrweather.registry import register_backend

logger = logging.getLogger(__name__)

BACKEND_NAME = "yr"


class YrBackend:
    """Resolves a location, fetches the met.no forecast and normalizes it.

    Geocoding and astronomy are optional collaborators. Any failure on the
    primary path (resolution or forecast fetch) propagates as a BackendError;
    astronomy failures are logged and leave Day.astronomy unset.
    """

    def __init__(
        self,
        forecast_client: ForecastClient,
        geocoder: Geocoder | None = None,
        astronomy: AstronomyProvider | None = None,
    ):
        self.forecast_client = forecast_client
        self.geocoder = geocoder
        self.astronomy = astronomy

    @classmethod
    def from_config(cls, config: AppConfig) -> "YrBackend":
        forecast_client = ForecastClient(
            base_url=config.yr.base_url,
            user_agent=config.yr.user_agent,
            debug=config.yr.debug,
        )
        geocoder = None
        if config.geocoding.enabled:
            geocoder = GeoNamesClient(
                username=config.geocoding.username,
                base_url=config.geocoding.base_url,
                max_rows=config.geocoding.max_rows,
                user_agent=config.yr.user_agent,
            )
        astronomy = None
        if config.astronomy.enabled:
            astronomy = SunriseClient(
                base_url=config.astronomy.base_url,
                user_agent=config.yr.user_agent,
            )
        return cls(forecast_client, geocoder=geocoder, astronomy=astronomy)

    def fetch(self, location: str, num_days: int) -> WeatherData:
        query = classify_location(location, self.geocoder)
        doc = self.forecast_client.fetch_forecast(query.params)
        coordinates = doc.lat_lon
        timeseries = doc.properties.timeseries

        current = map_condition(timeseries[0])
        if num_days == 0:
            return WeatherData(
                location=query.display_name, current=current, coordinates=coordinates
            )

        # The current sample's day is the first forecast day
        forecast = group_by_day((map_condition(s) for s in timeseries), num_days)
        if self.astronomy is not None:
            forecast = [self._with_astronomy(day, *coordinates) for day in forecast]

        logger.info(
            "Fetched %s: %d samples, %d forecast days",
            query.display_name, len(timeseries), len(forecast),
        )
        return WeatherData(
            location=query.display_name,
            current=current,
            forecast=forecast,
            coordinates=coordinates,
        )

    def _with_astronomy(self, day: Day, lat: float, lon: float) -> Day:
        try:
            astro = self.astronomy.get_astronomy(lat, lon, day.date)
        except Exception as e:
            logger.warning(
                "Astronomy lookup failed for %s: %s", day.date, e, exc_info=True
            )
            return day
        return Day(date=day.date, slots=day.slots, astronomy=astro)


register_backend(BACKEND_NAME, YrBackend.from_config)
