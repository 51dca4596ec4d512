"""met.no locationforecast client."""

import logging

import pydantic

from yrweather.config.defaults import DEFAULT_USER_AGENT, YR_BASE_URL
from yrweather.errors import DecodeError, ResponseValidationError
from yrweather.ingest.http import get_json
from yrweather.models.yr import FEATURE_TYPE, ForecastDocument

logger = logging.getLogger(__name__)


class ForecastClient:
    def __init__(
        self,
        base_url: str = YR_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        debug: bool = False,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.debug = debug

    def fetch_forecast(self, query: str) -> ForecastDocument:
        """Fetch and decode the forecast for a classified location query.

        One request, no retries. A well-formed JSON document whose ``type`` is
        not "Feature" (e.g. a provider error payload) is rejected with the raw
        body attached.
        """
        url = self.base_url + query
        payload, body = get_json(
            url, headers={"User-Agent": self.user_agent}, debug=self.debug
        )

        if not isinstance(payload, dict) or payload.get("type") != FEATURE_TYPE:
            logger.error("Erroneous forecast response from %s", url)
            raise ResponseValidationError(
                f"Erroneous response body: {body}", url=url, body=body
            )

        try:
            doc = ForecastDocument.model_validate(payload)
        except pydantic.ValidationError as e:
            logger.error("Forecast response from %s does not match schema: %s", url, e)
            raise DecodeError(
                f"Unable to decode forecast ({url}): {e}\nThe body is: {body}",
                url=url,
                body=body,
            ) from e

        if not doc.properties.timeseries:
            raise ResponseValidationError(
                f"Forecast has no timeseries: {body}", url=url, body=body
            )

        units = doc.properties.meta.units.air_temperature
        if units is not None and units != "celsius":
            logger.warning("Unexpected air temperature unit %r from %s", units, url)
        return doc
