"""End-to-end tests for the yr backend."""

from datetime import UTC, date, datetime
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from yrweather.backend import YrBackend
from yrweather.config.schema import AppConfig
from yrweather.errors import (
    LocationNotFoundError,
    ResponseValidationError,
    TransportError,
)
from yrweather.ingest.geonames_client import GeoNamesClient
from yrweather.ingest.sunrise_client import SunriseClient
from yrweather.ingest.yr_client import ForecastClient
from yrweather.models.geocoding import GeoPlace
from yrweather.models.weather import Astronomy, WeatherCode
from yrweather.models.yr import ForecastDocument

YR = "https://test-yr.example.com/compact"
GEO = "https://test-geo.example.com/searchJSON"
SUN = "https://test-sun.example.com/sunrise/3.0"


@pytest.fixture
def yr_config() -> AppConfig:
    return AppConfig(
        yr={"base_url": YR + "?"},
        geocoding={"base_url": GEO, "username": "demo"},
        astronomy={"base_url": SUN},
    )


def _mock_client(document: dict) -> MagicMock:
    client = MagicMock(spec=ForecastClient)
    client.fetch_forecast.return_value = ForecastDocument.model_validate(document)
    return client


class TestFetch:
    @respx.mock
    def test_current_and_forecast(self, yr_config: AppConfig, oslo_forecast: dict):
        respx.get(YR, params={"lat": "59.91", "lon": "10.75"}).mock(
            return_value=httpx.Response(200, json=oslo_forecast)
        )
        backend = YrBackend.from_config(yr_config)

        data = backend.fetch("59.91,10.75", 3)
        assert data.location == "lat=59.91&lon=10.75"
        assert data.coordinates == (59.9139, 10.7522)
        assert data.current.time == datetime(2026, 10, 16, 18, tzinfo=UTC)
        assert data.current.code == WeatherCode.LIGHT_RAIN
        assert [d.date for d in data.forecast] == [
            date(2026, 10, 16),
            date(2026, 10, 17),
            date(2026, 10, 18),
        ]
        assert [len(d.slots) for d in data.forecast] == [2, 3, 2]
        assert data.forecast[1].slots[2].code == WeatherCode.THUNDERY_HEAVY_RAIN
        assert data.forecast[0].astronomy is None

    @respx.mock
    def test_zero_days(self, yr_config: AppConfig, oslo_forecast: dict):
        respx.get(YR).mock(return_value=httpx.Response(200, json=oslo_forecast))
        backend = YrBackend.from_config(yr_config)

        data = backend.fetch("0150", 0)
        assert data.location == "zip=0150"
        assert data.current.temp_c == pytest.approx(8.4)
        assert data.forecast == []

    def test_five_days_three_requested(self, make_document):
        document = make_document([
            ("2026-10-16T12:00:00Z", "clearsky_day"),
            ("2026-10-17T12:00:00Z", "cloudy"),
            ("2026-10-18T12:00:00Z", "fog"),
            ("2026-10-19T12:00:00Z", "rain"),
            ("2026-10-20T12:00:00Z", "snow"),
        ])
        backend = YrBackend(_mock_client(document))

        data = backend.fetch("59.91,10.75", 3)
        assert len(data.forecast) == 3
        assert data.forecast[0].slots[0] == data.current
        assert [d.date for d in data.forecast] == [
            date(2026, 10, 16),
            date(2026, 10, 17),
            date(2026, 10, 18),
        ]

    def test_query_passed_to_client(self, make_document):
        client = _mock_client(make_document([("2026-10-16T12:00:00Z", "fog")]))
        backend = YrBackend(client)

        backend.fetch("Bergen", 1)
        client.fetch_forecast.assert_called_once_with("q=Bergen")


class TestFetchFailures:
    @respx.mock
    def test_wrong_sentinel_fails(self, yr_config: AppConfig, oslo_forecast: dict):
        oslo_forecast["type"] = "FeatureCollection"
        respx.get(YR).mock(return_value=httpx.Response(200, json=oslo_forecast))
        backend = YrBackend.from_config(yr_config)

        with pytest.raises(ResponseValidationError):
            backend.fetch("59.91,10.75", 3)

    @respx.mock
    def test_transport_failure(self, yr_config: AppConfig):
        respx.get(YR).mock(side_effect=httpx.ConnectError("unreachable"))
        backend = YrBackend.from_config(yr_config)

        with pytest.raises(TransportError):
            backend.fetch("59.91,10.75", 3)

    def test_unresolvable_place_skips_forecast(self):
        client = MagicMock(spec=ForecastClient)
        geocoder = MagicMock(spec=GeoNamesClient)
        geocoder.search.return_value = []
        backend = YrBackend(client, geocoder=geocoder)

        with pytest.raises(LocationNotFoundError):
            backend.fetch("Atlantis", 3)
        client.fetch_forecast.assert_not_called()


class TestGeocoding:
    @respx.mock
    def test_geocoded_fetch(self, yr_config: AppConfig, oslo_forecast: dict):
        config = yr_config.model_copy(
            update={"geocoding": yr_config.geocoding.model_copy(update={"enabled": True})}
        )
        geo_route = respx.get(GEO, params={"q": "Oslo", "maxRows": "1", "username": "demo"}).mock(
            return_value=httpx.Response(200, json={"geonames": [{
                "name": "Oslo", "adminName1": "Oslo", "countryName": "Norway",
                "lat": "59.91273", "lng": "10.74609",
            }]})
        )
        yr_route = respx.get(YR, params={"lat": "59.91273", "lon": "10.74609"}).mock(
            return_value=httpx.Response(200, json=oslo_forecast)
        )

        data = YrBackend.from_config(config).fetch("Oslo", 1)
        assert geo_route.call_count == 1
        assert yr_route.call_count == 1
        assert data.location == "Oslo, Oslo, Norway"
        assert len(data.forecast) == 1


class TestAstronomy:
    def test_attached_per_day(self, make_document):
        document = make_document([
            ("2026-10-16T12:00:00Z", "fog"),
            ("2026-10-17T12:00:00Z", "fog"),
        ])
        astronomy = MagicMock(spec=SunriseClient)
        astro = Astronomy(sunrise=datetime(2026, 10, 16, 6, 21, tzinfo=UTC))
        astronomy.get_astronomy.return_value = astro
        backend = YrBackend(_mock_client(document), astronomy=astronomy)

        data = backend.fetch("59.91,10.75", 2)
        assert [d.astronomy for d in data.forecast] == [astro, astro]
        astronomy.get_astronomy.assert_any_call(59.91, 10.75, date(2026, 10, 17))

    def test_failure_does_not_block(self, make_document, caplog):
        document = make_document([("2026-10-16T12:00:00Z", "fog")])
        astronomy = MagicMock(spec=SunriseClient)
        astronomy.get_astronomy.side_effect = TransportError("sunrise down")
        backend = YrBackend(_mock_client(document), astronomy=astronomy)

        with caplog.at_level("WARNING", logger="yrweather.backend"):
            data = backend.fetch("59.91,10.75", 1)
        assert data.forecast[0].astronomy is None
        assert data.current.code == WeatherCode.FOG
        assert any("Astronomy lookup failed" in r.getMessage() for r in caplog.records)

    def test_unexpected_provider_error_does_not_block(self, make_document, caplog):
        document = make_document([("2026-10-16T12:00:00Z", "fog")])
        astronomy = MagicMock(spec=SunriseClient)
        astronomy.get_astronomy.side_effect = RuntimeError("provider bug")
        backend = YrBackend(_mock_client(document), astronomy=astronomy)

        with caplog.at_level("WARNING", logger="yrweather.backend"):
            data = backend.fetch("59.91,10.75", 1)
        assert data.forecast[0].astronomy is None
        assert len(data.forecast[0].slots) == 1
        record = next(r for r in caplog.records if "Astronomy lookup failed" in r.getMessage())
        assert record.exc_info is not None

    def test_not_called_for_zero_days(self, make_document):
        astronomy = MagicMock(spec=SunriseClient)
        backend = YrBackend(
            _mock_client(make_document([("2026-10-16T12:00:00Z", "fog")])),
            astronomy=astronomy,
        )
        backend.fetch("59.91,10.75", 0)
        astronomy.get_astronomy.assert_not_called()

    @respx.mock
    def test_from_config_enabled(self, yr_config: AppConfig, make_document):
        config = yr_config.model_copy(
            update={"astronomy": yr_config.astronomy.model_copy(update={"enabled": True})}
        )
        respx.get(YR).mock(
            return_value=httpx.Response(
                200, json=make_document([("2026-10-16T12:00:00Z", "fog")])
            )
        )
        respx.get(f"{SUN}/sun").mock(return_value=httpx.Response(200, json={
            "properties": {"sunrise": {"time": "2026-10-16T06:21+00:00"}, "sunset": {"time": None}},
        }))
        respx.get(f"{SUN}/moon").mock(return_value=httpx.Response(200, json={
            "properties": {"moonrise": {"time": None}, "moonset": {"time": None}},
        }))

        data = YrBackend.from_config(config).fetch("59.91,10.75", 1)
        assert data.forecast[0].astronomy == Astronomy(
            sunrise=datetime(2026, 10, 16, 6, 21, tzinfo=UTC)
        )


class TestFromConfig:
    def test_optional_collaborators_off_by_default(self, default_config: AppConfig):
        backend = YrBackend.from_config(default_config)
        assert backend.geocoder is None
        assert backend.astronomy is None
        assert backend.forecast_client.user_agent == default_config.yr.user_agent

    def test_geocoder_built_when_enabled(self):
        config = AppConfig(geocoding={"enabled": True, "username": "alice"})
        backend = YrBackend.from_config(config)
        assert isinstance(backend.geocoder, GeoNamesClient)
        assert backend.geocoder.username == "alice"


def test_geoplace_display_name():
    place = GeoPlace(name="Tromsø", admin_region="Troms", country="Norway", lat=69.6, lon=18.9)
    assert place.display_name == "Tromsø, Troms, Norway"


class TestUnparseableTimestamps:
    def test_forecast_days_unique_and_increasing(self, make_document):
        document = make_document([
            ("2026-10-16T06:00:00Z", "fog"),
            ("garbage", "rain"),
            ("2026-10-16T12:00:00Z", "cloudy"),
            ("2026-10-17T06:00:00Z", "snow"),
        ])
        data = YrBackend(_mock_client(document)).fetch("59.91,10.75", 3)

        dates = [d.date for d in data.forecast]
        assert dates == [date(2026, 10, 16), date(2026, 10, 17)]
        assert dates == sorted(set(dates))
        assert [s.code for s in data.forecast[0].slots] == [
            WeatherCode.FOG, WeatherCode.LIGHT_RAIN, WeatherCode.CLOUDY,
        ]
