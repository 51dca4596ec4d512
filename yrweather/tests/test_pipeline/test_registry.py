"""Tests for the backend registry."""

import pytest

from yrweather.backend import BACKEND_NAME, YrBackend
from yrweather.config.schema import AppConfig
from yrweather.registry import (
    ALL_BACKENDS,
    available_backends,
    get_backend,
    register_backend,
)


class TestRegistry:
    def test_yr_registered_on_import(self):
        assert BACKEND_NAME == "yr"
        assert "yr" in available_backends()

    def test_get_backend_builds_instance(self, default_config: AppConfig):
        assert isinstance(get_backend("yr", default_config), YrBackend)

    def test_unknown_backend(self, default_config: AppConfig):
        with pytest.raises(KeyError, match="openweathermap"):
            get_backend("openweathermap", default_config)

    def test_register_custom(self, default_config: AppConfig, monkeypatch):
        monkeypatch.setitem(ALL_BACKENDS, "static", lambda config: "stub")
        assert "static" in available_backends()
        assert get_backend("static", default_config) == "stub"

    def test_register_backend(self, monkeypatch):
        monkeypatch.setattr("yrweather.registry.ALL_BACKENDS", {})
        register_backend("b", YrBackend.from_config)
        register_backend("a", YrBackend.from_config)
        assert available_backends() == ["a", "b"]
