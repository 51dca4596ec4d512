"""Shared test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from yrweather.config.schema import AppConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def oslo_forecast() -> dict:
    """met.no compact forecast spanning 16-19 October 2026."""
    with open(FIXTURE_DIR / "yr_compact_oslo.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "days": 2,
        "yr": {"user_agent": "yrweather-tests/0.1.0 (ops@example.com)"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def make_document() -> Callable[..., dict]:
    """Build a forecast document from (time, symbol_code) pairs."""

    def _make(steps: list[tuple[str, str | None]]) -> dict:
        timeseries = []
        for i, (time, symbol) in enumerate(steps):
            data: dict = {
                "instant": {"details": {"air_temperature": float(i), "wind_speed": 3.6}}
            }
            if symbol is not None:
                data["next_6_hours"] = {
                    "summary": {"symbol_code": symbol},
                    "details": {"precipitation_amount": 1.0},
                }
            timeseries.append({"time": time, "data": data})
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [10.75, 59.91, 10]},
            "properties": {
                "meta": {"updated_at": "2026-10-16T00:00:00Z", "units": {}},
                "timeseries": timeseries,
            },
        }

    return _make
