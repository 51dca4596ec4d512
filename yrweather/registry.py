"""Process-wide registry of weather backends, keyed by identifier."""

from collections.abc import Callable

from yrweather.capabilities import Backend
from yrweather.config.schema import AppConfig

BackendFactory = Callable[[AppConfig], Backend]

ALL_BACKENDS: dict[str, BackendFactory] = {}


def register_backend(name: str, factory: BackendFactory) -> None:
    ALL_BACKENDS[name] = factory


def get_backend(name: str, config: AppConfig) -> Backend:
    """Build the backend registered under ``name``. Raises KeyError if unknown."""
    try:
        factory = ALL_BACKENDS[name]
    except KeyError:
        raise KeyError(
            f"Unknown backend {name!r}; available: {', '.join(available_backends())}"
        ) from None
    return factory(config)


def available_backends() -> list[str]:
    return sorted(ALL_BACKENDS)
