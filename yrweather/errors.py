"""Errors raised while resolving a location or fetching a forecast."""


class BackendError(Exception):
    """Base error for a failed fetch. Carries the URL and raw body when known."""

    def __init__(self, message: str, url: str | None = None, body: str | None = None):
        super().__init__(message)
        self.url = url
        self.body = body


class RequestBuildError(BackendError):
    """The request URL could not be constructed."""


class TransportError(BackendError):
    """Network or connection failure."""


class DecodeError(BackendError):
    """Response body is not JSON, or not the expected schema."""


class ResponseValidationError(BackendError):
    """Response decoded but its content is not a usable answer."""


class LocationNotFoundError(ResponseValidationError):
    """Geocoding returned no candidates."""
