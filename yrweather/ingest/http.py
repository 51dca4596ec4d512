"""Single-shot JSON GET over httpx, mapping failures onto BackendError kinds."""

import logging
from typing import Any

import httpx

from yrweather.errors import DecodeError, RequestBuildError, TransportError

logger = logging.getLogger(__name__)


def get_json(
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    debug: bool = False,
) -> tuple[Any, str]:
    """GET ``url`` once and decode the body as JSON.

    Returns the decoded payload together with the raw body text. The HTTP
    status is not inspected: callers judge the decoded content. The body is
    read in full and the connection released before decoding.
    """
    try:
        request = httpx.Request("GET", url, headers=headers, params=params)
    except httpx.InvalidURL as e:
        logger.error("Failed to create request for %s: %s", url, e)
        raise RequestBuildError(f"Failed to create request: {e}", url=url) from e

    full_url = str(request.url)
    if debug:
        logger.info("Fetching %s", full_url)

    try:
        with httpx.Client() as client:
            resp = client.send(request)
    except httpx.RequestError as e:
        logger.error("Request to %s failed: %s", full_url, e)
        raise TransportError(f"Unable to get ({full_url}): {e}", url=full_url) from e

    body = resp.text
    if debug:
        logger.info("Response %d (%s):\n%s", resp.status_code, full_url, body)

    try:
        payload = resp.json()
    except ValueError as e:
        logger.error("Undecodable response from %s (HTTP %d)", full_url, resp.status_code)
        raise DecodeError(
            f"Unable to decode response ({full_url}): {e}\nThe body is: {body}",
            url=full_url,
            body=body,
        ) from e
    return payload, body
