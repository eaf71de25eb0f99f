"""HTTP client utilities and helpers."""

from typing import Any

import httpx

from src.helpers.constants import DEFAULT_TIMEOUT
from src.helpers.http_models import JsonResponse
from src.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, **kwargs: Any
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from src.helpers.http import create_http_client

        async with create_http_client(timeout=60.0) as client:
            response = await client.get("https://beaconcha.in")
        ```
    """
    return httpx.AsyncClient(timeout=timeout, **kwargs)


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    timeout: float | None = None,
) -> JsonResponse:
    """Fetch JSON data from a URL, failing loudly.

    There is no retry and no fallback value: every failure propagates to the
    caller so the run stops and can be resumed later.

    Args:
        client: HTTP client instance
        url: URL to fetch
        headers: Optional extra request headers
        timeout: Optional timeout override

    Returns:
        Parsed JSON body

    Raises:
        httpx.HTTPStatusError: On a non-2xx response
        httpx.HTTPError: On transport errors and timeouts
        ValueError: If the body is not valid JSON

    Example:
        ```python
        async with create_http_client() as client:
            data = await get_json(client, "https://beaconcha.in/api/v1/epoch/latest")
        ```
    """
    logger.debug("GET %s", url)
    if timeout is None:
        response = await client.get(url, headers=headers)
    else:
        response = await client.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    try:
        return response.json()
    except ValueError as e:
        msg = f"Malformed JSON from {url}: {e}"
        raise ValueError(msg) from e


__all__ = [
    "create_http_client",
    "get_json",
]
