# ABOUTME: HTTP client abstraction for provider API calls.
# ABOUTME: Applies timeout and connection limits, maps httpx failures onto ProviderError kinds.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from isbnresolver.config import DEFAULT_OPTIONS, RequestOptions
from isbnresolver.errors import HttpStatusError, ProviderError, TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "isbn-resolver/0.1.0"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against provider APIs."""

    def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]: ...


class ResolverHttpClient:
    """HTTP client for provider lookups.

    Wraps httpx.Client configured from RequestOptions. Every request gets a
    single attempt: transport failures and timeouts raise TransportError,
    anything but a 200 raises HttpStatusError.
    """

    def __init__(
        self,
        options: RequestOptions = DEFAULT_OPTIONS,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": httpx.Timeout(options.timeout_ms / 1000),
            "limits": httpx.Limits(max_connections=options.max_sockets),
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Send a GET request and decode the JSON body.

        Args:
            url: The URL to request.
            params: Optional query parameters.
            headers: Optional extra request headers.

        Returns:
            Parsed JSON response body.

        Raises:
            TransportError: On connection failures and timeouts.
            HttpStatusError: On any status other than 200.
            ProviderError: When the body is not a JSON object.
        """
        try:
            response = self._client.get(url, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request timed out: {url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request failed: {url}: {exc}") from exc

        logger.debug("HTTP %d from %s", response.status_code, response.url)
        if response.status_code != 200:
            raise HttpStatusError(
                f"wrong response code: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(f"Invalid JSON from {url}: {exc}") from exc
        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected JSON payload from {url}: {type(data).__name__}")
        return data

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ResolverHttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
