# ABOUTME: Fake httpx transport that routes requests to canned responses by host.
# ABOUTME: Simulates HTTP errors, unreachable hosts, and sockets that stall past the timeout.

from dataclasses import dataclass
from typing import Any

import httpx

GOOGLE_HOST = "www.googleapis.com"
OPENLIBRARY_HOST = "openlibrary.org"
WORLDCAT_HOST = "xisbn.worldcat.org"
ISBNDB_HOST = "api2.isbndb.com"


@dataclass
class Stall:
    """A response delivered only after delay seconds of socket inactivity."""

    delay: float
    body: Any


class FakeTransport(httpx.BaseTransport):
    """Fake transport for httpx keyed by request host.

    Route values may be a JSON body (served with 200), an httpx.Response, or
    a Stall. Hosts without a route behave as if the network were disabled.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self._routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    @property
    def hosts(self) -> list[str]:
        """Hosts contacted, in request order."""
        return [request.url.host for request in self.requests]

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host = request.url.host
        if host not in self._routes:
            raise httpx.ConnectError(f"network disabled: {host}", request=request)

        route = self._routes[host]
        if isinstance(route, httpx.Response):
            return route
        if isinstance(route, Stall):
            read_timeout = request.extensions.get("timeout", {}).get("read")
            if read_timeout is not None and route.delay > read_timeout:
                raise httpx.ReadTimeout("socket stalled", request=request)
            return httpx.Response(200, json=route.body)
        return httpx.Response(200, json=route)
