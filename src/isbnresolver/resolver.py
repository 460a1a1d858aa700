# ABOUTME: Public entry points for resolving an ISBN to a Book.
# ABOUTME: IsbnResolver holds the chainable provider order; resolve_request takes everything explicitly.

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from isbnresolver.config import RequestOptions, merge_options
from isbnresolver.errors import IsbnResolverError
from isbnresolver.http import ResolverHttpClient
from isbnresolver.orchestrator import resolve_book
from isbnresolver.provider import DEFAULT_PROVIDERS, ProviderName
from isbnresolver.providers import build_provider
from isbnresolver.registry import select_providers
from isbnresolver.types import Book

logger = logging.getLogger(__name__)

OptionsArg = RequestOptions | Mapping[str, Any] | None
BookCallback = Callable[[IsbnResolverError | None, Book | None], None]


@dataclass(frozen=True)
class ResolutionRequest:
    """Everything one resolution needs, independent of any shared state."""

    isbn: str
    providers: tuple[ProviderName, ...] = DEFAULT_PROVIDERS
    options: RequestOptions = RequestOptions()

    def __post_init__(self) -> None:
        # provider names may arrive as strings or with repeats
        object.__setattr__(self, "providers", select_providers(self.providers))


def resolve_request(
    request: ResolutionRequest, *, transport: httpx.BaseTransport | None = None
) -> Book:
    """Run one resolution described entirely by request.

    One HTTP client is opened for the resolution and shared by the
    providers it tries.

    Raises:
        ProviderError: The last provider's error when every provider failed.
        ValidationError: If the request names no providers.
    """
    with ResolverHttpClient(request.options, transport=transport) as http_client:
        providers = [
            build_provider(name, http_client, request.options) for name in request.providers
        ]
        return resolve_book(providers, request.isbn)


class IsbnResolver:
    """Resolves ISBNs against the configured providers.

    The order set with provider() applies to the next resolve() call only;
    every resolve() puts the order back to DEFAULT_PROVIDERS:

        resolver.provider(["openlibrary", "google"]).resolve("9780735619678")
    """

    PROVIDER_NAMES = ProviderName

    def __init__(
        self,
        *,
        options: OptionsArg = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_options = merge_options(options, RequestOptions.from_env())
        self._transport = transport
        self._reset_providers()

    @property
    def providers(self) -> tuple[ProviderName, ...]:
        """The order the next resolve() will use."""
        return self._providers

    def _reset_providers(self) -> None:
        self._providers = DEFAULT_PROVIDERS

    def provider(self, providers: Sequence[ProviderName | str]) -> "IsbnResolver":
        """Set the provider order for the next resolve() call.

        An empty list leaves the current order alone. Duplicates are dropped,
        keeping the first occurrence.

        Raises:
            ValidationError: If providers is not a list or names an unknown
                provider. The current order is left unchanged.
        """
        selected = select_providers(providers)
        if selected:
            self._providers = selected
        return self

    def _take_request(
        self,
        isbn: str,
        options: OptionsArg,
        providers: Sequence[ProviderName | str] | None,
    ) -> ResolutionRequest:
        """Snapshot the active order into a request and reset it to the default."""
        try:
            merged = merge_options(options, self._base_options)
            order = select_providers(providers) if providers else self._providers
        finally:
            self._reset_providers()
        return ResolutionRequest(isbn=isbn, providers=order, options=merged)

    def resolve(
        self,
        isbn: str,
        options: OptionsArg = None,
        *,
        providers: Sequence[ProviderName | str] | None = None,
    ) -> Book:
        """Resolve isbn to a Book, falling back through the provider order.

        Args:
            isbn: Passed verbatim into provider URLs; not validated.
            options: Overrides for timeout_ms, max_sockets, isbndb_api_key.
            providers: Order for this call only, instead of the one set
                with provider().

        Raises:
            ProviderError: The last provider's error when every provider failed.
            ValidationError: On invalid options or providers.
        """
        request = self._take_request(isbn, options, providers)
        logger.debug(
            "Resolving isbn %s via %s", isbn, ", ".join(str(p) for p in request.providers)
        )
        return resolve_request(request, transport=self._transport)

    async def resolve_async(
        self,
        isbn: str,
        options: OptionsArg = None,
        *,
        providers: Sequence[ProviderName | str] | None = None,
    ) -> Book:
        """Awaitable form of resolve(); the lookup runs in a worker thread."""
        request = self._take_request(isbn, options, providers)
        return await asyncio.to_thread(resolve_request, request, transport=self._transport)

    def resolve_with_callback(
        self,
        isbn: str,
        callback: BookCallback,
        options: OptionsArg = None,
        *,
        providers: Sequence[ProviderName | str] | None = None,
    ) -> None:
        """Resolve isbn and report the outcome as callback(error, book)."""
        try:
            book = self.resolve(isbn, options, providers=providers)
        except IsbnResolverError as exc:
            callback(exc, None)
            return
        callback(None, book)


default_resolver = IsbnResolver()


def resolve(isbn: str, options: OptionsArg = None) -> Book:
    """Resolve with the module-level IsbnResolver."""
    return default_resolver.resolve(isbn, options)
