# ABOUTME: Concrete provider implementations and the factory that builds them by name.
# ABOUTME: Maps each ProviderName to its provider class.

from collections.abc import Callable

from isbnresolver.config import RequestOptions
from isbnresolver.errors import ValidationError
from isbnresolver.http import HttpClient
from isbnresolver.provider import BookProvider, ProviderName
from isbnresolver.providers.google import GoogleBooksProvider
from isbnresolver.providers.isbndb import IsbnDbProvider
from isbnresolver.providers.openlibrary import OpenLibraryProvider
from isbnresolver.providers.worldcat import WorldCatProvider

_FACTORIES: dict[ProviderName, Callable[[HttpClient, RequestOptions], BookProvider]] = {
    ProviderName.GOOGLE: lambda http, options: GoogleBooksProvider(http),
    ProviderName.OPENLIBRARY: lambda http, options: OpenLibraryProvider(http),
    ProviderName.WORLDCAT: lambda http, options: WorldCatProvider(http),
    ProviderName.ISBNDB: lambda http, options: IsbnDbProvider(
        http, api_key=options.isbndb_api_key
    ),
}


def build_provider(
    name: ProviderName | str, http_client: HttpClient, options: RequestOptions
) -> BookProvider:
    """Create the provider registered under name, sharing one HTTP client.

    Raises:
        ValidationError: If name is not a known provider.
    """
    try:
        factory = _FACTORIES[ProviderName(name)]
    except ValueError:
        raise ValidationError(f"Unsupported provider: {name!r}") from None
    return factory(http_client, options)


__all__ = [
    "GoogleBooksProvider",
    "IsbnDbProvider",
    "OpenLibraryProvider",
    "WorldCatProvider",
    "build_provider",
]
