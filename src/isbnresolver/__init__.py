# ABOUTME: isbnresolver resolves book metadata from an ISBN across several bibliographic APIs.
# ABOUTME: Exports the Book record, the resolver entry points, provider names, and error types.

from isbnresolver.config import DEFAULT_OPTIONS, RequestOptions
from isbnresolver.errors import (
    HttpStatusError,
    IsbnResolverError,
    NotFoundError,
    ProviderError,
    TransportError,
    ValidationError,
)
from isbnresolver.provider import DEFAULT_PROVIDERS, BookProvider, ProviderName
from isbnresolver.resolver import (
    IsbnResolver,
    ResolutionRequest,
    default_resolver,
    resolve,
    resolve_request,
)
from isbnresolver.types import Book

PROVIDER_NAMES = ProviderName

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_PROVIDERS",
    "PROVIDER_NAMES",
    "Book",
    "BookProvider",
    "HttpStatusError",
    "IsbnResolver",
    "IsbnResolverError",
    "NotFoundError",
    "ProviderError",
    "ProviderName",
    "RequestOptions",
    "ResolutionRequest",
    "TransportError",
    "ValidationError",
    "default_resolver",
    "resolve",
    "resolve_request",
]
