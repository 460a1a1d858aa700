# ABOUTME: Exception hierarchy for ISBN resolution.
# ABOUTME: ProviderError subclasses are recoverable per provider; ValidationError is raised immediately.


class IsbnResolverError(Exception):
    """Base class for all isbnresolver errors."""


class ProviderError(IsbnResolverError):
    """Raised when a single provider fails to produce a book.

    The orchestrator treats every ProviderError as recoverable and falls
    back to the next provider in the active order.
    """

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class TransportError(ProviderError):
    """Connection refused, DNS failure, or request timeout."""


class HttpStatusError(ProviderError):
    """The provider answered with a non-200 status code."""

    def __init__(self, message: str, status_code: int, provider: str | None = None) -> None:
        super().__init__(message, provider=provider)
        self.status_code = status_code


class NotFoundError(ProviderError):
    """The response was well-formed but signals that no book matched."""


class ValidationError(IsbnResolverError, ValueError):
    """Raised for invalid provider selections or request options."""
