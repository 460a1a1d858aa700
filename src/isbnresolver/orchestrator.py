# ABOUTME: Fallback orchestration across providers.
# ABOUTME: Tries providers strictly in order and stops at the first one that returns a book.

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from isbnresolver.errors import ProviderError, ValidationError
from isbnresolver.provider import BookProvider, ProviderName
from isbnresolver.types import Book

logger = logging.getLogger(__name__)


@dataclass
class Attempt:
    """Outcome of asking one provider for a book: exactly one of book or error is set."""

    provider: ProviderName
    book: Book | None = None
    error: ProviderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _attempt(provider: BookProvider, isbn: str) -> Attempt:
    try:
        book = provider.resolve(isbn)
    except ProviderError as exc:
        if exc.provider is None:
            exc.provider = provider.name
        return Attempt(provider=provider.name, error=exc)
    return Attempt(provider=provider.name, book=book)


def run_chain(providers: Sequence[BookProvider], isbn: str) -> list[Attempt]:
    """Ask each provider in turn until one succeeds.

    Providers are called one at a time in list order; no provider after the
    first success is contacted. Returns every attempt made, so the last
    element is either the success or the final failure.

    Raises:
        ValidationError: If providers is empty.
    """
    if not providers:
        raise ValidationError("At least one provider is required.")

    attempts: list[Attempt] = []
    for provider in providers:
        attempt = _attempt(provider, isbn)
        attempts.append(attempt)
        if attempt.ok:
            logger.info("Resolved isbn %s with %s", isbn, provider.name)
            break
        logger.warning("Provider %s failed for isbn %s: %s", provider.name, isbn, attempt.error)
    return attempts


def resolve_book(providers: Sequence[BookProvider], isbn: str) -> Book:
    """Resolve isbn through the fallback chain.

    Returns the first book found. When every provider fails, raises the
    error of the last provider tried; earlier failures are only logged.
    """
    last = run_chain(providers, isbn)[-1]
    if last.book is not None:
        return last.book
    raise last.error or ProviderError(
        f"{last.provider} returned no book for isbn {isbn}", provider=last.provider
    )
