# ABOUTME: Shape checks shared by the providers before a payload reaches its normalizer.
# ABOUTME: Turns missing or malformed result fields into ProviderError so the chain can fall back.

from collections.abc import Callable
from typing import Any

from isbnresolver.errors import NotFoundError, ProviderError
from isbnresolver.provider import ProviderName
from isbnresolver.types import Book


def require_record(value: Any, isbn: str, provider: ProviderName) -> dict[str, Any]:
    """Return value if it is a non-empty JSON object, else raise NotFoundError."""
    if not isinstance(value, dict) or not value:
        raise NotFoundError(f"no books found with isbn: {isbn}", provider=provider)
    return value


def normalize_record(
    normalizer: Callable[[dict[str, Any]], Book],
    record: dict[str, Any],
    isbn: str,
    provider: ProviderName,
) -> Book:
    """Run a normalizer, reporting a badly shaped record as a provider failure.

    Normalizers assume the JSON shapes the provider documents; nested values
    of the wrong type surface here as ProviderError.
    """
    try:
        return normalizer(record)
    except (AttributeError, TypeError, ValueError, KeyError, IndexError) as exc:
        raise ProviderError(
            f"malformed {provider} record for isbn {isbn}: {exc}", provider=provider
        ) from exc
