# ABOUTME: Provider identifiers and the BookProvider protocol.
# ABOUTME: Every metadata source (Google Books, Open Library, WorldCat, ISBNdb) implements this.

from enum import Enum
from typing import Protocol, runtime_checkable

from isbnresolver.types import Book


class ProviderName(str, Enum):
    """Known metadata providers."""

    GOOGLE = "google"
    OPENLIBRARY = "openlibrary"
    WORLDCAT = "worldcat"
    ISBNDB = "isbndb"

    def __str__(self) -> str:
        return self.value


DEFAULT_PROVIDERS: tuple[ProviderName, ...] = (
    ProviderName.GOOGLE,
    ProviderName.OPENLIBRARY,
    ProviderName.WORLDCAT,
    ProviderName.ISBNDB,
)


@runtime_checkable
class BookProvider(Protocol):
    """Protocol for ISBN lookup services.

    Implementations perform one lookup per call and raise a ProviderError
    subclass when they cannot produce a Book.
    """

    @property
    def name(self) -> ProviderName: ...

    def resolve(self, isbn: str) -> Book: ...
