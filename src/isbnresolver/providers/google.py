# ABOUTME: Google Books provider implementation.
# ABOUTME: Queries the volumes endpoint with an isbn: search and passes volumeInfo through.

from isbnresolver.errors import NotFoundError
from isbnresolver.http import HttpClient
from isbnresolver.normalizer import normalize_google
from isbnresolver.provider import ProviderName
from isbnresolver.providers.payload import normalize_record
from isbnresolver.types import Book

GOOGLE_BOOKS_API_BASE = "https://www.googleapis.com"
GOOGLE_BOOKS_API_BOOK = "/books/v1/volumes"


class GoogleBooksProvider:
    """Metadata provider backed by the Google Books volumes API."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> ProviderName:
        return ProviderName.GOOGLE

    def resolve(self, isbn: str) -> Book:
        """Look up a book by ISBN and return the first volume's metadata.

        Raises:
            NotFoundError: When totalItems is zero, or when the result list
                or the first volumeInfo is missing despite a non-zero total.
            ProviderError: When the volumeInfo object is malformed.
        """
        data = self._http.get(
            f"{GOOGLE_BOOKS_API_BASE}{GOOGLE_BOOKS_API_BOOK}",
            params={"q": f"isbn:{isbn}"},
        )

        if not data.get("totalItems"):
            raise NotFoundError(f"no books found with isbn: {isbn}", provider=self.name)

        # totalItems can be non-zero while items is absent
        items = data.get("items")
        first = items[0] if isinstance(items, list) and items else None
        volume_info = first.get("volumeInfo") if isinstance(first, dict) else None
        if not isinstance(volume_info, dict) or not volume_info:
            raise NotFoundError(
                f"no volume info found for book with isbn: {isbn}", provider=self.name
            )

        return normalize_record(normalize_google, volume_info, isbn, self.name)
