# ABOUTME: Open Library provider implementation.
# ABOUTME: Queries the Books API by bibkey and normalizes the details record.

from isbnresolver.http import HttpClient
from isbnresolver.normalizer import normalize_openlibrary
from isbnresolver.provider import ProviderName
from isbnresolver.providers.payload import normalize_record, require_record
from isbnresolver.types import Book

OPENLIBRARY_API_BASE = "https://openlibrary.org"
OPENLIBRARY_API_BOOK = "/api/books"


class OpenLibraryProvider:
    """Metadata provider backed by the Open Library Books API.

    The API answers with an object keyed by bibkey ("ISBN:<isbn>"); an empty
    object means the ISBN is unknown.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> ProviderName:
        return ProviderName.OPENLIBRARY

    def resolve(self, isbn: str) -> Book:
        bibkey = f"ISBN:{isbn}"
        data = self._http.get(
            f"{OPENLIBRARY_API_BASE}{OPENLIBRARY_API_BOOK}",
            params={"bibkeys": bibkey, "format": "json", "jscmd": "details"},
        )

        book = require_record(data.get(bibkey), isbn, self.name)
        # entries without a details object carry no bibliographic data
        require_record(book.get("details"), isbn, self.name)

        return normalize_record(normalize_openlibrary, book, isbn, self.name)
