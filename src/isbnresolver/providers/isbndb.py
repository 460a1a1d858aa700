# ABOUTME: ISBNdb provider implementation.
# ABOUTME: Queries the commercial ISBNdb v2 API, authenticating with an API key header.

import logging

from isbnresolver.http import HttpClient
from isbnresolver.normalizer import normalize_isbndb
from isbnresolver.provider import ProviderName
from isbnresolver.providers.payload import normalize_record, require_record
from isbnresolver.types import Book

logger = logging.getLogger(__name__)

ISBNDB_API_BASE = "https://api2.isbndb.com"
ISBNDB_API_BOOK = "/book"


class IsbnDbProvider:
    """Metadata provider backed by the ISBNdb API.

    Without an API key the request is still sent; ISBNdb rejects it and the
    resulting HttpStatusError lets the chain move on.
    """

    def __init__(self, http_client: HttpClient, api_key: str | None = None) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> ProviderName:
        return ProviderName.ISBNDB

    def resolve(self, isbn: str) -> Book:
        headers: dict[str, str] = {}
        if self._api_key:
            headers["Authorization"] = self._api_key
        else:
            logger.debug("No ISBNdb API key configured")

        data = self._http.get(f"{ISBNDB_API_BASE}{ISBNDB_API_BOOK}/{isbn}", headers=headers)

        book = require_record(data.get("book"), isbn, self.name)
        return normalize_record(normalize_isbndb, book, isbn, self.name)
