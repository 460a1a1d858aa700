# ABOUTME: WorldCat xISBN provider implementation.
# ABOUTME: Calls the getMetadata method and normalizes the first record of the list.

from isbnresolver.errors import NotFoundError
from isbnresolver.http import HttpClient
from isbnresolver.normalizer import normalize_worldcat
from isbnresolver.provider import ProviderName
from isbnresolver.providers.payload import normalize_record, require_record
from isbnresolver.types import Book

WORLDCAT_API_BASE = "http://xisbn.worldcat.org"
WORLDCAT_API_BOOK = "/webservices/xid/isbn"

_STAT_OK = "ok"


class WorldCatProvider:
    """Metadata provider backed by the WorldCat xISBN web service."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> ProviderName:
        return ProviderName.WORLDCAT

    def resolve(self, isbn: str) -> Book:
        """Look up a book by ISBN.

        xISBN reports lookup failures in the "stat" field ("invalidId",
        "unknownId", ...) with a 200 status; only "ok" carries records.
        """
        data = self._http.get(
            f"{WORLDCAT_API_BASE}{WORLDCAT_API_BOOK}/{isbn}",
            params={"method": "getMetadata", "fl": "*", "format": "json"},
        )

        records = data.get("list")
        if data.get("stat") != _STAT_OK or not isinstance(records, list) or not records:
            raise NotFoundError(f"no books found with isbn: {isbn}", provider=self.name)

        record = require_record(records[0], isbn, self.name)
        return normalize_record(normalize_worldcat, record, isbn, self.name)
