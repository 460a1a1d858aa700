# ABOUTME: Pure normalizers from each provider's response shape to the common Book record.
# ABOUTME: Includes the shared three-letter to two-letter language lookup.

from typing import Any

from isbnresolver.types import PRINT_TYPE_BOOK, UNKNOWN_LANGUAGE, Book

_LANGUAGE_CODES: dict[str, str] = {
    "eng": "en",
    "spa": "es",
    "fre": "fr",
}

_OPENLIBRARY_LANGUAGE_PREFIX = "/languages/"


def map_language_code(code: str | None) -> str:
    """Map a MARC language code (eng, spa, fre) to its two-letter form.

    Anything outside the table, including None, maps to "unknown".
    """
    if not code:
        return UNKNOWN_LANGUAGE
    return _LANGUAGE_CODES.get(code, UNKNOWN_LANGUAGE)


def _openlibrary_language(key: str | None) -> str:
    """Map an Open Library language key such as "/languages/eng"."""
    if not key or not key.startswith(_OPENLIBRARY_LANGUAGE_PREFIX):
        return UNKNOWN_LANGUAGE
    return map_language_code(key[len(_OPENLIBRARY_LANGUAGE_PREFIX):])


def normalize_google(volume_info: dict[str, Any]) -> Book:
    """Build a Book from a Google Books volumeInfo object.

    volumeInfo already uses the common schema's keys, so values are taken
    over as they are; only missing keys fall back to Book defaults.
    """
    return Book(
        title=volume_info.get("title"),
        published_date=volume_info.get("publishedDate"),
        authors=list(volume_info.get("authors") or []),
        description=volume_info.get("description"),
        page_count=volume_info.get("pageCount"),
        publisher=volume_info.get("publisher") or "",
        language=volume_info.get("language") or UNKNOWN_LANGUAGE,
        categories=list(volume_info.get("categories") or []),
        industry_identifiers=list(volume_info.get("industryIdentifiers") or []),
        print_type=volume_info.get("printType") or PRINT_TYPE_BOOK,
        image_links=dict(volume_info.get("imageLinks") or {}),
        preview_link=volume_info.get("previewLink"),
        info_link=volume_info.get("infoLink"),
    )


def normalize_openlibrary(book: dict[str, Any]) -> Book:
    """Build a Book from one entry of the Open Library Books API (jscmd=details).

    Bibliographic fields live under "details"; links and the cover sit on
    the entry itself. When several languages are listed the last one wins.
    """
    details = book.get("details", {})

    publishers = details.get("publishers") or []
    authors = [entry.get("name") for entry in details.get("authors") or []]

    language = UNKNOWN_LANGUAGE
    for entry in details.get("languages") or []:
        language = _openlibrary_language(entry.get("key"))

    thumbnail = book.get("thumbnail_url")
    return Book(
        title=details.get("title"),
        published_date=details.get("publish_date"),
        authors=authors,
        description=details.get("subtitle"),
        page_count=details.get("number_of_pages"),
        publisher=publishers[0] if publishers else "",
        language=language,
        image_links={"smallThumbnail": thumbnail, "thumbnail": thumbnail},
        preview_link=book.get("preview_url"),
        info_link=book.get("info_url"),
    )


def normalize_worldcat(record: dict[str, Any]) -> Book:
    """Build a Book from one record of a WorldCat xISBN getMetadata response."""
    author = record.get("author")
    return Book(
        title=record.get("title"),
        published_date=record.get("year"),
        authors=[author] if author else [],
        publisher=record.get("publisher") or "",
        language=map_language_code(record.get("lang")),
    )


def normalize_isbndb(book: dict[str, Any]) -> Book:
    """Build a Book from the "book" object of an ISBNdb response.

    Prefers the long title. ISBNdb already reports two-letter language
    codes; anything else is reported as unknown.
    """
    language = book.get("language")
    if not isinstance(language, str) or len(language) != 2:
        language = UNKNOWN_LANGUAGE

    image = book.get("image")
    image_links = {"smallThumbnail": image, "thumbnail": image} if image else {}

    return Book(
        title=book.get("title_long") or book.get("title"),
        published_date=book.get("date_published"),
        authors=list(book.get("authors") or []),
        description=book.get("synopsis") or book.get("overview"),
        page_count=book.get("pages"),
        publisher=book.get("publisher") or "",
        language=language,
        image_links=image_links,
    )
