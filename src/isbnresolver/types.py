# ABOUTME: Core data structure for resolved book metadata.
# ABOUTME: Book is the common record every provider normalizer produces.

from dataclasses import dataclass, field
from typing import Any

PRINT_TYPE_BOOK = "BOOK"
UNKNOWN_LANGUAGE = "unknown"


@dataclass
class Book:
    """Book metadata in the common schema shared by all providers.

    Every normalizer fills every field, falling back to the defaults below,
    so a Book has the same shape whichever provider answered. Dates are kept
    as the free text the provider returned.
    """

    title: str | None = None
    published_date: str | None = None
    authors: list[str] = field(default_factory=list)
    description: str | None = None
    page_count: int | None = None
    publisher: str = ""
    language: str = UNKNOWN_LANGUAGE
    categories: list[str] = field(default_factory=list)
    industry_identifiers: list[Any] = field(default_factory=list)
    print_type: str = PRINT_TYPE_BOOK
    image_links: dict[str, str] = field(default_factory=dict)
    preview_link: str | None = None
    info_link: str | None = None

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase keys of the common schema."""
        return {
            "title": self.title,
            "publishedDate": self.published_date,
            "authors": list(self.authors),
            "description": self.description,
            "pageCount": self.page_count,
            "publisher": self.publisher,
            "language": self.language,
            "categories": list(self.categories),
            "industryIdentifiers": list(self.industry_identifiers),
            "printType": self.print_type,
            "imageLinks": dict(self.image_links),
            "previewLink": self.preview_link,
            "infoLink": self.info_link,
        }
