# ABOUTME: The `isbn-resolver resolve` command for looking up books by ISBN.
# ABOUTME: Resolves each ISBN through the provider chain and prints a table or JSON.

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from isbnresolver.cli.options import (
    isbndb_key_option,
    max_sockets_option,
    provider_option,
    timeout_option,
)
from isbnresolver.config import RequestOptions
from isbnresolver.errors import IsbnResolverError
from isbnresolver.resolver import IsbnResolver
from isbnresolver.types import Book

logger = logging.getLogger(__name__)


def _create_resolver() -> IsbnResolver:
    """Create the resolver used by the command."""
    return IsbnResolver()


def _book_table(isbn: str, book: Book) -> Table:
    table = Table(title=escape(isbn), show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Title", escape(book.title) if book.title else "[dim]unknown[/dim]")
    table.add_row("Author", escape(book.author) if book.author else "[dim]unknown[/dim]")
    if book.publisher:
        table.add_row("Publisher", escape(book.publisher))
    if book.published_date:
        table.add_row("Published", escape(str(book.published_date)))
    if book.page_count is not None:
        table.add_row("Pages", str(book.page_count))
    table.add_row("Language", book.language)
    if book.description:
        table.add_row("Description", escape(book.description))
    if book.info_link:
        table.add_row("Info", book.info_link)
    return table


@click.command("resolve")
@click.argument("isbns", nargs=-1, required=True)
@provider_option
@timeout_option
@max_sockets_option
@isbndb_key_option
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per ISBN.")
def resolve(
    isbns: tuple[str, ...],
    providers: tuple[str, ...],
    timeout_ms: int,
    max_sockets: int,
    isbndb_key: str | None,
    as_json: bool,
) -> None:
    """Resolve one or more ISBNs to book metadata."""
    console = Console()
    resolver = _create_resolver()
    options = RequestOptions(
        timeout_ms=timeout_ms, max_sockets=max_sockets, isbndb_api_key=isbndb_key
    )

    failures = 0
    for isbn in isbns:
        try:
            book = resolver.resolve(isbn, options, providers=list(providers) or None)
        except IsbnResolverError as exc:
            failures += 1
            logger.debug("Resolution failed for %s", isbn, exc_info=True)
            if as_json:
                click.echo(json.dumps({"isbn": isbn, "book": None, "error": str(exc)}))
            else:
                console.print(f"[red]Error: {escape(isbn)}: {escape(str(exc))}[/red]")
            continue

        if as_json:
            click.echo(json.dumps({"isbn": isbn, "book": book.to_dict(), "error": None}))
        else:
            console.print(_book_table(isbn, book))

    if failures:
        raise SystemExit(1)
