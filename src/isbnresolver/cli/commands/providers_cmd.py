# ABOUTME: The `isbn-resolver providers` command.
# ABOUTME: Lists the known providers in default fallback order.

import click
from rich.console import Console
from rich.table import Table

from isbnresolver.provider import DEFAULT_PROVIDERS
from isbnresolver.providers.google import GOOGLE_BOOKS_API_BASE
from isbnresolver.providers.isbndb import ISBNDB_API_BASE
from isbnresolver.providers.openlibrary import OPENLIBRARY_API_BASE
from isbnresolver.providers.worldcat import WORLDCAT_API_BASE

_ENDPOINTS = {
    "google": GOOGLE_BOOKS_API_BASE,
    "openlibrary": OPENLIBRARY_API_BASE,
    "worldcat": WORLDCAT_API_BASE,
    "isbndb": ISBNDB_API_BASE,
}


@click.command("providers")
def providers() -> None:
    """List metadata providers in default fallback order."""
    console = Console()
    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Provider", style="bold")
    table.add_column("Endpoint")

    for position, name in enumerate(DEFAULT_PROVIDERS, start=1):
        table.add_row(str(position), name.value, _ENDPOINTS[name.value])

    console.print(table)
