# ABOUTME: Shared Click options for isbn-resolver CLI commands.
# ABOUTME: Provides reusable decorators for request settings like --timeout.

import click

from isbnresolver.config import DEFAULT_MAX_SOCKETS, DEFAULT_TIMEOUT_MS, ISBNDB_API_KEY_ENV
from isbnresolver.provider import DEFAULT_PROVIDERS

provider_option = click.option(
    "--provider",
    "-p",
    "providers",
    type=click.Choice([p.value for p in DEFAULT_PROVIDERS]),
    multiple=True,
    help="Provider to try, in order. Repeat to build a fallback chain (default: all).",
)

timeout_option = click.option(
    "--timeout",
    "timeout_ms",
    type=click.IntRange(min=1),
    default=DEFAULT_TIMEOUT_MS,
    show_default=True,
    help="Per-provider request timeout in milliseconds.",
)

max_sockets_option = click.option(
    "--max-sockets",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_SOCKETS,
    show_default=True,
    help="Maximum concurrent connections.",
)

isbndb_key_option = click.option(
    "--isbndb-key",
    envvar=ISBNDB_API_KEY_ENV,
    default=None,
    help=f"ISBNdb API key (default: ${ISBNDB_API_KEY_ENV}).",
)
