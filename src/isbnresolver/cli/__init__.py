# ABOUTME: CLI package for isbn-resolver, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from isbnresolver.cli.commands import providers_cmd, resolve_cmd


@click.group()
@click.version_option(package_name="isbn-resolver")
@click.option("--verbose", "-v", is_flag=True, help="Log each provider attempt.")
def cli(verbose: bool) -> None:
    """isbn-resolver - look up book metadata by ISBN."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


cli.add_command(resolve_cmd.resolve)
cli.add_command(providers_cmd.providers)
