"""llm-models CLI entry point: Click group with subcommands."""

import logging

import click

from llm_models import __version__


@click.group()
@click.version_option(version=__version__, prog_name="llm-models")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """llm-models - resolve model identifiers and check token budgets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from llm_models.cli.listing import list_models_cmd  # noqa: E402
from llm_models.cli.resolve import resolve  # noqa: E402
from llm_models.cli.check import check  # noqa: E402

cli.add_command(list_models_cmd)
cli.add_command(resolve)
cli.add_command(check)
