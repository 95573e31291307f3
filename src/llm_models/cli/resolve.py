"""CLI command: llm-models resolve -- resolve a model identifier."""

from __future__ import annotations

import sys

import click

from llm_models.cli._common import describe, load_or_exit
from llm_models.model import Model


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.argument("query")
def resolve(config: str, query: str) -> None:
    """Resolve QUERY ("backend" or "backend:model") against CONFIG.

    Exits with code 1 if no configured backend matches.
    """
    registry = load_or_exit(config)
    model = Model.find(registry, query)
    if model is None:
        click.echo(f"Unknown model: {query}", err=True)
        sys.exit(1)
    click.echo(describe(model))
