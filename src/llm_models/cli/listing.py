"""CLI command: llm-models list -- show configured models."""

from __future__ import annotations

import click

from llm_models.cli._common import describe, load_or_exit
from llm_models.registry import list_backends, list_models


@click.command(name="list")
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option("--backend", default=None, help="Only show models of this backend.")
def list_models_cmd(config: str, backend: str | None) -> None:
    """List models from a JSON CONFIG in resolution order."""
    registry = load_or_exit(config)
    models = list_models(registry, backend)

    if not models:
        click.echo("No models configured.")
        return

    click.echo(f"Backends: {', '.join(list_backends(models))}")
    click.echo(f"Models:   {len(models)}")
    click.echo()
    for model in models:
        click.echo(f"  {describe(model)}")
