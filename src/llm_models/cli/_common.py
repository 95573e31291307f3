"""Helpers shared by CLI commands."""

from __future__ import annotations

import sys

import click

from llm_models.config import load_registry
from llm_models.errors import ConfigurationError
from llm_models.model import Model


def load_or_exit(config: str) -> list[Model]:
    """Load the registry, printing the error and exiting 1 on bad config."""
    try:
        return load_registry(config)
    except ConfigurationError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)


def describe(model: Model) -> str:
    """One-line summary of a model's identifier, limit, cost and capabilities."""
    limit = str(model.max_tokens) if model.max_tokens is not None else "none"
    caps = ",".join(model.capabilities.names()) or "none"
    cost = model.token_cost
    return (
        f"{model.id()}  max_tokens={limit}  "
        f"tokens_count_factors=({cost.per_message}, {cost.bias})  "
        f"capabilities={caps}"
    )
