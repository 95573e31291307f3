"""CLI command: llm-models check -- estimate tokens and enforce the limit."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from llm_models.cli._common import load_or_exit
from llm_models.errors import LimitExceededError
from llm_models.model import Model
from llm_models.types import Message


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.argument("query")
@click.argument("messages_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--max-tokens",
    type=click.IntRange(min=0),
    default=None,
    help="Override the resolved model's limit (0 disables it).",
)
def check(config: str, query: str, messages_file: str, max_tokens: int | None) -> None:
    """Check a JSON list of messages against the limit of model QUERY.

    Prints the estimated total (including bias). Exits with code 1 if the
    model is unknown, the messages are malformed, or the limit is reached.
    """
    registry = load_or_exit(config)
    model = Model.find(registry, query)
    if model is None:
        click.echo(f"Unknown model: {query}", err=True)
        sys.exit(1)
    if max_tokens is not None:
        model = model.with_max_tokens(max_tokens)

    try:
        raw = json.loads(Path(messages_file).read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError("expected a JSON list of messages")
        messages = [Message.from_dict(m) for m in raw]
    except ValueError as exc:
        click.echo(f"Invalid messages: {exc}", err=True)
        sys.exit(1)

    total = model.total_tokens(messages) + model.token_cost.bias
    limit = str(model.max_tokens) if model.max_tokens is not None else "none"
    click.echo(f"Model:  {model.id()}")
    click.echo(f"Tokens: {total} (limit {limit})")
    structured = sum(1 for m in messages if m.is_structured)
    if structured:
        click.echo(f"Note:   {structured} structured message(s) counted as 0 tokens")

    try:
        model.max_tokens_limit(messages)
    except LimitExceededError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo("OK")
