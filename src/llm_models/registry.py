"""Helpers for browsing an ordered model registry."""
from __future__ import annotations

from typing import Sequence

from llm_models.model import Model


def list_models(models: Sequence[Model], backend: str | None = None) -> list[Model]:
    """Return models, optionally filtered by backend.

    Registry order is preserved, so the first model listed for a backend is
    the one a backend-only query resolves to.
    """
    if backend is None:
        return list(models)
    return [m for m in models if m.backend_name == backend]


def list_backends(models: Sequence[Model]) -> list[str]:
    """Distinct backend names in first-seen order."""
    return list(dict.fromkeys(m.backend_name for m in models))
