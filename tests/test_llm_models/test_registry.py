"""Tests for llm_models.registry."""
from __future__ import annotations

from llm_models.model import Model
from llm_models.registry import list_backends, list_models

REGISTRY = [
    Model("openai", "gpt-4o"),
    Model("ollama", "llama3"),
    Model("openai", "gpt-3.5-turbo"),
]


class TestListModels:
    def test_all(self) -> None:
        result = list_models(REGISTRY)
        assert result == REGISTRY
        assert result is not REGISTRY

    def test_filter_keeps_order(self) -> None:
        assert [m.model_name for m in list_models(REGISTRY, "openai")] == [
            "gpt-4o",
            "gpt-3.5-turbo",
        ]

    def test_unknown_backend(self) -> None:
        assert list_models(REGISTRY, "gemini") == []


class TestListBackends:
    def test_first_seen_order(self) -> None:
        assert list_backends(REGISTRY) == ["openai", "ollama"]

    def test_empty(self) -> None:
        assert list_backends([]) == []
