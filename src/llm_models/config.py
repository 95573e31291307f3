"""Configuration entries that build a model registry."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from llm_models.capabilities import ModelCapabilities
from llm_models.errors import ConfigurationError
from llm_models.model import Model, TokenCostFormula

logger = logging.getLogger(__name__)


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def _token_cost(value: Any) -> TokenCostFormula:
    if value is None:
        return TokenCostFormula()
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    ):
        raise ConfigurationError(
            f"tokens_count_factors must be two integers, got {value!r}"
        )
    return TokenCostFormula(per_message=value[0], bias=value[1])


@dataclass(frozen=True)
class ModelConfig:
    """One configured model entry."""

    name: str
    max_tokens: int | None = None
    capabilities: ModelCapabilities = ModelCapabilities.TEXT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModelConfig:
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"model entry must be an object, got {data!r}")
        name = data.get("name")
        if not isinstance(name, str):
            raise ConfigurationError(f"model entry needs a string 'name': {dict(data)!r}")
        capabilities = data.get("capabilities")
        if capabilities is None:
            parsed = ModelCapabilities.TEXT
        elif isinstance(capabilities, str):
            parsed = ModelCapabilities.parse(capabilities)
        else:
            raise ConfigurationError(
                f"capabilities for {name!r} must be a string, got {capabilities!r}"
            )
        return cls(
            name=name,
            max_tokens=_optional_int(data, "max_tokens"),
            capabilities=parsed,
        )


@dataclass(frozen=True)
class ClientConfig:
    """A backend and the models configured under it."""

    name: str
    models: tuple[ModelConfig, ...] = ()
    token_cost: TokenCostFormula = field(default_factory=TokenCostFormula)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClientConfig:
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"client entry must be an object, got {data!r}")
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"client entry needs a non-empty 'name': {dict(data)!r}")
        entries = data.get("models", [])
        if not isinstance(entries, list):
            raise ConfigurationError(f"models for client {name!r} must be a list")
        return cls(
            name=name,
            models=tuple(ModelConfig.from_dict(e) for e in entries),
            token_cost=_token_cost(data.get("tokens_count_factors")),
        )

    def to_models(self) -> list[Model]:
        """Model descriptors for this client, in configuration order."""
        return [
            Model(self.name, entry.name)
            .with_max_tokens(entry.max_tokens)
            .with_token_cost(self.token_cost)
            .with_capabilities(entry.capabilities)
            for entry in self.models
        ]


def build_registry(clients: Iterable[ClientConfig]) -> list[Model]:
    """Flatten clients into one ordered registry."""
    registry: list[Model] = []
    for client in clients:
        registry.extend(client.to_models())
    return registry


def load_registry(path: str | Path) -> list[Model]:
    """Read ``{"clients": [...]}`` JSON from ``path`` and build the registry."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"cannot read model configuration {config_path}: {exc}", cause=exc
        ) from exc
    if not isinstance(data, dict) or not isinstance(data.get("clients", []), list):
        raise ConfigurationError(f"{config_path}: expected an object with a 'clients' list")
    registry = build_registry(ClientConfig.from_dict(c) for c in data.get("clients", []))
    logger.debug("Loaded %d models from %s", len(registry), config_path)
    return registry
