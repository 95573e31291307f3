"""Model descriptors, identifier resolution, and token budgeting."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from llm_models import tokenizer
from llm_models.capabilities import ModelCapabilities
from llm_models.errors import ConfigurationError, LimitExceededError
from llm_models.tokenizer import TokenCounter
from llm_models.types.enums import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenCostFormula:
    """Linear token-cost approximation for a backend family."""

    per_message: int = 0
    """Flat overhead charged per message turn."""

    bias: int = 0
    """Flat constant added once to the total when enforcing the limit."""

    def __post_init__(self) -> None:
        if self.per_message < 0 or self.bias < 0:
            raise ConfigurationError(
                f"token cost factors must be non-negative, got "
                f"({self.per_message}, {self.bias})"
            )


@dataclass(frozen=True)
class Model:
    """One addressable model: a (backend, model name) pair plus limits.

    Instances are immutable; the ``with_*`` methods return updated copies.
    """

    backend_name: str
    model_name: str = ""
    max_tokens: int | None = None
    token_cost: TokenCostFormula = field(default_factory=TokenCostFormula)
    capabilities: ModelCapabilities = ModelCapabilities.TEXT

    def __post_init__(self) -> None:
        if not self.backend_name:
            raise ConfigurationError("model backend name must not be empty")
        if self.max_tokens is not None and self.max_tokens < 0:
            raise ConfigurationError(
                f"max_tokens must be positive, got {self.max_tokens}"
            )
        # A limit of zero means "no limit".
        if self.max_tokens == 0:
            object.__setattr__(self, "max_tokens", None)

    # --- Builders ---

    def with_capabilities(self, capabilities: ModelCapabilities) -> Model:
        return replace(self, capabilities=capabilities)

    def with_max_tokens(self, max_tokens: int | None) -> Model:
        return replace(self, max_tokens=max_tokens or None)

    def with_token_cost(self, token_cost: TokenCostFormula) -> Model:
        return replace(self, token_cost=token_cost)

    def with_model_name(self, model_name: str) -> Model:
        return replace(self, model_name=model_name)

    # --- Identity ---

    def id(self) -> str:
        """Canonical ``"backend:model"`` identifier."""
        return f"{self.backend_name}:{self.model_name}"

    def identifier(self) -> str:
        return self.id()

    @property
    def supports_vision(self) -> bool:
        return ModelCapabilities.VISION in self.capabilities

    # --- Resolution ---

    @classmethod
    def find(cls, models: Sequence[Model], value: str) -> Model | None:
        """Resolve ``value`` against an ordered registry.

        ``value`` is ``"backend"`` or ``"backend:model"``, split on the first
        colon; an empty model part is the same as none. With a model part,
        an exact identifier match wins, then the first entry of that backend
        is returned renamed to the requested model. Without one, the first
        entry of the backend is returned. Returns ``None`` when nothing
        matches.
        """
        backend_name, _, model_name = value.partition(":")
        if model_name:
            for model in models:
                if model.id() == value:
                    return model
            for model in models:
                if model.backend_name == backend_name:
                    logger.debug(
                        "No exact match for %s; using %s defaults", value, model.id()
                    )
                    return model.with_model_name(model_name)
            return None
        for model in models:
            if model.backend_name == backend_name:
                return model
        return None

    # --- Token accounting ---

    def messages_tokens(
        self, messages: Sequence[Any], count_tokens: TokenCounter | None = None
    ) -> int:
        """Sum the tokens of every plain-text message.

        Messages with structured content contribute nothing.
        """
        counter = count_tokens or tokenizer.count_tokens
        return sum(
            counter(m.content) for m in messages if isinstance(m.content, str)
        )

    def total_tokens(
        self, messages: Sequence[Any], count_tokens: TokenCounter | None = None
    ) -> int:
        """Estimate the tokens a backend would bill for ``messages``.

        One per-message overhead is charged per turn; a conversation ending
        on a user turn is charged one extra slot for the pending reply.
        """
        if not messages:
            return 0
        num_messages = len(messages)
        message_tokens = self.messages_tokens(messages, count_tokens)
        per_message = self.token_cost.per_message
        if messages[-1].role == Role.USER:
            return num_messages * per_message + message_tokens
        return (num_messages - 1) * per_message + message_tokens

    def max_tokens_limit(
        self, messages: Sequence[Any], count_tokens: TokenCounter | None = None
    ) -> None:
        """Raise ``LimitExceededError`` if the estimate reaches ``max_tokens``.

        The estimate is ``total_tokens`` plus the formula's bias. Always
        passes when the model has no limit.
        """
        if self.max_tokens is None:
            return
        total = self.total_tokens(messages, count_tokens) + self.token_cost.bias
        if total >= self.max_tokens:
            logger.warning(
                "Token limit exceeded for %s: %d >= %d",
                self.id(),
                total,
                self.max_tokens,
            )
            raise LimitExceededError(
                f"Exceed max tokens limit ({total} >= {self.max_tokens})",
                model_id=self.id(),
                total_tokens=total,
                max_tokens=self.max_tokens,
            )


def find_model(models: Sequence[Model], value: str) -> Model | None:
    """Module-level alias for :meth:`Model.find`."""
    return Model.find(models, value)


def enforce_limit(
    model: Model, messages: Sequence[Any], count_tokens: TokenCounter | None = None
) -> None:
    """Module-level alias for :meth:`Model.max_tokens_limit`."""
    model.max_tokens_limit(messages, count_tokens)
