"""Error hierarchy for model resolution and token budgeting."""
from __future__ import annotations


class ModelsError(Exception):
    """Base error for all llm_models errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class LimitExceededError(ModelsError):
    """A conversation's estimated tokens reached the model's hard limit.

    Recoverable: callers may trim history, pick another model, or abort.
    """

    def __init__(
        self,
        message: str = "Exceed max tokens limit",
        *,
        model_id: str = "",
        total_tokens: int = 0,
        max_tokens: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.model_id = model_id
        self.total_tokens = total_tokens
        self.max_tokens = max_tokens


class ConfigurationError(ModelsError):
    """Invalid model or client configuration."""
