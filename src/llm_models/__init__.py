"""Model identifier resolution and token budgeting for LLM backends."""
from __future__ import annotations

__version__ = "0.1.0"

# Types
from llm_models.types import ContentKind, ContentPart, Message, Role

# Capabilities
from llm_models.capabilities import ModelCapabilities

# Errors
from llm_models.errors import ConfigurationError, LimitExceededError, ModelsError

# Core
from llm_models.model import Model, TokenCostFormula, enforce_limit, find_model
from llm_models.tokenizer import TokenCounter, count_tokens

# Registry and configuration
from llm_models.registry import list_backends, list_models
from llm_models.config import ClientConfig, ModelConfig, build_registry, load_registry

__all__ = [
    "__version__",
    # Types
    "ContentKind",
    "ContentPart",
    "Message",
    "Role",
    # Capabilities
    "ModelCapabilities",
    # Errors
    "ModelsError",
    "LimitExceededError",
    "ConfigurationError",
    # Core
    "Model",
    "TokenCostFormula",
    "find_model",
    "enforce_limit",
    "TokenCounter",
    "count_tokens",
    # Registry and configuration
    "list_models",
    "list_backends",
    "ClientConfig",
    "ModelConfig",
    "build_registry",
    "load_registry",
]
