"""Conversation message type consumed by token accounting."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from llm_models.types.content import ContentPart
from llm_models.types.enums import Role


@dataclass(frozen=True)
class Message:
    """A single message in a conversation.

    ``content`` is either plain text or a tuple of structured parts.
    """

    role: Role | str
    content: str | tuple[ContentPart, ...] = ""

    # --- Factory classmethods ---

    @classmethod
    def system(cls, text: str) -> Message:
        """Create a system message."""
        return cls(role=Role.SYSTEM, content=text)

    @classmethod
    def user(cls, text: str) -> Message:
        """Create a user message."""
        return cls(role=Role.USER, content=text)

    @classmethod
    def assistant(cls, text: str = "") -> Message:
        """Create an assistant message."""
        return cls(role=Role.ASSISTANT, content=text)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        """Build a message from ``{"role": ..., "content": ...}``.

        Raises ``ValueError`` for an unknown role or a content value that is
        neither a string nor a list of parts.
        """
        if not isinstance(data, dict):
            raise ValueError(f"message must be an object, got {data!r}")
        role = Role(data.get("role", ""))
        content = data.get("content", "")
        if isinstance(content, str):
            return cls(role=role, content=content)
        if isinstance(content, list):
            parts = tuple(ContentPart.from_dict(p) for p in content)
            return cls(role=role, content=parts)
        raise ValueError(f"unsupported message content: {type(content).__name__}")

    # --- Properties ---

    @property
    def is_structured(self) -> bool:
        """True when content is a tuple of parts rather than plain text."""
        return not isinstance(self.content, str)
