"""Enumeration types for conversation messages."""
from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Role of a message participant."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    DEVELOPER = "developer"


class ContentKind(StrEnum):
    """Discriminator for structured content parts."""

    TEXT = "text"
    IMAGE = "image"
