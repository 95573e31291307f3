"""Message types read by token accounting."""
from __future__ import annotations

from llm_models.types.content import ContentPart
from llm_models.types.enums import ContentKind, Role
from llm_models.types.messages import Message

__all__ = ["ContentKind", "ContentPart", "Message", "Role"]
