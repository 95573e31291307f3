"""Structured content parts for multimodal messages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from llm_models.types.enums import ContentKind


@dataclass(frozen=True)
class ContentPart:
    """A single piece of structured content within a message."""

    kind: ContentKind | str
    text: str | None = None
    url: str | None = None
    media_type: str | None = None

    @classmethod
    def of_text(cls, text: str) -> ContentPart:
        """Create a text content part."""
        return cls(kind=ContentKind.TEXT, text=text)

    @classmethod
    def image_url(cls, url: str, media_type: str | None = None) -> ContentPart:
        """Create an image content part from a URL."""
        return cls(kind=ContentKind.IMAGE, url=url, media_type=media_type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContentPart:
        """Build a part from its JSON form, e.g. ``{"type": "text", "text": "hi"}``.

        OpenAI-style ``"image_url"`` parts map to IMAGE; other unknown kinds
        are kept as plain strings. Raises ``ValueError`` if ``data`` is not an
        object.
        """
        if not isinstance(data, dict):
            raise ValueError(f"content part must be an object, got {data!r}")
        raw_kind = data.get("type", data.get("kind", ContentKind.TEXT))
        if raw_kind == "image_url":
            raw_kind = ContentKind.IMAGE
        try:
            kind: ContentKind | str = ContentKind(raw_kind)
        except ValueError:
            kind = raw_kind
        image = data.get("image_url")
        url = image.get("url") if isinstance(image, dict) else image
        return cls(
            kind=kind,
            text=data.get("text"),
            url=url or data.get("url"),
            media_type=data.get("media_type"),
        )
