"""Tests for llm_models.types."""
from __future__ import annotations

import pytest

from llm_models.types import ContentKind, ContentPart, Message, Role


class TestRole:
    def test_values(self) -> None:
        assert Role.USER == "user"
        assert Role.ASSISTANT == "assistant"
        assert Role.SYSTEM == "system"

    def test_has_5_members(self) -> None:
        assert len(Role) == 5


class TestFactories:
    def test_user(self) -> None:
        msg = Message.user("hi")
        assert msg.role == Role.USER
        assert msg.content == "hi"
        assert not msg.is_structured

    def test_system(self) -> None:
        assert Message.system("be brief").role == Role.SYSTEM

    def test_assistant_default_empty(self) -> None:
        msg = Message.assistant()
        assert msg.role == Role.ASSISTANT
        assert msg.content == ""

    def test_frozen(self) -> None:
        msg = Message.user("hi")
        with pytest.raises(AttributeError):
            msg.content = "other"  # type: ignore[misc]


class TestIsStructured:
    def test_plain(self) -> None:
        assert not Message.user("hello").is_structured

    def test_parts(self) -> None:
        msg = Message(
            role=Role.USER,
            content=(
                ContentPart.of_text("look "),
                ContentPart.image_url("http://x/cat.png"),
                ContentPart.of_text("here"),
            ),
        )
        assert msg.is_structured


class TestFromDict:
    def test_plain(self) -> None:
        msg = Message.from_dict({"role": "user", "content": "hi"})
        assert msg == Message.user("hi")

    def test_structured(self) -> None:
        msg = Message.from_dict(
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "what is this?"},
                    {"type": "image_url", "image_url": {"url": "http://x/a.png"}},
                ],
            }
        )
        assert msg.is_structured
        assert msg.content[0] == ContentPart.of_text("what is this?")
        assert msg.content[1].kind == ContentKind.IMAGE
        assert msg.content[1] == ContentPart.image_url("http://x/a.png")
        assert msg.content[1].url == "http://x/a.png"

    def test_image_kind(self) -> None:
        part = ContentPart.from_dict({"type": "image", "url": "http://x/b.png"})
        assert part.kind == ContentKind.IMAGE
        assert part.url == "http://x/b.png"

    @pytest.mark.parametrize(
        "data",
        [
            {"role": "robot", "content": "hi"},
            {"content": "hi"},
            {"role": "user", "content": 42},
            "user: hi",
            {"role": "user", "content": ["hi"]},
            {"role": "user", "content": [{"type": "text", "text": "a"}, 3]},
        ],
    )
    def test_invalid(self, data: object) -> None:
        with pytest.raises(ValueError):
            Message.from_dict(data)  # type: ignore[arg-type]


class TestContentPartFromDict:
    def test_openai_image_url_matches_factory(self) -> None:
        part = ContentPart.from_dict(
            {"type": "image_url", "image_url": {"url": "http://x/c.png"}}
        )
        assert part == ContentPart.image_url("http://x/c.png")

    def test_image_url_string_payload(self) -> None:
        part = ContentPart.from_dict({"type": "image_url", "image_url": "http://x/d.png"})
        assert part.kind == ContentKind.IMAGE
        assert part.url == "http://x/d.png"

    def test_unknown_kind_kept_as_string(self) -> None:
        assert ContentPart.from_dict({"type": "audio"}).kind == "audio"

    @pytest.mark.parametrize("data", ["hi", 3, None, ["text"]])
    def test_non_object_rejected(self, data: object) -> None:
        with pytest.raises(ValueError, match="content part must be an object"):
            ContentPart.from_dict(data)  # type: ignore[arg-type]
