"""Content modalities a model accepts."""
from __future__ import annotations

from enum import Flag


class ModelCapabilities(Flag):
    """Combinable set of input modalities.

    Members combine with ``|``; ``NONE`` is the empty set.
    """

    NONE = 0
    TEXT = 1
    VISION = 2

    @classmethod
    def parse(cls, text: str) -> ModelCapabilities:
        """Parse free-text configuration such as ``"text,vision"``.

        Matching is case-sensitive and substring based: ``"text"`` and
        ``"vision"`` anywhere in the input enable their flag. An empty
        string means text only; anything else unrecognized yields ``NONE``.
        """
        value = text or "text"
        output = cls.NONE
        if "text" in value:
            output |= cls.TEXT
        if "vision" in value:
            output |= cls.VISION
        return output

    def names(self) -> list[str]:
        """Lowercase member names contained in this set, in declaration order."""
        return [m.name.lower() for m in type(self) if m and m in self]
