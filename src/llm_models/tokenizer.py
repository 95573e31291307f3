"""Default token counter backed by tiktoken."""
from __future__ import annotations

from functools import lru_cache
from typing import Callable

import tiktoken

TokenCounter = Callable[[str], int]

ENCODING_NAME = "cl100k_base"


@lru_cache(maxsize=1)
def _encoder() -> tiktoken.Encoding:
    return tiktoken.get_encoding(ENCODING_NAME)


def count_tokens(text: str) -> int:
    """Count tokens in ``text``.

    Special-token markers are counted as ordinary text.
    """
    if not text:
        return 0
    return len(_encoder().encode(text, disallowed_special=()))
