"""Conversion of raw asset names into the identifiers code uses to reference them."""

from __future__ import annotations

import re
from typing import Iterator

DELIMITERS = "_ -."

_DELIMITER_PATTERN = re.compile(f"[{re.escape(DELIMITERS)}]")


def split_words(raw_name: str) -> list[str]:
    """Return the ordered words of *raw_name* split on delimiters and capitals."""
    words: list[str] = []
    for segment in _DELIMITER_PATTERN.split(raw_name):
        if segment:
            words.extend(_split_on_capitals(segment))
    return words


def normalize(raw_name: str) -> str:
    """Return the lowerCamelCase identifier for *raw_name*.

    ``"Home_Icon"`` becomes ``"homeIcon"`` and ``"2Background"`` becomes
    ``"_2Background"``. A name with no words at all (empty, or only
    delimiters) is returned unchanged.
    """
    words = split_words(raw_name)
    if not words:
        return raw_name

    first, rest = words[0], words[1:]
    combined = first.lower() + "".join(_capitalize(word) for word in rest)

    if combined[:1].isnumeric():
        return "_" + combined
    return combined


def _split_on_capitals(segment: str) -> Iterator[str]:
    word = ""
    for char in segment:
        if char.isupper() and word:
            yield word
            word = char
        else:
            word += char
    if word:
        yield word


def _capitalize(word: str) -> str:
    # Uppercase rather than titlecase the first character, unlike str.capitalize().
    return word[:1].upper() + word[1:].lower()
