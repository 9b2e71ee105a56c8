"""Substring search and word splitting helpers used by the XPM reader."""

from __future__ import annotations

import re

_WORD = re.compile(r"[^ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, length: int) -> int:
    """Return the position of ``needle`` in ``text``, or -1.

    ``length`` is the size of the region the caller is allowed to search;
    a needle longer than that is never found.
    """
    _check_needle(needle)
    if len(needle) > length:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but ignore matches inside double-quoted strings."""
    _check_needle(needle)
    if len(needle) > length:
        return -1
    quoted = False
    last_start = len(text) - len(needle) + 1
    for pos, char in enumerate(text[:last_start]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs; other characters are kept."""
    return _WORD.findall(text)