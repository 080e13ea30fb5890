"""Searching and comparing strings the way the shell's helpers expect.

Positions are returned as indices into the searched string, or ``None``
when there is nothing to find.
"""

from __future__ import annotations

__all__ = [
    "find_char",
    "find_last_char",
    "compare",
    "compare_n",
    "find_bounded",
    "find_substring",
    "remove_through",
    "before_char",
    "export_value",
]

_NUL = "\0"


def _require(value: str | None, what: str) -> str:
    if value is None:
        raise TypeError(f"{what}: no string given")
    return value


def find_char(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL ``c`` finds the end of ``s``."""
    s = _require(s, "find_char")
    if c == _NUL:
        return len(s)
    idx = s.find(c)
    return idx if idx >= 0 else None


def find_last_char(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL ``c`` finds the end of ``s``."""
    s = _require(s, "find_last_char")
    if c == _NUL:
        return len(s)
    idx = s.rfind(c)
    return idx if idx >= 0 else None


def compare(s1: str, s2: str) -> int:
    """Distance between the first differing characters, never negative.

    Zero means the strings are equal. When one string is a prefix of the
    other, the result is the code of the longer string's next character.
    """
    s1 = _require(s1, "compare")
    s2 = _require(s2, "compare")
    for a, b in zip(s1, s2):
        if a != b:
            return abs(ord(a) - ord(b))
    if len(s1) == len(s2):
        return 0
    longer, shorter = (s1, s2) if len(s1) > len(s2) else (s2, s1)
    return ord(longer[len(shorter)])


def compare_n(s1: str, s2: str, n: int) -> int:
    """Signed difference of the first differing character within ``n``."""
    s1 = _require(s1, "compare_n")
    s2 = _require(s2, "compare_n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_bounded(big: str | None, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``."""
    if big is None:
        return None
    if not little:
        return 0
    if length <= 0:
        return None
    idx = big[:length].find(little)
    return idx if idx >= 0 else None


def find_substring(big: str, little: str) -> int | None:
    """Index of the first ``little`` in ``big``; an empty ``big`` holds nothing."""
    big = _require(big, "find_substring")
    if little is None or not big:
        return None
    idx = big.find(little)
    return idx if idx >= 0 else None


def remove_through(s: str, rm: str) -> str:
    """Drop everything in ``s`` up to and including a match of ``rm``.

    The scan restarts from scratch after a mismatch without rechecking the
    mismatching character, and a match that ends exactly at the end of
    ``s`` leaves ``s`` unchanged.
    """
    matched = 0
    for pos, ch in enumerate(s):
        if matched == len(rm):
            return s[pos:]
        matched = matched + 1 if ch == rm[matched] else 0
    return s


def before_char(s: str, c: str) -> str:
    """The part of ``s`` before the first ``c``.

    Raises ValueError when ``c`` does not occur in ``s``.
    """
    idx = s.find(c) if c != _NUL else -1
    if idx < 0:
        raise ValueError(f"character {c!r} not found")
    return s[:idx]


def export_value(entry: str, key: str) -> str | None:
    """The value of a ``KEY=value`` entry when its name is exactly ``key``."""
    entry = _require(entry, "export_value")
    if not key:
        return None
    name, sep, value = entry.partition("=")
    if sep and name == key:
        return value
    return None