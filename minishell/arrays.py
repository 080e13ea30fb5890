"""Editing and printing lists of ``KEY=value`` style entries."""

from __future__ import annotations

import sys
from typing import TextIO

from minishell.search import find_bounded

__all__ = ["remove_entries", "replace_entry", "print_entries"]


def _first_starting_with(key: str, entries: list[str]) -> int | None:
    return next(
        (
            pos
            for pos, entry in enumerate(entries)
            if find_bounded(entry, key, len(key)) is not None
        ),
        None,
    )


def remove_entries(key: str | None, entries: list[str]) -> list[str]:
    """Remove entries matching ``key`` once any entry starts with it.

    An entry is dropped when ``key`` appears within its first
    ``len(key) + 1`` characters. If no entry starts with ``key``, or
    ``key`` is missing, ``entries`` is returned as it is.
    Raises ValueError for an empty or missing list.
    """
    if not entries:
        raise ValueError("no entries to remove from")
    if key is None or _first_starting_with(key, entries) is None:
        return entries
    return [e for e in entries if find_bounded(e, key, len(key) + 1) is None]


def replace_entry(
    key: str | None, entries: list[str], replacement: str | None
) -> list[str]:
    """A copy of ``entries`` with the first entry starting with ``key`` replaced.

    Without a ``key`` or ``replacement``, or when nothing matches,
    ``entries`` is returned as it is. Raises ValueError for an empty list.
    """
    if not entries:
        raise ValueError("no entries to search")
    if key is None or replacement is None:
        return entries
    pos = _first_starting_with(key, entries)
    if pos is None:
        return entries
    updated = list(entries)
    updated[pos] = replacement
    return updated


def print_entries(entries: list[str], stream: TextIO | None = None) -> int:
    """Write each entry on its own line; return the characters of the entries.

    Raises ValueError for an empty or missing list.
    """
    if not entries:
        raise ValueError("array doesn't exist")
    out = sys.stdout if stream is None else stream
    for entry in entries:
        out.write(entry + "\n")
    return sum(len(entry) for entry in entries)