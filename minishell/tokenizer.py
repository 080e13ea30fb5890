"""Splitting a command line into words, pipes, redirections and dollars."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Tokenization", "is_separator", "tokenize"]

_WHITESPACE = " \t\n\v\f\r"
_OPERATORS = "|<>$"
_QUOTES = "\"'"
_REDIRECTIONS = "<>"


@dataclass(frozen=True)
class Tokenization:
    """The tokens of one line and whether it held a syntax error."""

    tokens: list[str] = field(default_factory=list)
    syntax_error: bool = False


def is_separator(c: str) -> bool:
    """True for characters that end a word: operators, whitespace, end of input.

    The empty string and NUL both stand for the end of input.
    """
    if len(c) > 1:
        raise ValueError("is_separator expects a single character")
    return c in ("", "\0") or c in _WHITESPACE or c in _OPERATORS


def _pieces(line: str) -> tuple[list[tuple[str, int]], bool]:
    """Scan ``line`` into (text, slots) pieces and a syntax-error flag.

    A run of redirection characters is one piece of text but occupies one
    slot per operator in it (``>>`` and ``<<`` counting as one operator).
    """
    pieces: list[tuple[str, int]] = []
    error = False
    end = len(line)
    pos = 0
    while pos < end:
        while pos < end and line[pos] in _WHITESPACE:
            pos += 1

        start = pos
        while pos < end and not is_separator(line[pos]):
            if line[pos] in _QUOTES:
                # A quote swallows the remainder of the line.
                pos = end
                error = True
                break
            pos += 1
        if pos > start:
            pieces.append((line[start:pos], 1))

        if pos < end and line[pos] == "|":
            pieces.append(("|", 1))
            pos += 1

        start = pos
        slots = 0
        while pos < end and line[pos] in _REDIRECTIONS:
            doubled = pos + 1 < end and line[pos + 1] == line[pos]
            pos += 2 if doubled else 1
            slots += 1
        if slots:
            pieces.append((line[start:pos], slots))

        if pos < end and line[pos] == "$":
            pieces.append(("$", 1))
            pos += 1
    return pieces, error


def tokenize(line: str | None) -> Tokenization | None:
    """Break ``line`` into tokens; ``None`` when there is no line.

    Words end at whitespace, ``|``, ``<``, ``>`` and ``$``; each ``|`` and
    ``$`` is a token of its own, as is ``<``, ``>``, ``<<`` or ``>>``. A run
    of several redirection operators comes out as a single token and ends
    the token list. A quote takes the rest of the line into its word and
    marks the line as a syntax error.
    """
    if line is None:
        return None
    line = line.split("\0", 1)[0]
    pieces, error = _pieces(line)
    tokens: list[str] = []
    for text, slots in pieces:
        tokens.append(text)
        if slots > 1:
            break
    return Tokenization(tokens=tokens, syntax_error=error)