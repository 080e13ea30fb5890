"""Command-line tokenizer and string, list, memory and line-reading helpers for a small shell."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "lines",
    "linked",
    "memory",
    "search",
    "tokenizer",
]