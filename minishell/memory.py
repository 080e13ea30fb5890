"""Byte-buffer helpers: searching, comparing, copying and filling."""

from __future__ import annotations

__all__ = [
    "mem_find",
    "mem_compare",
    "mem_copy",
    "mem_move",
    "mem_set",
    "resized",
]


def _check_span(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: negative length")
    if n > length:
        raise ValueError(f"{what}: {n} bytes requested, buffer holds {length}")


def mem_find(buf: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (mod 256) among the first ``n``."""
    _check_span(len(buf), n, "mem_find")
    idx = bytes(buf[:n]).find(c & 0xFF)
    return idx if idx >= 0 else None


def mem_compare(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes within ``n``; zero if none."""
    _check_span(min(len(a), len(b)), n, "mem_compare")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def mem_copy(dest: bytearray | None, src: bytes | None, n: int) -> bytearray | None:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``.

    Returns ``dest``; when both buffers are missing, returns ``None``.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("mem_copy: missing buffer")
    _check_span(len(src), n, "mem_copy")
    _check_span(len(dest), n, "mem_copy")
    dest[:n] = src[:n]
    return dest


def mem_move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes at offset ``src`` to offset ``dest`` in ``buf``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    if dest < 0 or src < 0:
        raise ValueError("mem_move: negative offset")
    _check_span(len(buf) - src, n, "mem_move")
    _check_span(len(buf) - dest, n, "mem_move")
    buf[dest : dest + n] = buf[src : src + n]
    return buf


def mem_set(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (mod 256)."""
    _check_span(len(buf), n, "mem_set")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def resized(buf: bytes, size: int) -> bytearray:
    """A new buffer of ``size`` bytes starting with the contents of ``buf``.

    Longer results are padded with zero bytes.
    """
    if size < 0:
        raise ValueError("resized: negative size")
    result = bytearray(size)
    kept = min(size, len(buf))
    result[:kept] = buf[:kept]
    return result