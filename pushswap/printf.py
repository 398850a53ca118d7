"""A small formatter for %c %s %p %d %i %u %x %X, writing to a stream."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec not in "cspdiuxX":
        return spec
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return chr(arg & 0xFF) if isinstance(arg, int) else str(arg)[:1]
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        address = arg & _ULONG_MASK
        return "(nil)" if address == 0 else f"0x{address:x}"
    if spec in "di":
        return str(_to_int32(arg))
    unsigned = arg & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    return f"{unsigned:x}" if spec == "x" else f"{unsigned:X}"


def render(fmt: str, *args: Any) -> str:
    """Return the formatted text.

    An unknown conversion character is written as itself, so "%%" gives
    "%". A lone "%" at the end gives a NUL character.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for c in chars:
        if c != "%":
            pieces.append(c)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("\0")
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to the stream (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)