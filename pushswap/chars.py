"""Character classes, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import TypeVar

from pushswap.parsing import parse_number

_Char = TypeVar("_Char", int, str)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _wrap(value: int, bits: int) -> int:
    """Reduce an integer to a signed two's-complement value of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: _Char) -> _Char:
    """Map an ASCII capital to lower case; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _Char) -> _Char:
    """Map an ASCII small letter to upper case; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Read a leading integer leniently, wrapping to 32 bits as a C int does."""
    return _wrap(parse_number(text), 32)


def atoll(text: str) -> int:
    """Read a leading integer leniently, wrapping to 64 bits."""
    return _wrap(parse_number(text), 64)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    return str(_wrap(n, 32))