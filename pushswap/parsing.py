"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = "0123456789"
_WHITESPACE = " \a\b\t\n\v\f\r"


class InputError(ValueError):
    """Raised when the arguments do not form a valid list of integers."""


def has_valid_syntax(token: str) -> bool:
    """Return True if the token is an optional sign followed by digits.

    After the first character at most ten characters may follow.
    """
    if not token:
        return False
    first, rest = token[0], token[1:]
    if first in "+-":
        if not rest or rest[0] not in _DIGITS:
            return False
    elif first not in _DIGITS:
        return False
    if any(c not in _DIGITS for c in rest):
        return False
    return len(rest) <= 10


def parse_number(token: str) -> int:
    """Read an integer the lenient way: skip blanks, one sign, then digits.

    Anything after the digits is ignored; no digits at all gives 0.
    """
    text = token.lstrip(_WHITESPACE)
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    result = 0
    for c in text:
        if c not in _DIGITS:
            break
        result = result * 10 + int(c)
    return -result if negative else result


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split on runs of the separator, dropping empty words."""
    return [word for word in text.split(separator) if word]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers for stack a.

    No arguments, or one empty argument, gives an empty list. A single
    argument is split on spaces. Raises InputError on bad syntax, values
    outside the 32-bit range, duplicates, or a single blank argument.
    """
    if not args or (len(args) == 1 and not args[0]):
        return []
    tokens = split_words(args[0], " ") if len(args) == 1 else list(args)
    if not tokens:
        raise InputError("no numbers given")
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not has_valid_syntax(token):
            raise InputError(f"not an integer: {token!r}")
        value = parse_number(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
        if value in seen:
            raise InputError(f"duplicate value: {token!r}")
        seen.add(value)
        numbers.append(value)
    return numbers