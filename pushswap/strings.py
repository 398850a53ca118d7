"""String searching, joining, bounded copying and trimming helpers.

Positions are returned as indices into the string rather than as
pointers; a missing match gives None. The NUL character stands for the
end of the string where the search functions treat it specially.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import chain, islice, zip_longest
from typing import Any

_NUL = "\0"


def _as_char(c: int | str) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of c in s, or None.

    Searching for NUL finds the end of the string, at index len(s).
    An int is taken as a byte value.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return index if index >= 0 else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of c in s, or None.

    Searching for NUL finds the end of the string, at index len(s).
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strjoin(s1: str | None, s2: str) -> str | None:
    """Return s1 followed by s2; None if s1 is None."""
    if s1 is None:
        return None
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of the given size.

    Returns the text that fits (at most size - 1 characters) and the full
    length of src, which tells whether the copy was truncated.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of the given size.

    Returns the resulting text and the length it tried to create: the
    length of dst (capped at size) plus the length of src. If dst already
    fills the buffer it is returned unchanged.
    """
    if size <= 0:
        return dst, len(src)
    used = min(len(dst), size)
    room = max(0, size - 1 - used)
    return dst + src[:room], used + len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return their difference at the first mismatch.

    Zero means equal over the compared span. The end of a string compares
    as a NUL character.
    """
    if n <= 0:
        return 0
    pairs = chain(zip_longest(s1, s2, fillvalue=_NUL), [(_NUL, _NUL)])
    for position, (x, y) in enumerate(islice(pairs, n)):
        if x != y or x == _NUL or position == n - 1:
            return (ord(x) & 0xFF) - (ord(y) & 0xFF)
    return 0


def strnstr(big: str | None, little: str | None, n: int) -> int | None:
    """Return the index where little first occurs within the first n characters of big.

    An empty little matches at index 0. None if there is no match.
    """
    if (big is None or little is None) and n == 0:
        return None
    if big is None or little is None:
        raise TypeError("strnstr needs two strings when n is not zero")
    if not little:
        return 0
    index = big.find(little, 0, max(n, 0))
    return index if index >= 0 else None


def strtrim(s: str | None, chars: str) -> str | None:
    """Remove characters found in chars from both ends of s; None stays None."""
    if s is None:
        return None
    return s.strip(chars)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return up to length characters of s beginning at start.

    A start at or past the end, or a zero length, gives an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start : start + length]


def strmapi(s: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from func(index, char) for each character of s."""
    if s is None or func is None:
        return None
    return "".join(func(index, c) for index, c in enumerate(s))


def striteri(
    s: MutableSequence[Any] | None,
    func: Callable[[int, Any], Any] | None,
) -> None:
    """Call func(index, item) on each item of a mutable character sequence.

    A non-None result replaces the item in place. Iteration stops at the
    first NUL item ("\\0" or 0).
    """
    if s is None or func is None:
        return
    for index, item in enumerate(s):
        if item == _NUL or item == 0:
            break
        result = func(index, item)
        if result is not None:
            s[index] = result