import pytest

from pushswap.strings import (
    strchr,
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_missing_is_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")


def test_strchr_int_wraps_to_byte():
    s = "abc"
    index = strchr(s, ord("b") + 256)
    assert s[index] == "b"


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    s = "hello"
    index = strrchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[index + 1 :]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "z") is None
    assert strrchr("hello", 0) == len("hello")


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin("", "") == ""
    assert strjoin(None, "bar") is None


def test_strlcpy_truncates():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_fits_whole():
    copied, length = strlcpy("hello", 100)
    assert copied == "hello"
    assert length == len("hello")


def test_strlcpy_size_zero():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    result, total = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert total == len("ab") + len("cd")


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_strlcat_never_exceeds_buffer(size):
    result, total = strlcat("ab", "cdef", size)
    assert result.startswith("ab")
    assert len(result) <= max(size - 1, len("ab"))
    assert total == min(len("ab"), size) + len("cdef")


def test_strlcat_full_destination_unchanged():
    result, total = strlcat("abcdef", "xy", 3)
    assert result == "abcdef"
    assert total == 3 + len("xy")


def test_strlcat_size_zero():
    assert strlcat("ab", "cd", 0) == ("ab", len("cd"))


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_stops_at_n():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string():
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strnstr_found_within_limit():
    big, little = "hello world", "world"
    index = strnstr(big, little, len(big))
    assert big[index : index + len(little)] == little


def test_strnstr_limit_too_small():
    big = "hello world"
    assert strnstr(big, "world", len(big) - 1) is None


def test_strnstr_empty_little_and_none():
    assert strnstr("abc", "", 0) == 0
    assert strnstr(None, "abc", 0) is None
    assert strnstr("abc", "zz", 3) is None


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyx", "xy") == ""
    assert strtrim("hi", "") == "hi"
    assert strtrim(None, "x") is None


def test_substr():
    s = "hello"
    assert substr(s, 1, 3) == s[1:4]
    assert substr(s, 2, 100) == s[2:]
    assert substr(s, 5, 2) == ""
    assert substr(s, 0, 0) == ""
    assert substr(None, 0, 1) is None


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("abc", lambda i, c: str(i)) == "012"
    assert strmapi(None, lambda i, c: c) is None


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper())
    assert "".join(chars) == "ABC"


def test_striteri_stops_at_nul():
    chars = list("ab\0c")
    striteri(chars, lambda i, c: c.upper())
    assert chars == ["A", "B", "\0", "c"]


def test_striteri_bytearray_and_indices():
    data = bytearray(b"abc")
    seen = []

    def record(i, b):
        seen.append(i)
        return b - 32

    striteri(data, record)
    assert bytes(data) == b"ABC"
    assert seen == [0, 1, 2]