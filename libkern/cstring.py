"""NUL-terminated string operations.

Strings are Python ``str`` values read as C strings: an embedded ``"\\0"``
ends the string, and anything after it is ignored. Functions that write
into a destination in C return the resulting string instead.
"""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL."""
    return s.partition(_NUL)[0]


def _diff(a: str, b: str) -> int:
    return ord(a) - ord(b)


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strcpy(dst: str, src: str) -> str:
    """Return the destination string after ``src`` is copied over ``dst``."""
    del dst  # fully replaced by the terminated copy of src
    return _cstr(src)


def strncpy(dst: str, src: str, num: int) -> str:
    """Return the destination string after copying at most ``num`` characters.

    A source no longer than ``num`` is copied whole with its terminator. A
    longer source yields exactly ``num`` characters with no terminator, so
    the rest of ``dst`` beyond them remains part of the string.
    """
    if num < 0:
        raise ValueError(f"character count must not be negative, got {num}")
    source = _cstr(src)
    if len(source) <= num:
        return source
    return source[:num] + _cstr(dst)[num:]


def strcat(dst: str, src: str) -> str:
    """Return ``src`` appended to the end of ``dst``."""
    return _cstr(dst) + _cstr(src)


def strncat(dst: str, src: str, num: int) -> str:
    """Return at most ``num`` characters of ``src`` appended to ``dst``."""
    if num < 0:
        raise ValueError(f"character count must not be negative, got {num}")
    return _cstr(dst) + _cstr(src)[:num]


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings.

    Strings of different length compare by length alone: the result is the
    length difference. Strings of equal length compare character by
    character, returning the difference of the first differing pair.
    """
    a, b = _cstr(s1), _cstr(s2)
    if len(a) != len(b):
        return len(a) - len(b)
    return next((_diff(x, y) for x, y in zip(a, b) if x != y), 0)


def strncmp(s1: str, s2: str, num: int) -> int:
    """Compare at most ``num`` characters of two strings.

    When either string is at least ``num`` characters long, the first
    ``num`` characters are compared in order, the terminator counting as a
    character of value zero. Otherwise the rules of :func:`strcmp` apply.
    """
    if num < 0:
        raise ValueError(f"character count must not be negative, got {num}")
    a, b = _cstr(s1), _cstr(s2)
    if len(a) >= num or len(b) >= num:
        pairs = zip_longest(a[:num], b[:num], fillvalue=_NUL)
        return next((_diff(x, y) for x, y in pairs if x != y), 0)
    return strcmp(a, b)