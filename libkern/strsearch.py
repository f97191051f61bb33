"""Searching inside NUL-terminated strings, and tokenizing them.

Strings are Python ``str`` values read as C strings: an embedded ``"\\0"``
ends the string. Functions that return a pointer in C return an index into
the string here, or ``None`` where C returns a null pointer.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

_NUL = "\0"
_WHITESPACE = " \t\n\r\f\v"

CharLike = Union[str, int]


def _cstr(s: str) -> str:
    return s.partition(_NUL)[0]


def _char(val: CharLike) -> str:
    """Turn ``val`` into a single character, reducing integers to a byte."""
    if isinstance(val, int):
        return chr(val & 0xFF)
    if len(val) != 1:
        raise ValueError(f"expected a single character, got {val!r}")
    return val


def strchr(s: str, val: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``val`` in ``s``, or ``None``.

    The terminating NUL is never found.
    """
    index = _cstr(s).find(_char(val))
    return None if index < 0 else index


def strrchr(s: str, val: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``val`` in ``s``, or ``None``."""
    index = _cstr(s).rfind(_char(val))
    return None if index < 0 else index


def strcspn(s1: str, s2: str) -> int:
    """Length of the initial part of ``s1`` made of characters not in ``s2``."""
    text, reject = _cstr(s1), set(_cstr(s2))
    return next((i for i, ch in enumerate(text) if ch in reject), len(text))


def strspn(s1: str, s2: str) -> int:
    """Number of characters of ``s1`` that occur in ``s2``.

    Every character of ``s1`` is counted, not only an initial run: the
    count goes on past characters that are not in ``s2``.
    """
    accept = set(_cstr(s2))
    return sum(1 for ch in _cstr(s1) if ch in accept)


def strpbrk(s1: str, s2: str) -> Optional[int]:
    """Index of the first character of ``s1`` that occurs in ``s2``, or ``None``."""
    text = _cstr(s1)
    index = strcspn(text, s2)
    return None if index == len(text) else index


def strstr(s1: str, s2: str) -> Optional[int]:
    """Index of the first occurrence of ``s2`` in ``s1``, or ``None``.

    An empty ``s2`` matches at index zero. After a partial match fails, the
    search resumes at the character that failed to match rather than one
    past the start of the partial match.
    """
    hay, needle = _cstr(s1), _cstr(s2)
    if not needle:
        return 0
    i = 0
    while i < len(hay):
        if hay[i] != needle[0]:
            i += 1
            continue
        matched = 0
        while (
            matched < len(needle)
            and i + matched < len(hay)
            and hay[i + matched] == needle[matched]
        ):
            matched += 1
        if matched == len(needle):
            return i
        i += matched
    return None


class Tokenizer:
    """Splits a string into tokens, keeping its own position between calls.

    ``sep`` holds the separators used by iteration; it starts as whitespace
    and follows the separators last passed to :meth:`next`.
    """

    def __init__(self, text: str) -> None:
        self._text = _cstr(text)
        self._pos: Optional[int] = 0
        self.sep = _WHITESPACE

    def next(self, sep: str) -> Optional[str]:
        """Return the next token delimited by characters of ``sep``, or ``None``.

        Before each token the position moves forward by :func:`strspn` of the
        remaining text and ``sep``.
        """
        self.sep = sep
        if self._pos is None:
            return None
        text = self._text
        start = self._pos + strspn(text[self._pos:], sep)
        if start >= len(text):
            self._pos = None
            return None
        end = start + strcspn(text[start:], sep)
        self._pos = end + 1 if end < len(text) else None
        return text[start:end]

    def __iter__(self) -> Iterator[str]:
        while True:
            token = self.next(self.sep)
            if token is None:
                return
            yield token


def strtok(text: str, sep: str) -> List[str]:
    """Return every token of ``text`` delimited by characters of ``sep``."""
    tokenizer = Tokenizer(text)
    tokenizer.sep = sep
    return list(tokenizer)