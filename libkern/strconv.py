"""String to integer conversions: the strto* and ato* family.

The conversions follow the kernel library's rules, which differ from a
hosted C library in a few places:

* Leading characters that are neither a sign nor a valid digit are skipped,
  whatever they are. Only whitespace is skipped in a hosted C library.
* For bases up to ten every decimal digit counts as a digit. For example,
  ``"9"`` is accepted in base 2.
* The unsigned conversions ignore signs and treat them as junk to skip.
* Results wrap around to the 64-bit width of ``long`` on the target.
  ``atoi`` narrows further to a 32-bit ``int``.

Every ``strto*`` function returns a ``(value, end)`` pair. ``end`` is the
index in ``text`` just past the last character used.
"""

from __future__ import annotations

_LONG_BITS = 64
_INT_BITS = 32
_ULONG_MASK = (1 << _LONG_BITS) - 1


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _letter_range(first: str, base: int) -> tuple[str, str]:
    return first, chr(ord(first) + base - 11)


def is_valid_digit(c: str, base: int) -> bool:
    """Tell whether the character ``c`` is a digit in ``base``.

    An empty string stands for the end of the text and is never a digit.
    """
    if len(c) != 1:
        return False
    if "0" <= c <= "9":
        return True
    if base <= 10:
        return False
    low_first, low_last = _letter_range("a", base)
    up_first, up_last = _letter_range("A", base)
    return low_first <= c <= low_last or up_first <= c <= up_last


def to_base_value(c: str, base: int) -> int:
    """Return the numeric value of the digit ``c`` in ``base``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if base <= 10:
        return 0
    low_first, low_last = _letter_range("a", base)
    if low_first <= c <= low_last:
        return ord(c) - ord("a") + 10
    return ord(c) - ord("A") + 10


def _scan(text: str, base: int, signed: bool) -> tuple[int, bool, int]:
    """Parse ``text`` and return ``(magnitude, negative, end)``."""
    if base == 0:
        digit_base = 10
    elif 2 <= base <= 36:
        digit_base = base
    else:
        raise ValueError(f"invalid base {base}: must be 0 or between 2 and 36")

    def at(index: int) -> str:
        return text[index] if index < len(text) else ""

    def is_sign(ch: str) -> bool:
        return signed and ch in ("+", "-")

    i = 0
    while i < len(text) and not is_sign(text[i]) and not is_valid_digit(text[i], digit_base):
        i += 1

    negative = False
    if is_sign(at(i)):
        negative = at(i) == "-"
        i += 1

    if base in (0, 16) and at(i) == "0":
        i += 1
        if at(i) in ("x", "X"):
            i += 1
            digit_base = 16
        elif base == 0:
            digit_base = 8

    start = i
    while is_valid_digit(at(i), digit_base):
        i += 1

    magnitude = 0
    for ch in text[start:i]:
        magnitude = magnitude * digit_base + to_base_value(ch, digit_base)
    return magnitude, negative, i


def _signed(text: str, base: int) -> tuple[int, int]:
    magnitude, negative, end = _scan(text, base, signed=True)
    value = -magnitude if negative else magnitude
    return _wrap_signed(value, _LONG_BITS), end


def _unsigned(text: str, base: int) -> tuple[int, int]:
    magnitude, _, end = _scan(text, base, signed=False)
    return magnitude & _ULONG_MASK, end


def strtol(text: str, base: int = 10) -> tuple[int, int]:
    """Convert ``text`` to a signed 64-bit integer; return ``(value, end)``."""
    return _signed(text, base)


def strtoll(text: str, base: int = 10) -> tuple[int, int]:
    """Convert ``text`` to a signed 64-bit integer; return ``(value, end)``."""
    return _signed(text, base)


def strtoul(text: str, base: int = 10) -> tuple[int, int]:
    """Convert ``text`` to an unsigned 64-bit integer; return ``(value, end)``."""
    return _unsigned(text, base)


def strtoull(text: str, base: int = 10) -> tuple[int, int]:
    """Convert ``text`` to an unsigned 64-bit integer; return ``(value, end)``."""
    return _unsigned(text, base)


def atoi(text: str) -> int:
    """Convert decimal ``text`` to a 32-bit signed integer."""
    value, _ = strtol(text, 10)
    return _wrap_signed(value, _INT_BITS)


def atol(text: str) -> int:
    """Convert decimal ``text`` to a 64-bit signed integer."""
    return strtol(text, 10)[0]


def atoll(text: str) -> int:
    """Convert decimal ``text`` to a 64-bit signed integer."""
    return strtoll(text, 10)[0]