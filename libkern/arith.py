"""Integer absolute value and division with C semantics at fixed widths."""

from __future__ import annotations

from typing import NamedTuple

EXIT_SUCCESS = 0
EXIT_FAILURE = -1

_INT_BITS = 32
_LONG_BITS = 64


class DivResult(NamedTuple):
    """Quotient and remainder of a truncating division."""

    quot: int
    rem: int


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _abs(j: int, bits: int) -> int:
    value = _wrap(j, bits)
    return _wrap(-value, bits) if value < 0 else value


def _div(numer: int, denom: int, bits: int) -> DivResult:
    numer = _wrap(numer, bits)
    denom = _wrap(denom, bits)
    if denom == 0:
        raise ZeroDivisionError("integer division by zero")
    quot = abs(numer) // abs(denom)
    if (numer < 0) != (denom < 0):
        quot = -quot
    rem = numer - quot * denom
    return DivResult(_wrap(quot, bits), _wrap(rem, bits))


def iabs(j: int) -> int:
    """Absolute value of a 32-bit ``int``; the minimum value maps to itself."""
    return _abs(j, _INT_BITS)


def labs(j: int) -> int:
    """Absolute value of a 64-bit ``long``."""
    return _abs(j, _LONG_BITS)


def llabs(j: int) -> int:
    """Absolute value of a 64-bit ``long long``."""
    return _abs(j, _LONG_BITS)


def div(numer: int, denom: int) -> DivResult:
    """Truncating 32-bit division; the remainder takes the numerator's sign."""
    return _div(numer, denom, _INT_BITS)


def ldiv(numer: int, denom: int) -> DivResult:
    """Truncating 64-bit division."""
    return _div(numer, denom, _LONG_BITS)


def lldiv(numer: int, denom: int) -> DivResult:
    """Truncating 64-bit division."""
    return _div(numer, denom, _LONG_BITS)