"""Linear congruential pseudo-random number generator."""

from __future__ import annotations

RAND_MAX = 32767

_STATE_MASK = (1 << 64) - 1
_SEED_MASK = (1 << 32) - 1
_MULTIPLIER = 1103515245
_INCREMENT = 12345


class RandomState:
    """Generator state; a fresh state starts from seed 1."""

    def __init__(self, seed: int = 1) -> None:
        self._state = 1
        self.srand(seed)

    def rand(self) -> int:
        """Advance the state and return a value in ``[0, RAND_MAX - 2]``."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _STATE_MASK
        return (self._state // 65536) % (RAND_MAX - 1)

    def srand(self, seed: int) -> None:
        """Reseed with ``seed`` reduced to an unsigned 32-bit value."""
        self._state = seed & _SEED_MASK


_default = RandomState()


def rand() -> int:
    """Return the next value from the shared generator."""
    return _default.rand()


def srand(seed: int) -> None:
    """Reseed the shared generator."""
    _default.srand(seed)