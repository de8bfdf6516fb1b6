"""
Seeded pseudo-random stream driving the solver's branching heuristic.

Mulberry32 has a 32-bit state and yields the same stream on every platform
for a given integer seed.
"""

_MASK = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class Mulberry32:
    """Callable generator returning floats in [0, 1)."""

    def __init__(self, seed: int = 0):
        self._state = int(seed) & _MASK

    def __call__(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296

    def randrange(self, n: int) -> int:
        """Uniform index in [0, n)."""
        if n <= 0:
            raise ValueError(f"randrange() needs a positive bound, got {n}")
        return int(self() * n)
