"""Seeded pseudo-random source shared by a simulation run.

Every stochastic decision in a run (GTFT forgiveness, indefinite-horizon
continuation) draws from one RandomSource, so results are a pure function
of the seed and the order in which matches consume the stream.
"""

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_SCALE = 4294967296.0  # 2**32


def _imul(a: int, b: int) -> int:
    """32-bit multiplication with wraparound."""
    return (a * b) & _MASK


class RandomSource:
    """Mulberry32 generator producing floats in [0, 1).

    The state is an unsigned 32-bit integer. Seed 0 is a valid seed.
    """

    def __init__(self, seed: int = 0):
        self._state = seed & _MASK

    @property
    def seed(self) -> int:
        """Current internal state."""
        return self._state

    def reset(self, seed: int) -> None:
        """Replace the internal state with ``seed``."""
        self._state = seed & _MASK

    def draw(self) -> float:
        """Advance the state and return the next value in [0, 1)."""
        self._state = (self._state + _INCREMENT) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / _SCALE

    def __repr__(self) -> str:
        return f"RandomSource(state={self._state:#010x})"
