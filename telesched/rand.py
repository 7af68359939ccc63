"""Subtractive lagged-Fibonacci pseudo-random generator seeded by a real in (0, 1)."""

from __future__ import annotations

_STATE_SIZE = 55
_SHORT_LAG = 24
_LONG_LAG = 31


class RandomGenerator:
    """Deterministic generator producing reals in [0, 1) from a seed in (0, 1)."""

    def __init__(self, seed: float) -> None:
        seed = float(seed)
        if not 0.0 < seed < 1.0:
            raise ValueError(f"seed must lie in (0, 1), got {seed!r}")
        self.seed = seed
        self._state: list[float] = []
        self._cursor = 0
        self.reset()

    def reset(self) -> None:
        """Restart the sequence from the seed."""
        self._state = [0.0] * _STATE_SIZE
        self._cursor = 0
        self._warmup()

    def _warmup(self) -> None:
        state = self._state
        state[_STATE_SIZE - 1] = self.seed
        new_random = 0.000000001
        prev_random = self.seed
        for step in range(1, _STATE_SIZE):
            slot = (21 * step) % (_STATE_SIZE - 1)
            state[slot] = new_random
            new_random = prev_random - new_random
            if new_random < 0.0:
                new_random += 1.0
            prev_random = state[slot]
        for _ in range(3):
            self._advance()
        self._cursor = 0

    def _advance(self) -> None:
        state = self._state
        for slot in range(_SHORT_LAG):
            value = state[slot] - state[slot + _LONG_LAG]
            state[slot] = value + 1.0 if value < 0.0 else value
        for slot in range(_SHORT_LAG, _STATE_SIZE):
            value = state[slot] - state[slot - _SHORT_LAG]
            state[slot] = value + 1.0 if value < 0.0 else value

    def random(self) -> float:
        """Return the next real in [0, 1)."""
        self._cursor += 1
        if self._cursor >= _STATE_SIZE:
            self._cursor = 1
            self._advance()
        return self._state[self._cursor]

    def randint(self, low: int, high: int) -> int:
        """Return an integer in [low, high]; ``low`` when the range is empty."""
        if low >= high:
            return low
        result = int(low + self.random() * (high - low + 1))
        return min(result, high)

    def uniform(self, low: float, high: float) -> float:
        """Return a real between ``low`` and ``high``."""
        return low + (high - low) * self.random()