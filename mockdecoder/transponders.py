import random

TRANSPONDER_MIN = 10000
TRANSPONDER_MAX = 99999  # exclusive


class TransponderPool:
    """Fixed set of synthetic transponder ids, shared read-only by all sessions."""

    def __init__(self, ids, rng=None):
        self._ids = tuple(ids)
        if not self._ids:
            raise ValueError("transponder pool must not be empty")
        self._rng = rng or random

    @classmethod
    def generate(cls, count: int, rng=None):
        if count < 1:
            raise ValueError(f"transponder count must be at least 1, got {count}")
        rng = rng or random
        ids = [str(rng.randrange(TRANSPONDER_MIN, TRANSPONDER_MAX)) for _ in range(count)]
        return cls(ids, rng)

    @property
    def ids(self) -> tuple:
        return self._ids

    def pick_random(self) -> str:
        return self._rng.choice(self._ids)

    def __len__(self):
        return len(self._ids)

    def __iter__(self):
        return iter(self._ids)
