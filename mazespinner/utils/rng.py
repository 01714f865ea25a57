"""Seeded random number generator for reproducible mazes."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """Seeded random number generator for reproducible results.

    Every generation run draws from one of these. Passing the same seed gives
    the same maze for the same configuration and algorithm.
    """
    
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed
    
    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed
    
    def set_seed(self, seed: Optional[int]):
        """Set a new seed."""
        self._seed = seed
        self._rng.seed(seed)
    
    def random(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self._rng.random()
    
    def randrange(self, n: int) -> int:
        """Generate a random integer N such that 0 <= N < n."""
        return self._rng.randrange(n)
    
    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)
    
    def shuffle(self, seq) -> None:
        """Shuffle the sequence in place."""
        self._rng.shuffle(seq)


def resolve_rng(rng: Optional[SeededRNG] = None) -> SeededRNG:
    """Return ``rng`` or a fresh unseeded generator owned by the caller's run."""
    if rng is None:
        return SeededRNG()
    return rng
