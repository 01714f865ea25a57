"""Shared fixtures for maze engine tests."""

import pytest

from mazespinner.domain.circular_grid import CircularGrid
from mazespinner.domain.rect_grid import RectGrid
from mazespinner.utils.rng import SeededRNG


class ScriptedRNG(SeededRNG):
    """Deterministic stand-in that always takes the first option.

    randrange() returns 0, choice() returns the first element and shuffle()
    keeps the order, which makes carving traces easy to follow by hand.
    """

    def __init__(self):
        super().__init__(seed=0)
        self.calls = 0

    def randrange(self, n: int) -> int:
        self.calls += 1
        return 0

    def choice(self, seq):
        self.calls += 1
        return seq[0]

    def shuffle(self, seq) -> None:
        self.calls += 1


@pytest.fixture
def scripted_rng() -> ScriptedRNG:
    return ScriptedRNG()


@pytest.fixture
def rng() -> SeededRNG:
    return SeededRNG(1234)


@pytest.fixture
def rect_grid() -> RectGrid:
    return RectGrid(4, 4)


@pytest.fixture
def circular_grid() -> CircularGrid:
    return CircularGrid(rings=3, sectors_in_outer_ring=12)
