"""Core type definitions for maze grids and carving algorithms."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Literal, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Grid index: (x, y) for rectangular cells, (ring, sector) for circular cells
Coord = Tuple[int, int]

# Unordered pair of cell keys joined by a carved passage
Passage = FrozenSet[Coord]

RectDirection = Literal["north", "east", "south", "west"]
PolarDirection = Literal["inner", "outer", "cw", "ccw"]
Direction = Union[RectDirection, PolarDirection]

RECT_DIRECTIONS: Tuple[RectDirection, ...] = ("north", "east", "south", "west")
POLAR_DIRECTIONS: Tuple[PolarDirection, ...] = ("inner", "outer", "cw", "ccw")

OPPOSITE: Dict[str, str] = {
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
    "inner": "outer",
    "outer": "inner",
    "cw": "ccw",
    "ccw": "cw",
}

RECT_DELTAS: Dict[RectDirection, Coord] = {
    "north": (0, -1),
    "east": (1, 0),
    "south": (0, 1),
    "west": (-1, 0),
}


def passage_between(a: Coord, b: Coord) -> Passage:
    """Build the unordered passage key for two cell keys."""
    return frozenset((a, b))


@dataclass(eq=False)
class RectCell:
    """A single cell of a rectangular grid.

    Cells compare and hash by identity so they can be used as dict keys
    while their wall flags change during generation.
    """
    x: int
    y: int
    north: bool = True
    east: bool = True
    south: bool = True
    west: bool = True
    visited: bool = False

    @property
    def key(self) -> Coord:
        """Grid index of this cell."""
        return (self.x, self.y)

    def has_wall(self, direction: RectDirection) -> bool:
        """Check whether the wall on the given side is standing."""
        return getattr(self, direction)

    def set_wall(self, direction: RectDirection, standing: bool) -> None:
        setattr(self, direction, standing)

    def wall_count(self) -> int:
        return sum(1 for d in RECT_DIRECTIONS if getattr(self, d))


@dataclass(eq=False)
class PolarCell:
    """A single cell of a circular grid, addressed by ring and sector."""
    ring: int
    sector: int
    total_sectors: int
    inner: bool = True
    outer: bool = True
    cw: bool = True
    ccw: bool = True
    visited: bool = False

    @property
    def key(self) -> Coord:
        """Grid index of this cell."""
        return (self.ring, self.sector)

    def has_wall(self, direction: PolarDirection) -> bool:
        """Check whether the wall on the given side is standing."""
        return getattr(self, direction)

    def set_wall(self, direction: PolarDirection, standing: bool) -> None:
        setattr(self, direction, standing)


Cell = Union[RectCell, PolarCell]


@dataclass
class Neighbor:
    """A neighboring cell tagged with the direction it lies in."""
    cell: Cell
    direction: Direction


@dataclass
class WallEdge:
    """Candidate wall between two adjacent cells, used by Kruskal."""
    cell_a: Cell
    cell_b: Cell
    direction: Direction


class MazeAlgorithm(Enum):
    """Carving algorithms available to the generator."""
    BACKTRACKER = "backtracker"
    KRUSKAL = "kruskal"
    PRIM = "prim"
    BINARY_TREE = "binarytree"

    @classmethod
    def parse(cls, name: Optional[Union[str, "MazeAlgorithm"]]) -> "MazeAlgorithm":
        """
        Resolve an algorithm name to an enum member.

        Unknown or missing names fall back to the recursive backtracker,
        which is the documented default for unspecified input.

        Args:
            name: Algorithm name such as "prim" or "binary-tree", or a member

        Returns:
            The matching algorithm, or BACKTRACKER when nothing matches
        """
        if isinstance(name, cls):
            return name
        if not name:
            return cls.BACKTRACKER

        normalized = str(name).strip().lower().replace("_", "").replace("-", "")
        for member in cls:
            if member.value == normalized:
                return member

        logger.warning("Unknown maze algorithm %r, using %s", name, cls.BACKTRACKER.value)
        return cls.BACKTRACKER


class MazeTopology(Enum):
    """Grid topologies the generator can build."""
    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"

    @classmethod
    def parse(cls, name: Union[str, "MazeTopology"]) -> "MazeTopology":
        """
        Resolve a topology name to an enum member.

        Raises:
            ValueError: If the name is not a known topology
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown maze topology: {name!r}") from None
