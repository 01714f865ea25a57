"""Rectangular grid: cell storage, adjacency and wall mutation."""

from typing import Iterator, List, Optional, Set

from .types import RECT_DELTAS, RECT_DIRECTIONS, OPPOSITE, Neighbor, Passage, RectCell, passage_between
from ..utils.rng import SeededRNG


class RectGrid:
    """
    A width x height grid of cells, every wall standing on creation.

    The grid owns its cells for its whole lifetime; algorithms only flip wall
    flags, the transient ``visited`` marker and the passage record.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.rows: List[List[RectCell]] = [
            [RectCell(x=x, y=y) for x in range(width)]
            for y in range(height)
        ]
        self.passages: Set[Passage] = set()

    def __len__(self) -> int:
        return self.width * self.height

    @property
    def cell_count(self) -> int:
        return len(self)

    def cells(self) -> Iterator[RectCell]:
        """Iterate over all cells in row-major order."""
        for row in self.rows:
            yield from row

    def get_cell(self, x: int, y: int) -> Optional[RectCell]:
        """Get cell at (x, y), returns None if out of bounds."""
        if y < 0 or y >= len(self.rows):
            return None
        if x < 0 or x >= len(self.rows[y]):
            return None
        return self.rows[y][x]

    def get_random_cell(self, rng: SeededRNG) -> RectCell:
        """Pick a row uniformly, then a cell uniformly within that row."""
        y = rng.randrange(len(self.rows))
        x = rng.randrange(len(self.rows[y]))
        return self.rows[y][x]

    def get_neighbors(self, cell: RectCell) -> List[Neighbor]:
        """
        Get all orthogonal neighbors of a cell, regardless of visitation.

        Returns:
            Neighbor records in north, east, south, west order
        """
        neighbors = []
        for direction in RECT_DIRECTIONS:
            dx, dy = RECT_DELTAS[direction]
            other = self.get_cell(cell.x + dx, cell.y + dy)
            if other is not None:
                neighbors.append(Neighbor(cell=other, direction=direction))
        return neighbors

    def get_unvisited_neighbors(self, cell: RectCell) -> List[RectCell]:
        """Get orthogonal neighbors whose visited flag is still clear."""
        return [n.cell for n in self.get_neighbors(cell) if not n.cell.visited]

    def remove_walls(self, cell_a: RectCell, cell_b: RectCell) -> None:
        """
        Remove the wall pair between two adjacent cells.

        Raises:
            ValueError: If the cells are not orthogonally adjacent
        """
        offset = (cell_b.x - cell_a.x, cell_b.y - cell_a.y)
        for direction, delta in RECT_DELTAS.items():
            if delta == offset:
                cell_a.set_wall(direction, False)
                cell_b.set_wall(OPPOSITE[direction], False)
                self.passages.add(passage_between(cell_a.key, cell_b.key))
                return

        raise ValueError(f"Cells {cell_a.key} and {cell_b.key} are not adjacent")

    def reset_visited(self) -> None:
        for cell in self.cells():
            cell.visited = False


def create_rect_grid(width: int, height: int) -> RectGrid:
    """
    Create a new rectangular grid with every wall standing.

    Args:
        width: Grid width (must be > 0)
        height: Grid height (must be > 0)

    Returns:
        New RectGrid instance

    Raises:
        ValueError: If width or height <= 0
    """
    return RectGrid(width, height)
