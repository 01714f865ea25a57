"""Structural checks and texture metrics for generated mazes.

All functions read the passage record a grid keeps while carving, so they work
for both topologies.
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Set, Union

import numpy as np

from .circular_grid import CircularGrid
from .rect_grid import RectGrid
from .types import Coord

Grid = Union[RectGrid, CircularGrid]


@dataclass
class MazeStats:
    """Summary of a carved maze's passage graph."""
    cell_count: int
    passage_count: int
    dead_ends: int
    junctions: int
    mean_corridor_length: float
    is_perfect: bool

    @property
    def dead_end_ratio(self) -> float:
        """Share of cells with exactly one opening."""
        return self.dead_ends / self.cell_count if self.cell_count > 0 else 0.0


def passage_graph(grid: Grid) -> Dict[Coord, List[Coord]]:
    """Build an adjacency list over every cell from the carved passages."""
    graph: Dict[Coord, List[Coord]] = {cell.key: [] for cell in grid.cells()}
    for passage in grid.passages:
        a, b = tuple(passage)
        graph[a].append(b)
        graph[b].append(a)
    return graph


def reachable_from(grid: Grid, start: Coord) -> Set[Coord]:
    """Breadth-first search over open passages from ``start``."""
    graph = passage_graph(grid)
    queue = deque([start])
    reachable = {start}

    while queue:
        current = queue.popleft()
        for neighbor in graph[current]:
            if neighbor not in reachable:
                reachable.add(neighbor)
                queue.append(neighbor)

    return reachable


def is_perfect_maze(grid: Grid) -> bool:
    """
    Check that the passages form a spanning tree.

    A spanning tree over n cells has exactly n - 1 edges and reaches every
    cell; together these rule out cycles.
    """
    if len(grid.passages) != grid.cell_count - 1:
        return False
    first = next(grid.cells())
    return len(reachable_from(grid, first.key)) == grid.cell_count


def degree_histogram(grid: Grid) -> np.ndarray:
    """Count cells by number of openings; index i holds cells with i openings."""
    degrees = np.array([len(v) for v in passage_graph(grid).values()], dtype=np.int64)
    return np.bincount(degrees, minlength=5)


def dead_end_count(grid: Grid) -> int:
    return int(degree_histogram(grid)[1])


def mean_corridor_length(grid: Grid) -> float:
    """
    Average number of passages between consecutive dead ends or junctions.

    Corridors are maximal chains of cells with exactly two openings. Every
    corridor is walked from both ends, which leaves the mean unchanged.
    """
    graph = passage_graph(grid)
    total = 0
    corridors = 0

    for node, links in graph.items():
        if len(links) == 2:
            continue
        for first in links:
            length = 1
            previous, current = node, first
            while len(graph[current]) == 2:
                a, b = graph[current]
                previous, current = current, (b if a == previous else a)
                length += 1
            total += length
            corridors += 1

    return total / corridors if corridors else 0.0


def compute_stats(grid: Grid) -> MazeStats:
    histogram = degree_histogram(grid)
    return MazeStats(
        cell_count=grid.cell_count,
        passage_count=len(grid.passages),
        dead_ends=int(histogram[1]),
        junctions=int(histogram[3:].sum()),
        mean_corridor_length=mean_corridor_length(grid),
        is_perfect=is_perfect_maze(grid),
    )


def walls_are_symmetric(grid: RectGrid) -> bool:
    """Check every shared rectangular wall is either standing or open on both sides."""
    for cell in grid.cells():
        east = grid.get_cell(cell.x + 1, cell.y)
        if east is not None and cell.east != east.west:
            return False
        south = grid.get_cell(cell.x, cell.y + 1)
        if south is not None and cell.south != south.north:
            return False
    return True
