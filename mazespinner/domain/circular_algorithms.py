"""Maze carving algorithms for circular grids."""

import logging
from typing import Callable, Dict, List, Optional, Union

from .circular_grid import CircularGrid
from .disjoint_set import DisjointSet
from .types import MazeAlgorithm, PolarCell, WallEdge
from ..utils.rng import SeededRNG, resolve_rng

logger = logging.getLogger(__name__)


def generate_maze(grid: CircularGrid, algorithm: Union[MazeAlgorithm, str, None] = MazeAlgorithm.BACKTRACKER,
                  rng: Optional[SeededRNG] = None) -> CircularGrid:
    """
    Carve a perfect maze into a fully walled circular grid.

    Binary tree has no polar variant; requesting it falls back to the
    recursive backtracker like any unknown name.

    Args:
        grid: Grid to carve; its walls are mutated in place
        algorithm: Algorithm member or name
        rng: Random source (a fresh unseeded one if None)

    Returns:
        The same grid, for chaining
    """
    rng = resolve_rng(rng)
    algorithm = MazeAlgorithm.parse(algorithm)

    if algorithm not in CIRCULAR_ALGORITHMS:
        logger.warning("%s is not available for circular grids, using %s",
                       algorithm.value, MazeAlgorithm.BACKTRACKER.value)
        algorithm = MazeAlgorithm.BACKTRACKER

    grid.reset_visited()
    CIRCULAR_ALGORITHMS[algorithm](grid, rng)

    logger.debug("Carved %d-ring circular maze with %s (%d cells, %d passages)",
                 grid.rings, algorithm.value, grid.cell_count, len(grid.passages))
    return grid


def recursive_backtracker(grid: CircularGrid, rng: SeededRNG) -> None:
    """Depth-first carving from a uniformly chosen cell."""
    start_cell = rng.choice(list(grid.cells()))
    start_cell.visited = True
    stack = [start_cell]

    while stack:
        current = stack[-1]
        neighbors = grid.get_unvisited_neighbors(current)

        if neighbors:
            chosen = rng.choice(neighbors)
            grid.remove_walls(current, chosen.cell, chosen.direction)
            chosen.cell.visited = True
            stack.append(chosen.cell)
        else:
            stack.pop()


def kruskal_edges(grid: CircularGrid) -> List[WallEdge]:
    """
    List candidate walls, each adjacency once.

    An edge is kept only from the cell with the lower (ring, sector) index,
    so cw/ccw pairs and inner/outer pairs are not added twice.
    """
    edges = []
    for cell in grid.cells():
        for neighbor in grid.get_neighbors(cell):
            other = neighbor.cell
            if cell.ring < other.ring or (cell.ring == other.ring and cell.sector < other.sector):
                edges.append(WallEdge(cell, other, neighbor.direction))
    return edges


def kruskal(grid: CircularGrid, rng: SeededRNG) -> None:
    """Randomized Kruskal over the deduplicated polar wall list."""
    edges = kruskal_edges(grid)
    rng.shuffle(edges)

    components = DisjointSet(cell.key for cell in grid.cells())
    for edge in edges:
        if components.union(edge.cell_a.key, edge.cell_b.key):
            grid.remove_walls(edge.cell_a, edge.cell_b, edge.direction)


def prim(grid: CircularGrid, rng: SeededRNG) -> None:
    """Randomized Prim from a uniformly chosen cell."""
    start_cell = rng.choice(list(grid.cells()))
    start_cell.visited = True

    frontier: List[WallEdge] = [
        WallEdge(start_cell, neighbor.cell, neighbor.direction)
        for neighbor in grid.get_neighbors(start_cell)
    ]

    while frontier:
        wall = frontier.pop(rng.randrange(len(frontier)))
        candidate: PolarCell = wall.cell_b

        if not candidate.visited:
            grid.remove_walls(wall.cell_a, candidate, wall.direction)
            candidate.visited = True

            for neighbor in grid.get_neighbors(candidate):
                if not neighbor.cell.visited:
                    frontier.append(WallEdge(candidate, neighbor.cell, neighbor.direction))


CIRCULAR_ALGORITHMS: Dict[MazeAlgorithm, Callable[[CircularGrid, SeededRNG], None]] = {
    MazeAlgorithm.BACKTRACKER: recursive_backtracker,
    MazeAlgorithm.KRUSKAL: kruskal,
    MazeAlgorithm.PRIM: prim,
}
