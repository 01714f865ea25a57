"""Maze carving algorithms for rectangular grids."""

import logging
from typing import Callable, Dict, List, Optional, Tuple, Union

from .disjoint_set import DisjointSet
from .rect_grid import RectGrid
from .types import MazeAlgorithm, RectCell, RectDirection, WallEdge
from ..utils.rng import SeededRNG, resolve_rng

logger = logging.getLogger(__name__)


def generate_maze(grid: RectGrid, algorithm: Union[MazeAlgorithm, str, None] = MazeAlgorithm.BACKTRACKER,
                  rng: Optional[SeededRNG] = None) -> RectGrid:
    """
    Carve a perfect maze into a fully walled rectangular grid.

    Args:
        grid: Grid to carve; its walls are mutated in place
        algorithm: Algorithm member or name; unknown names use the backtracker
        rng: Random source (a fresh unseeded one if None)

    Returns:
        The same grid, for chaining
    """
    rng = resolve_rng(rng)
    algorithm = MazeAlgorithm.parse(algorithm)

    grid.reset_visited()

    carve = RECT_ALGORITHMS.get(algorithm, recursive_backtracker)
    carve(grid, rng)

    logger.debug("Carved %dx%d rectangular maze with %s (%d passages)",
                 grid.width, grid.height, algorithm.value, len(grid.passages))
    return grid


def recursive_backtracker(grid: RectGrid, rng: SeededRNG) -> None:
    """
    Depth-first carving with an explicit stack.

    Produces long winding corridors with few branches.
    """
    # Start column is drawn before the start row
    start_x = rng.randrange(grid.width)
    start_y = rng.randrange(grid.height)
    start_cell = grid.rows[start_y][start_x]

    start_cell.visited = True
    stack = [start_cell]

    while stack:
        current = stack[-1]
        neighbors = grid.get_unvisited_neighbors(current)

        if neighbors:
            next_cell = rng.choice(neighbors)
            grid.remove_walls(current, next_cell)
            next_cell.visited = True
            stack.append(next_cell)
        else:
            # Backtrack
            stack.pop()


def kruskal_edges(grid: RectGrid) -> List[WallEdge]:
    """
    List every interior wall exactly once.

    Each cell contributes its east and south walls when a neighbor exists there.
    """
    edges = []
    for cell in grid.cells():
        if cell.x < grid.width - 1:
            edges.append(WallEdge(cell, grid.rows[cell.y][cell.x + 1], "east"))
        if cell.y < grid.height - 1:
            edges.append(WallEdge(cell, grid.rows[cell.y + 1][cell.x], "south"))
    return edges


def kruskal(grid: RectGrid, rng: SeededRNG) -> None:
    """
    Randomized Kruskal: knock down shuffled walls that join separate components.

    Produces evenly distributed branching.
    """
    edges = kruskal_edges(grid)
    rng.shuffle(edges)

    components = DisjointSet(cell.key for cell in grid.cells())
    for edge in edges:
        if components.union(edge.cell_a.key, edge.cell_b.key):
            grid.remove_walls(edge.cell_a, edge.cell_b)


def prim(grid: RectGrid, rng: SeededRNG) -> None:
    """
    Randomized Prim: grow the maze from a random frontier wall each step.

    Produces short, evenly sized branches.
    """
    start_x = rng.randrange(grid.width)
    start_y = rng.randrange(grid.height)
    start_cell = grid.rows[start_y][start_x]
    start_cell.visited = True

    frontier: List[Tuple[RectCell, RectCell, RectDirection]] = []
    _add_frontier(grid, start_cell, frontier)

    while frontier:
        index = rng.randrange(len(frontier))
        visited_cell, candidate, _direction = frontier.pop(index)

        if not candidate.visited:
            grid.remove_walls(visited_cell, candidate)
            candidate.visited = True
            _add_frontier(grid, candidate, frontier)


def _add_frontier(grid: RectGrid, cell: RectCell,
                  frontier: List[Tuple[RectCell, RectCell, RectDirection]]) -> None:
    for neighbor in grid.get_neighbors(cell):
        if not neighbor.cell.visited:
            frontier.append((cell, neighbor.cell, neighbor.direction))


def binary_tree(grid: RectGrid, rng: SeededRNG) -> None:
    """
    Binary tree: each cell opens either its north or its west wall.

    Single row-major pass without visit tracking. The first row becomes one
    long corridor and the first column another, biasing the maze toward the
    top-left corner.
    """
    for cell in grid.cells():
        options: List[RectDirection] = []
        if cell.y > 0:
            options.append("north")
        if cell.x > 0:
            options.append("west")

        if not options:
            continue

        direction = rng.choice(options)
        if direction == "north":
            grid.remove_walls(cell, grid.rows[cell.y - 1][cell.x])
        else:
            grid.remove_walls(cell, grid.rows[cell.y][cell.x - 1])


RECT_ALGORITHMS: Dict[MazeAlgorithm, Callable[[RectGrid, SeededRNG], None]] = {
    MazeAlgorithm.BACKTRACKER: recursive_backtracker,
    MazeAlgorithm.KRUSKAL: kruskal,
    MazeAlgorithm.PRIM: prim,
    MazeAlgorithm.BINARY_TREE: binary_tree,
}
