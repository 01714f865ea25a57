import logging

import pytest

from mazespinner.domain import circular_algorithms
from mazespinner.domain.analysis import is_perfect_maze
from mazespinner.domain.circular_grid import CircularGrid
from mazespinner.domain.types import MazeAlgorithm, passage_between
from mazespinner.utils.rng import SeededRNG

CARVING = [MazeAlgorithm.BACKTRACKER, MazeAlgorithm.KRUSKAL, MazeAlgorithm.PRIM]
CONFIGS = [(1, 6, False), (3, 12, False), (5, 12, False), (4, 10, True), (6, 20, False), (8, 36, True)]


@pytest.mark.parametrize("algorithm", CARVING)
@pytest.mark.parametrize("rings,sectors,center_open", CONFIGS)
@pytest.mark.parametrize("symmetric", [True, False])
def test_every_algorithm_carves_a_spanning_tree(algorithm, rings, sectors, center_open, symmetric):
    grid = CircularGrid(rings, sectors, center_open=center_open, symmetric_ring_walls=symmetric)

    circular_algorithms.generate_maze(grid, algorithm, SeededRNG(rings * 100 + sectors))

    assert len(grid.passages) == grid.cell_count - 1
    assert is_perfect_maze(grid)


@pytest.mark.parametrize("algorithm", CARVING)
def test_symmetric_mode_opens_both_sides_of_every_passage(algorithm, rng):
    grid = circular_algorithms.generate_maze(CircularGrid(5, 17), algorithm, rng)

    for passage in grid.passages:
        a, b = (grid.get_cell(*key) for key in passage)
        if a.ring == b.ring:
            assert (not a.cw and not b.ccw) or (not a.ccw and not b.cw)
        else:
            inner, outer = (a, b) if a.ring < b.ring else (b, a)
            assert not inner.outer
            assert not outer.inner


@pytest.mark.parametrize("algorithm", [MazeAlgorithm.BACKTRACKER, MazeAlgorithm.PRIM])
def test_visiting_algorithms_visit_every_cell(algorithm, rng):
    grid = circular_algorithms.generate_maze(CircularGrid(5, 12), algorithm, rng)
    assert all(cell.visited for cell in grid.cells())


def test_outermost_ring_keeps_outer_walls(rng):
    grid = circular_algorithms.generate_maze(CircularGrid(4, 16), MazeAlgorithm.KRUSKAL, rng)
    assert all(cell.outer for cell in grid.ring_cells[grid.last_ring])


def test_kruskal_edges_have_no_duplicates(circular_grid):
    edges = circular_algorithms.kruskal_edges(circular_grid)
    keys = [passage_between(e.cell_a.key, e.cell_b.key) for e in edges]

    assert len(set(keys)) == len(keys)

    same_ring = [e for e in edges if e.cell_a.ring == e.cell_b.ring]
    assert len(same_ring) == circular_grid.cell_count

    for ring in circular_grid.ring_indices:
        cells = circular_grid.ring_cells[ring]
        for cell in cells:
            successor = cells[(cell.sector + 1) % len(cells)]
            assert passage_between(cell.key, successor.key) in keys


def test_kruskal_edges_cover_every_outer_neighbor(circular_grid):
    keys = {passage_between(e.cell_a.key, e.cell_b.key) for e in circular_algorithms.kruskal_edges(circular_grid)}

    for cell in circular_grid.cells():
        for neighbor in circular_grid.get_neighbors(cell):
            if neighbor.direction == "outer":
                assert passage_between(cell.key, neighbor.cell.key) in keys

    # 6 + 8 outer edges from rings 0 and 1, plus 26 same-ring edges
    assert len(keys) == 6 + 8 + 26


def test_binary_tree_falls_back_to_backtracker(caplog):
    with caplog.at_level(logging.WARNING):
        fallback = circular_algorithms.generate_maze(CircularGrid(4, 12), MazeAlgorithm.BINARY_TREE, SeededRNG(3))
    backtracker = circular_algorithms.generate_maze(CircularGrid(4, 12), MazeAlgorithm.BACKTRACKER, SeededRNG(3))

    assert fallback.passages == backtracker.passages
    assert "binarytree" in caplog.text


def test_backtracker_trace_with_scripted_rng(scripted_rng):
    grid = circular_algorithms.generate_maze(CircularGrid(1, 6), MazeAlgorithm.BACKTRACKER, scripted_rng)

    # Single ring: always stepping clockwise walks the ring once
    assert grid.passages == {passage_between((0, s), (0, s + 1)) for s in range(5)}
    assert grid.get_cell(0, 5).cw
    assert grid.get_cell(0, 0).ccw
