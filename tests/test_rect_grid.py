from collections import Counter

import pytest

from mazespinner.domain.rect_grid import RectGrid, create_rect_grid
from mazespinner.domain.types import passage_between
from mazespinner.utils.rng import SeededRNG


def test_create_builds_fully_walled_grid():
    grid = create_rect_grid(5, 3)

    assert grid.width == 5
    assert grid.height == 3
    assert grid.cell_count == 15
    assert len(list(grid.cells())) == 15
    for cell in grid.cells():
        assert cell.north and cell.east and cell.south and cell.west
        assert not cell.visited
    assert grid.passages == set()


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 3)])
def test_create_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        RectGrid(width, height)


def test_get_cell_returns_none_out_of_bounds(rect_grid):
    assert rect_grid.get_cell(0, 0).key == (0, 0)
    assert rect_grid.get_cell(3, 3).key == (3, 3)
    assert rect_grid.get_cell(4, 0) is None
    assert rect_grid.get_cell(0, 4) is None
    assert rect_grid.get_cell(-1, 0) is None
    assert rect_grid.get_cell(0, -1) is None


def test_get_neighbors_corner_and_interior(rect_grid):
    corner = rect_grid.get_neighbors(rect_grid.get_cell(0, 0))
    assert [(n.cell.key, n.direction) for n in corner] == [((1, 0), "east"), ((0, 1), "south")]

    interior = rect_grid.get_neighbors(rect_grid.get_cell(1, 1))
    assert [(n.cell.key, n.direction) for n in interior] == [
        ((1, 0), "north"),
        ((2, 1), "east"),
        ((1, 2), "south"),
        ((0, 1), "west"),
    ]


def test_get_unvisited_neighbors_skips_visited(rect_grid):
    rect_grid.get_cell(1, 0).visited = True
    rect_grid.get_cell(0, 1).visited = True

    unvisited = rect_grid.get_unvisited_neighbors(rect_grid.get_cell(1, 1))

    assert [c.key for c in unvisited] == [(2, 1), (1, 2)]


@pytest.mark.parametrize("a,b,side_a,side_b", [
    ((1, 1), (2, 1), "east", "west"),
    ((1, 1), (0, 1), "west", "east"),
    ((1, 1), (1, 2), "south", "north"),
    ((1, 1), (1, 0), "north", "south"),
])
def test_remove_walls_clears_matching_pair(rect_grid, a, b, side_a, side_b):
    cell_a = rect_grid.get_cell(*a)
    cell_b = rect_grid.get_cell(*b)

    rect_grid.remove_walls(cell_a, cell_b)

    assert not cell_a.has_wall(side_a)
    assert not cell_b.has_wall(side_b)
    assert cell_a.wall_count() == 3
    assert cell_b.wall_count() == 3
    assert rect_grid.passages == {passage_between(a, b)}


def test_remove_walls_rejects_non_adjacent(rect_grid):
    with pytest.raises(ValueError):
        rect_grid.remove_walls(rect_grid.get_cell(0, 0), rect_grid.get_cell(1, 1))
    with pytest.raises(ValueError):
        rect_grid.remove_walls(rect_grid.get_cell(0, 0), rect_grid.get_cell(2, 0))


def test_reset_visited(rect_grid):
    for cell in rect_grid.cells():
        cell.visited = True

    rect_grid.reset_visited()

    assert not any(cell.visited for cell in rect_grid.cells())


def test_get_random_cell_covers_grid_uniformly(rect_grid):
    rng = SeededRNG(7)
    draws = 16000

    counts = Counter(rect_grid.get_random_cell(rng).key for _ in range(draws))

    assert len(counts) == 16
    expected = draws / 16
    for count in counts.values():
        assert 0.8 * expected < count < 1.2 * expected
