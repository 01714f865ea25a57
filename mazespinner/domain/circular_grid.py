"""Circular (polar) grid: rings of sectors, adjacency and wall mutation.

Rings nearer the center hold fewer sectors so cells keep a roughly even arc
length. Because neighboring rings rarely have an integer sector ratio, the
inner/outer neighbor mapping is an angular approximation: cell A may list B as
its outer neighbor while B lists some other cell as its inner neighbor.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set

from .types import Neighbor, Passage, PolarCell, PolarDirection, passage_between
from ..utils.rng import SeededRNG

MIN_SECTORS = 6
# Fraction of the canvas used as the outermost radius
RADIUS_FRACTION = 0.45


@dataclass
class PolarProjection:
    """Representative point and extent of a polar cell on a square canvas."""
    x: float
    y: float
    inner_radius: float
    outer_radius: float
    angle: float
    angle_size: float


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class CircularGrid:
    """
    Jagged polar grid of ``rings`` rings.

    Ring 0 is the center disc unless ``center_open`` is set, in which case the
    grid starts at ring 1 and the center is left empty.

    Args:
        rings: Total ring count, including the skipped center ring
        sectors_in_outer_ring: Sector count of the outermost ring
        center_open: Leave ring 0 out of the grid
        symmetric_ring_walls: Clear both facing flags when carving between rings.
            When False, the neighbor's flag is only cleared if it is the closest
            angular match for the current cell, which can leave one-sided openings.
    """

    def __init__(self, rings: int, sectors_in_outer_ring: int,
                 center_open: bool = False, symmetric_ring_walls: bool = True):
        if rings <= 0 or sectors_in_outer_ring <= 0:
            raise ValueError(
                f"Ring and sector counts must be positive, got {rings} rings x {sectors_in_outer_ring} sectors"
            )
        if center_open and rings < 2:
            raise ValueError("A grid with an open center needs at least 2 rings")

        self.rings = rings
        self.sectors_in_outer_ring = sectors_in_outer_ring
        self.center_open = center_open
        self.symmetric_ring_walls = symmetric_ring_walls
        self.first_ring = 1 if center_open else 0

        self.ring_cells: Dict[int, List[PolarCell]] = {}
        for ring in range(self.first_ring, rings):
            sectors = self.sector_count(ring)
            self.ring_cells[ring] = [
                PolarCell(ring=ring, sector=s, total_sectors=sectors)
                for s in range(sectors)
            ]
        self.passages: Set[Passage] = set()

    def sector_count(self, ring: int) -> int:
        """Number of sectors in a ring, scaled with the ring's radius."""
        return max(MIN_SECTORS, (ring + 1) * self.sectors_in_outer_ring // self.rings)

    @property
    def ring_indices(self) -> List[int]:
        return list(self.ring_cells)

    @property
    def last_ring(self) -> int:
        return self.rings - 1

    def __len__(self) -> int:
        return sum(len(cells) for cells in self.ring_cells.values())

    @property
    def cell_count(self) -> int:
        return len(self)

    def cells(self) -> Iterator[PolarCell]:
        """Iterate over all cells, ring by ring from the center outwards."""
        for cells in self.ring_cells.values():
            yield from cells

    def get_cell(self, ring: int, sector: int) -> Optional[PolarCell]:
        """Get a cell, wrapping the sector around its ring; None for a missing ring."""
        cells = self.ring_cells.get(ring)
        if not cells:
            return None
        return cells[sector % len(cells)]

    def get_random_cell(self, rng: SeededRNG) -> PolarCell:
        """Pick a ring uniformly, then a sector uniformly within that ring."""
        ring = self.first_ring + rng.randrange(len(self.ring_cells))
        cells = self.ring_cells[ring]
        return cells[rng.randrange(len(cells))]

    def cell_to_pixel(self, cell: PolarCell, canvas_size: float) -> PolarProjection:
        """
        Project a cell onto a square canvas.

        The point lies on the cell's start angle, halfway between its inner and
        outer radius.
        """
        center = canvas_size / 2
        max_radius = canvas_size * RADIUS_FRACTION

        angle_size = 2 * math.pi / cell.total_sectors
        angle = angle_size * cell.sector

        inner_radius = (cell.ring / self.rings) * max_radius
        outer_radius = ((cell.ring + 1) / self.rings) * max_radius
        radius = (inner_radius + outer_radius) / 2

        return PolarProjection(
            x=center + radius * math.cos(angle),
            y=center + radius * math.sin(angle),
            inner_radius=inner_radius,
            outer_radius=outer_radius,
            angle=angle,
            angle_size=angle_size,
        )

    def get_neighbors(self, cell: PolarCell) -> List[Neighbor]:
        """
        Compute up to four neighbors of a cell.

        Returns:
            Neighbor records in inner, outer, cw, ccw order
        """
        neighbors = []
        r, s, total = cell.ring, cell.sector, cell.total_sectors

        # Inner ring has fewer sectors, so several outer sectors share one
        if r > self.first_ring:
            inner_count = len(self.ring_cells[r - 1])
            inner_sector = s * inner_count // total
            neighbors.append(Neighbor(cell=self.ring_cells[r - 1][inner_sector], direction="inner"))

        # Middle of the outer-ring sectors overlapping this sector's span
        if r < self.last_ring:
            outer_count = len(self.ring_cells[r + 1])
            start_sector = s * outer_count // total
            end_sector = (s + 1) * outer_count // total - 1
            outer_sector = _round_half_up((start_sector + end_sector) / 2)
            if 0 <= outer_sector < outer_count:
                neighbors.append(Neighbor(cell=self.ring_cells[r + 1][outer_sector], direction="outer"))

        ring = self.ring_cells[r]
        neighbors.append(Neighbor(cell=ring[(s + 1) % total], direction="cw"))
        neighbors.append(Neighbor(cell=ring[(s - 1) % total], direction="ccw"))

        return neighbors

    def get_unvisited_neighbors(self, cell: PolarCell) -> List[Neighbor]:
        """Get neighbors whose visited flag is still clear, tagged with direction."""
        return [n for n in self.get_neighbors(cell) if not n.cell.visited]

    def remove_walls(self, current: PolarCell, neighbor: PolarCell, direction: PolarDirection) -> None:
        """Carve a passage from ``current`` towards ``neighbor`` in ``direction``."""
        if direction == "cw":
            current.cw = False
            neighbor.ccw = False
        elif direction == "ccw":
            current.ccw = False
            neighbor.cw = False
        elif direction == "inner":
            current.inner = False
            if self.symmetric_ring_walls or self._closest_sector(current, neighbor) == neighbor.sector:
                neighbor.outer = False
        elif direction == "outer":
            current.outer = False
            if self.symmetric_ring_walls or self._closest_sector(current, neighbor) == neighbor.sector:
                neighbor.inner = False
        else:
            raise ValueError(f"Unknown polar direction: {direction!r}")

        self.passages.add(passage_between(current.key, neighbor.key))

    @staticmethod
    def _closest_sector(current: PolarCell, neighbor: PolarCell) -> int:
        """Sector of the neighbor's ring whose start angle is nearest the current cell's."""
        current_angle = 2 * math.pi * current.sector / current.total_sectors
        best_sector = neighbor.sector
        best_diff = math.inf
        for s in range(neighbor.total_sectors):
            diff = abs(current_angle - 2 * math.pi * s / neighbor.total_sectors)
            if diff < best_diff:
                best_diff = diff
                best_sector = s
        return best_sector

    def reset_visited(self) -> None:
        for cell in self.cells():
            cell.visited = False


def create_circular_grid(rings: int, sectors_in_outer_ring: int, center_open: bool = False,
                         symmetric_ring_walls: bool = True) -> CircularGrid:
    """
    Create a new circular grid with every wall standing.

    Raises:
        ValueError: If rings or sectors_in_outer_ring <= 0
    """
    return CircularGrid(rings, sectors_in_outer_ring, center_open, symmetric_ring_walls)
