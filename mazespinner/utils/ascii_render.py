"""Plain-text views of generated mazes for the command line."""

from typing import List

from ..domain.circular_grid import CircularGrid
from ..domain.rect_grid import RectGrid


def render_rect(grid: RectGrid) -> str:
    """
    Draw a rectangular maze with ``+``, ``---`` and ``|`` characters.

    Each cell is three characters wide; rows alternate between wall lines
    and cell lines.
    """
    lines: List[str] = []

    top = "+"
    for cell in grid.rows[0]:
        top += ("---" if cell.north else "   ") + "+"
    lines.append(top)

    for row in grid.rows:
        body = "|" if row[0].west else " "
        bottom = "+"
        for cell in row:
            body += "   " + ("|" if cell.east else " ")
            bottom += ("---" if cell.south else "   ") + "+"
        lines.append(body)
        lines.append(bottom)

    return "\n".join(lines)


def render_ring_summary(grid: CircularGrid) -> str:
    """One line per ring: sector count and how many walls of each kind are open."""
    lines = []
    for ring in grid.ring_indices:
        cells = grid.ring_cells[ring]
        open_inner = sum(1 for c in cells if not c.inner)
        open_outer = sum(1 for c in cells if not c.outer)
        open_side = sum(1 for c in cells if not c.cw)
        lines.append(
            f"ring {ring}: {len(cells)} sectors, "
            f"{open_inner} open inner, {open_outer} open outer, {open_side} open side"
        )
    return "\n".join(lines)
