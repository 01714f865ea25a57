"""Wall segment descriptors for physics and rendering collaborators.

Turns the standing walls of a carved grid into oriented rectangles
(center, length, thickness, rotation). Nothing here depends on a physics
engine; consumers map each ``WallSegment`` onto their own static body.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..domain.circular_grid import RADIUS_FRACTION, CircularGrid
from ..domain.rect_grid import RectGrid

BALL_RADIUS_FACTOR = 0.3


@dataclass
class WallSettings:
    """Appearance and tessellation settings for generated walls."""
    thickness: float = 5.0
    color: str = "#333"
    boundary_color: str = "#333"
    arc_segments: int = 5
    boundary_segments: int = 72


@dataclass
class WallSegment:
    """A straight wall piece: center point, size along and across, rotation in radians."""
    x: float
    y: float
    width: float
    height: float
    angle: float = 0.0
    color: str = "#333"
    is_boundary: bool = False


@dataclass
class Marker:
    """A point of interest such as the ball spawn or the exit."""
    x: float
    y: float
    radius: float = 0.0
    angle: float = 0.0


@dataclass
class MazeLayout:
    """Everything a physics/rendering layer needs to build the maze scene."""
    walls: List[WallSegment] = field(default_factory=list)
    ball: Optional[Marker] = None
    exit: Optional[Marker] = None

    @property
    def boundary_walls(self) -> List[WallSegment]:
        return [w for w in self.walls if w.is_boundary]

    @property
    def interior_walls(self) -> List[WallSegment]:
        return [w for w in self.walls if not w.is_boundary]


def build_rect_layout(grid: RectGrid, canvas_width: float, canvas_height: float,
                      settings: Optional[WallSettings] = None) -> MazeLayout:
    """
    Lay out a rectangular maze on a canvas with one cell of margin on every side.

    Shared walls are emitted once: each cell contributes its north and west
    walls, the last column its east walls and the last row its south walls.

    Args:
        grid: Carved rectangular grid
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        settings: Wall settings (defaults if None)

    Returns:
        MazeLayout with boundary blocks, interior walls, ball spawn and exit
    """
    settings = settings or WallSettings()
    width, height = grid.width, grid.height
    cell_w = canvas_width / (width + 2)
    cell_h = canvas_height / (height + 2)
    offset_x, offset_y = cell_w, cell_h
    thickness = settings.thickness

    layout = MazeLayout()
    layout.walls.extend(_rect_boundary(width, height, cell_w, cell_h, settings))

    for cell in grid.cells():
        left = offset_x + cell.x * cell_w
        top = offset_y + cell.y * cell_h

        if cell.north:
            layout.walls.append(WallSegment(left + cell_w / 2, top, cell_w, thickness, color=settings.color))
        if cell.west:
            layout.walls.append(WallSegment(left, top + cell_h / 2, thickness, cell_h, color=settings.color))
        if cell.east and cell.x == width - 1:
            layout.walls.append(WallSegment(left + cell_w, top + cell_h / 2, thickness, cell_h,
                                            color=settings.color))
        if cell.south and cell.y == height - 1:
            layout.walls.append(WallSegment(left + cell_w / 2, top + cell_h, cell_w, thickness,
                                            color=settings.color))

    layout.exit = Marker(
        x=offset_x + (width - 0.5) * cell_w,
        y=offset_y + height * cell_h,
        angle=math.pi / 2,
    )
    layout.ball = Marker(
        x=offset_x + width * cell_w / 2,
        y=offset_y + height * cell_h / 2,
        radius=min(cell_w, cell_h) * BALL_RADIUS_FACTOR,
    )
    return layout


def _rect_boundary(width: int, height: int, cell_w: float, cell_h: float,
                   settings: WallSettings) -> List[WallSegment]:
    """Four margin-thick blocks framing the maze: top, left, right, bottom."""
    canvas_w = (width + 2) * cell_w
    canvas_h = (height + 2) * cell_h
    color = settings.boundary_color
    return [
        WallSegment(canvas_w / 2, cell_h / 2, canvas_w, cell_h, color=color, is_boundary=True),
        WallSegment(cell_w / 2, canvas_h / 2, cell_w, canvas_h, color=color, is_boundary=True),
        WallSegment(cell_w + width * cell_w + cell_w / 2, canvas_h / 2, cell_w, canvas_h,
                    color=color, is_boundary=True),
        WallSegment(canvas_w / 2, cell_h + height * cell_h + cell_h / 2, canvas_w, cell_h,
                    color=color, is_boundary=True),
    ]


def _arc_chords(center: float, radius: float, start_angle: float, span: float,
                segments: int, thickness: float, color: str,
                is_boundary: bool = False, min_length: float = 0.0) -> List[WallSegment]:
    """Approximate an arc with straight chords, dropping chords not longer than ``min_length``."""
    angles = start_angle + np.arange(segments + 1) * (span / segments)
    xs = center + radius * np.cos(angles)
    ys = center + radius * np.sin(angles)

    lengths = np.hypot(np.diff(xs), np.diff(ys))
    mid_x = (xs[:-1] + xs[1:]) / 2
    mid_y = (ys[:-1] + ys[1:]) / 2
    rotations = (angles[:-1] + angles[1:]) / 2 + math.pi / 2

    keep = np.flatnonzero(lengths > min_length)
    return [
        WallSegment(float(mid_x[i]), float(mid_y[i]), float(lengths[i]), thickness,
                    angle=float(rotations[i]), color=color, is_boundary=is_boundary)
        for i in keep
    ]


def _radial(center: float, inner_radius: float, outer_radius: float, angle: float,
            thickness: float, color: str) -> WallSegment:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    mid = (inner_radius + outer_radius) / 2
    return WallSegment(center + mid * cos_a, center + mid * sin_a,
                       outer_radius - inner_radius, thickness, angle=angle, color=color)


def build_circular_layout(grid: CircularGrid, canvas_size: float,
                          settings: Optional[WallSettings] = None) -> MazeLayout:
    """
    Lay out a circular maze on a square canvas.

    Inner and outer walls are tessellated into ``settings.arc_segments`` chords
    (chords shorter than half the wall thickness are dropped), cw/ccw walls
    become radial pieces, and the outermost ring is closed by a boundary
    circle of ``settings.boundary_segments`` chords.
    """
    settings = settings or WallSettings()
    center = canvas_size / 2
    max_radius = canvas_size * RADIUS_FRACTION
    thickness = settings.thickness
    min_chord = thickness / 2

    layout = MazeLayout()

    for cell in grid.cells():
        angle_size = 2 * math.pi / cell.total_sectors
        start_angle = angle_size * cell.sector
        inner_radius = (cell.ring / grid.rings) * max_radius
        outer_radius = ((cell.ring + 1) / grid.rings) * max_radius

        if cell.inner:
            layout.walls.extend(_arc_chords(center, inner_radius, start_angle, angle_size,
                                            settings.arc_segments, thickness, settings.color,
                                            min_length=min_chord))
        if cell.outer:
            layout.walls.extend(_arc_chords(center, outer_radius, start_angle, angle_size,
                                            settings.arc_segments, thickness, settings.color,
                                            min_length=min_chord))
        if cell.cw:
            layout.walls.append(_radial(center, inner_radius, outer_radius, start_angle + angle_size,
                                        thickness, settings.color))
        if cell.ccw:
            layout.walls.append(_radial(center, inner_radius, outer_radius, start_angle,
                                        thickness, settings.color))

    boundary_radius = ((grid.last_ring + 1) / grid.rings) * max_radius
    layout.walls.extend(_arc_chords(center, boundary_radius, 0.0, 2 * math.pi,
                                    settings.boundary_segments, thickness, settings.boundary_color,
                                    is_boundary=True))
    return layout
