"""Coordinator composing grid construction, carving and layout building."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..domain import circular_algorithms, rect_algorithms
from ..domain.analysis import MazeStats, compute_stats
from ..domain.circular_grid import CircularGrid
from ..domain.rect_grid import RectGrid
from ..domain.types import MazeAlgorithm, MazeTopology
from ..utils.geometry import MazeLayout, WallSettings, build_circular_layout, build_rect_layout
from ..utils.rng import SeededRNG
from .config import MazeConfig

logger = logging.getLogger(__name__)

Grid = Union[RectGrid, CircularGrid]


@dataclass
class MazeResult:
    """A carved grid together with the settings that produced it."""
    grid: Grid
    config: MazeConfig
    algorithm: MazeAlgorithm  # algorithm that actually ran, after fallbacks
    stats: MazeStats

    @property
    def topology(self) -> MazeTopology:
        return self.config.maze_topology


def build_grid(config: MazeConfig) -> Grid:
    """Create a fully walled grid for the configured topology."""
    if config.maze_topology is MazeTopology.RECTANGULAR:
        return RectGrid(config.width, config.height)
    return CircularGrid(
        config.rings,
        config.sectors_in_outer_ring,
        center_open=config.center_open,
        symmetric_ring_walls=config.symmetric_ring_walls,
    )


def generate_maze(config: Optional[MazeConfig] = None, rng: Optional[SeededRNG] = None) -> MazeResult:
    """
    Build a grid and carve a perfect maze into it.

    Args:
        config: Generation settings (defaults if None)
        rng: Random source; if None a generator seeded with ``config.seed`` is used

    Returns:
        MazeResult holding the carved grid and its statistics
    """
    config = config or MazeConfig()
    if rng is None:
        rng = SeededRNG(config.seed)

    algorithm = config.maze_algorithm
    grid = build_grid(config)

    if isinstance(grid, RectGrid):
        rect_algorithms.generate_maze(grid, algorithm, rng)
    else:
        circular_algorithms.generate_maze(grid, algorithm, rng)
        if algorithm not in circular_algorithms.CIRCULAR_ALGORITHMS:
            algorithm = MazeAlgorithm.BACKTRACKER

    stats = compute_stats(grid)
    logger.info("Generated %s maze with %s: %d cells, %d dead ends",
                config.topology, algorithm.value, stats.cell_count, stats.dead_ends)
    return MazeResult(grid=grid, config=config, algorithm=algorithm, stats=stats)


class MazeCoordinator:
    """
    Owns the current maze and its configuration.

    Replaces module-level grid state: every generation produces a fresh grid
    held by this object, and collaborators ask it for layouts.
    """

    def __init__(self, config: Optional[MazeConfig] = None, rng: Optional[SeededRNG] = None):
        self._config = config or MazeConfig()
        self._rng = rng
        self._result: Optional[MazeResult] = None

    @property
    def config(self) -> MazeConfig:
        return self._config

    @property
    def result(self) -> Optional[MazeResult]:
        """Get the most recent generation result."""
        return self._result

    @property
    def grid(self) -> Optional[Grid]:
        """Get the current grid, or None before the first generation."""
        return self._result.grid if self._result else None

    def generate(self) -> MazeResult:
        """Generate a maze from the current configuration."""
        self._result = generate_maze(self._config, self._rng)
        return self._result

    def regenerate(self, **overrides) -> MazeResult:
        """
        Replace configuration fields and generate a new maze.

        Raises:
            ValueError: If the overrides produce an invalid configuration
        """
        self._config = self._config.with_overrides(**overrides)
        return self.generate()

    def build_layout(self, canvas_size: float, canvas_height: Optional[float] = None,
                     settings: Optional[WallSettings] = None) -> MazeLayout:
        """
        Turn the current maze into wall segments for a canvas.

        Generates a maze first if none exists yet. Circular mazes use a square
        canvas of ``canvas_size``; rectangular mazes use ``canvas_height`` when
        given.
        """
        if self._result is None:
            self.generate()

        settings = settings or self._config.wall_settings()
        grid = self._result.grid
        if isinstance(grid, RectGrid):
            height = canvas_height if canvas_height is not None else canvas_size
            return build_rect_layout(grid, canvas_size, height, settings)
        return build_circular_layout(grid, canvas_size, settings)
