"""Configuration for maze generation runs."""

from dataclasses import dataclass, replace
from typing import Optional

from ..domain.types import MazeAlgorithm, MazeTopology
from ..utils.geometry import WallSettings


@dataclass
class MazeConfig:
    """Configuration for a single maze generation run."""
    topology: str = "circular"

    # Circular grid
    rings: int = 5
    sectors_in_outer_ring: int = 12
    center_open: bool = False
    symmetric_ring_walls: bool = True  # False reproduces one-sided ring openings

    # Rectangular grid
    width: int = 10
    height: int = 10

    algorithm: str = "backtracker"
    seed: Optional[int] = None

    # Wall appearance handed to layout builders
    wall_thickness: float = 5.0
    wall_color: str = "#333"

    def __post_init__(self):
        """Validate topology and dimensions."""
        topology = MazeTopology.parse(self.topology)
        self.topology = topology.value

        if topology is MazeTopology.RECTANGULAR:
            if self.width <= 0 or self.height <= 0:
                raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        else:
            if self.rings <= 0 or self.sectors_in_outer_ring <= 0:
                raise ValueError(
                    f"Ring and sector counts must be positive, got {self.rings}x{self.sectors_in_outer_ring}"
                )
            if self.center_open and self.rings < 2:
                raise ValueError("A grid with an open center needs at least 2 rings")

        if self.wall_thickness <= 0:
            raise ValueError(f"Wall thickness must be positive, got {self.wall_thickness}")

    @property
    def maze_topology(self) -> MazeTopology:
        return MazeTopology(self.topology)

    @property
    def maze_algorithm(self) -> MazeAlgorithm:
        """Resolved algorithm; unknown names map to the backtracker."""
        return MazeAlgorithm.parse(self.algorithm)

    def wall_settings(self) -> WallSettings:
        return WallSettings(thickness=self.wall_thickness, color=self.wall_color,
                            boundary_color=self.wall_color)

    def with_overrides(self, **overrides) -> "MazeConfig":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **overrides)
