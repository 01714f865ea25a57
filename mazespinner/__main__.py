"""Command line entry point for generating and inspecting mazes."""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from .app.config import MazeConfig
from .app.generator import MazeResult, generate_maze
from .domain.rect_grid import RectGrid
from .domain.types import MazeAlgorithm, MazeTopology
from .utils.ascii_render import render_rect, render_ring_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazespinner", description="Generate perfect mazes")
    parser.add_argument("--topology", choices=[t.value for t in MazeTopology], default="rectangular",
                        help="Grid topology")
    parser.add_argument("--algorithm", type=str, default="backtracker",
                        help="backtracker, kruskal, prim or binarytree (rectangular only)")
    parser.add_argument("--width", type=int, default=10, help="Rectangular grid width")
    parser.add_argument("--height", type=int, default=10, help="Rectangular grid height")
    parser.add_argument("--rings", type=int, default=5, help="Circular ring count")
    parser.add_argument("--sectors", type=int, default=12, help="Sectors in the outermost ring")
    parser.add_argument("--center-open", action="store_true", help="Leave the center ring out")
    parser.add_argument("--legacy-ring-walls", action="store_true",
                        help="Only clear the best-matching wall when carving between rings")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible mazes")
    parser.add_argument("--compare", type=int, metavar="RUNS",
                        help="Compare dead-end statistics of every algorithm over RUNS seeds")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def config_from_args(args: argparse.Namespace) -> MazeConfig:
    return MazeConfig(
        topology=args.topology,
        algorithm=args.algorithm,
        width=args.width,
        height=args.height,
        rings=args.rings,
        sectors_in_outer_ring=args.sectors,
        center_open=args.center_open,
        symmetric_ring_walls=not args.legacy_ring_walls,
        seed=args.seed,
    )


def print_result(result: MazeResult) -> None:
    stats = result.stats
    grid = result.grid
    if isinstance(grid, RectGrid):
        print(f"Maze {grid.width}x{grid.height} ({result.algorithm.value}):")
        print(render_rect(grid))
    else:
        print(f"Circular maze, {grid.rings} rings ({result.algorithm.value}):")
        print(render_ring_summary(grid))
    print()
    print(f"Cells: {stats.cell_count}  Passages: {stats.passage_count}  Perfect: {stats.is_perfect}")
    print(f"Dead ends: {stats.dead_ends} ({stats.dead_end_ratio:.1%})  "
          f"Junctions: {stats.junctions}  Mean corridor: {stats.mean_corridor_length:.2f}")


def compare_algorithms(config: MazeConfig, runs: int) -> List[str]:
    """Generate ``runs`` mazes per algorithm and summarize their texture."""
    lines = []
    base_seed = config.seed or 0
    for algorithm in MazeAlgorithm:
        if algorithm is MazeAlgorithm.BINARY_TREE and config.maze_topology is MazeTopology.CIRCULAR:
            continue
        ratios = []
        corridors = []
        for run in range(runs):
            run_config = config.with_overrides(algorithm=algorithm.value, seed=base_seed + run)
            stats = generate_maze(run_config).stats
            ratios.append(stats.dead_end_ratio)
            corridors.append(stats.mean_corridor_length)
        lines.append(f"{algorithm.value:<12} dead ends {np.mean(ratios):6.1%}  "
                     f"mean corridor {np.mean(corridors):5.2f}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.compare:
        for line in compare_algorithms(config, args.compare):
            print(line)
        return 0

    print_result(generate_maze(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
