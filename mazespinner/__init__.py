"""MazeSpinner - procedural maze generation on rectangular and circular grids.

This package carves perfect mazes with the recursive backtracker, Kruskal,
Prim and binary tree algorithms and exposes the resulting walls as segments
for physics and rendering layers.
"""

__version__ = "1.0.0"
__author__ = "MazeSpinner"
