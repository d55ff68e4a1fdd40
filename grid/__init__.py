"""
grid/
-----
Core data layer.  Public API:

    from grid import Cell, Grid, create_empty_grid, generate_maze
"""

from grid.cell import Cell, CellState
from grid.grid import Grid, create_empty_grid, DIRECTIONS
from grid.maze import generate_maze, validate_maze_dimensions, passage_cells

__all__ = [
    "Cell",
    "CellState",
    "Grid",
    "create_empty_grid",
    "DIRECTIONS",
    "generate_maze",
    "validate_maze_dimensions",
    "passage_cells",
]
