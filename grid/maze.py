"""
maze.py — Perfect-Maze Generator
=================================
Randomised recursive backtracking (a "growing tree" that always grows
from the newest cell), run iteratively with an explicit stack.

The grid is read as a lattice:
  - cells at odd (row, col) are PASSAGE cells,
  - the cell halfway between two passage cells is the WALL knocked down
    to join them,
  - row 0, col 0, the last row and the last col stay wall (sealed border).

Every passage cell is visited exactly once and joined to the tree by
exactly one knocked-down wall, so the open cells form a spanning tree:
exactly one simple path between any two open cells.

Dimensions must be odd and >= 3.  Anything else is rejected with
ValueError rather than producing an unsealed border.
"""

import random
from typing import List, Optional, Set, Tuple

from grid.cell import Cell
from grid.grid import Grid


# two steps up, down, left, right
_LATTICE_STEPS: Tuple[Tuple[int, int], ...] = ((-2, 0), (2, 0), (0, -2), (0, 2))


def validate_maze_dimensions(rows: int, cols: int) -> None:
    for name, value in (("rows", rows), ("cols", cols)):
        if value < 3:
            raise ValueError(f"Maze {name} must be at least 3, got {value}")
        if value % 2 == 0:
            raise ValueError(f"Maze {name} must be odd, got {value}")


def generate_maze(
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Carve a perfect maze into a rows × cols grid.

    Args:
        rows, cols : odd, >= 3.
        seed       : convenience seed for a private Random (ignored if rng is given).
        rng        : random source; pass a seeded random.Random for reproducible mazes.

    Returns:
        A fresh Grid.  Carving starts at (1, 1).
    """
    validate_maze_dimensions(rows, cols)
    if rng is None:
        rng = random.Random(seed)

    grid = Grid(rows, cols, fill=True)

    origin = Cell(1, 1)
    grid.set_wall(origin, False)
    visited: Set[Cell] = {origin}
    stack: List[Cell] = [origin]

    while stack:
        cell = stack[-1]

        candidates = []
        for dr, dc in _LATTICE_STEPS:
            nxt = cell.offset(dr, dc)
            if (
                1 <= nxt.row < rows - 1
                and 1 <= nxt.col < cols - 1
                and nxt not in visited
            ):
                candidates.append((nxt, cell.offset(dr // 2, dc // 2)))

        if candidates:
            nxt, between = rng.choice(candidates)
            grid.set_wall(between, False)
            grid.set_wall(nxt, False)
            visited.add(nxt)
            stack.append(nxt)
        else:
            stack.pop()   # backtrack

    return grid


def passage_cells(rows: int, cols: int) -> List[Cell]:
    """Every odd/odd lattice cell strictly inside the border."""
    return [Cell(r, c) for r in range(1, rows - 1, 2) for c in range(1, cols - 1, 2)]
