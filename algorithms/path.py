"""
path.py — Path Reconstruction
==============================
Walks a parent map backwards from the goal.
"""

from typing import Dict, List

from grid import Cell


def reconstruct_path(parent: Dict[Cell, Cell], start: Cell, end: Cell) -> List[Cell]:
    """
    Follow parent pointers from `end` back to `start`.

    Returns the cells start → end inclusive.  If the chain breaks before
    reaching `start` the walk stops there and `start` is still prepended,
    so a malformed map yields a truncated path instead of an error.
    """
    path: List[Cell] = []
    cur = end
    while cur != start:
        path.append(cur)
        # a cycle in the map can never reach start
        if len(path) > len(parent):
            break
        prev = parent.get(cur)
        if prev is None:
            break
        cur = prev
    path.append(start)
    path.reverse()
    return path


def is_valid_path(path: List[Cell], grid) -> bool:
    """True if every cell is open and consecutive cells are cardinal neighbours."""
    if not path:
        return False
    if not all(grid.is_open(c) for c in path):
        return False
    return all(a.manhattan(b) == 1 for a, b in zip(path, path[1:]))
