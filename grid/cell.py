"""
cell.py — Grid Coordinate
==========================
A Cell is a (row, col) pair, 0-indexed, row-major.

Cells are frozen and hashable so they can be used directly as set
members and dict keys by the search recorders.  No "row,col" string
keys anywhere.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


# ---------------------------------------------------------------------------
# Cell State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class CellState(Enum):
    OPEN      = "open"        # default
    WALL      = "wall"        # slate — impassable
    VISITED   = "visited"     # blue — marked visited
    FRONTIER  = "frontier"    # light blue — waiting in the queue / stack
    PATH      = "path"        # amber — on the discovered path
    CURRENT   = "current"     # yellow — processed in this step
    START     = "start"       # green
    END       = "end"         # red


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
@dataclass(frozen=True, order=True)
class Cell:
    row: int
    col: int

    def offset(self, dr: int, dc: int) -> "Cell":
        return Cell(self.row + dr, self.col + dc)

    def manhattan(self, other: "Cell") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def to_dict(self) -> Dict[str, int]:
        return {"row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cell":
        return cls(row=int(data["row"]), col=int(data["col"]))

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
