"""
grid.py — Occupancy Grid
=========================
Single source of truth for the maze.  The recorders and the Flask app
both talk to this object.

Responsibilities:
  1. Shape & default value               (create_empty)
  2. Wall queries / edits                (is_wall, set_wall, toggle_wall)
  3. Adjacency                           (neighbours — the implicit grid graph)
  4. Serialisation round-trip            (to_dict / from_dict, text)

Design decisions:
  - Walls are a list of row lists of bools, True = wall.
  - Shape is fixed for the grid's lifetime.  Edits replace cell values,
    never rows.
  - neighbours() iterates in a FIXED order (up, down, left, right) so the
    step sequence recorded for a given grid is reproducible.
"""

from typing import List, Iterator, Iterable, Tuple, Dict, Any

from grid.cell import Cell


# up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

WALL_CHAR = "#"
OPEN_CHAR = "."


class Grid:
    """
    Attributes:
        rows   : number of rows
        cols   : number of columns
        _walls : [row][col] → True if the cell is a wall
    """

    __slots__ = ("rows", "cols", "_walls")

    def __init__(self, rows: int, cols: int, fill: bool = False):
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
        self.rows: int = rows
        self.cols: int = cols
        self._walls: List[List[bool]] = [[fill] * cols for _ in range(rows)]

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    @classmethod
    def create_empty(cls, rows: int, cols: int) -> "Grid":
        """rows × cols grid, every cell open."""
        return cls(rows, cols, fill=False)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[bool]]) -> "Grid":
        """Build from a boolean matrix (True = wall).  Rows must be equal length."""
        matrix = [[bool(v) for v in row] for row in rows]
        width = len(matrix[0]) if matrix else 0
        for r, row in enumerate(matrix):
            if len(row) != width:
                raise ValueError(
                    f"Ragged grid: row {r} has {len(row)} cells, expected {width}"
                )
        g = cls(len(matrix), width)
        g._walls = matrix
        return g

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Parse a text picture of the grid, one row per line:

            .....
            .#.#.
            .....

        '#' is a wall, '.' is open.  Blank lines are ignored.
        """
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        matrix = []
        for line in lines:
            row = []
            for ch in line:
                if ch == WALL_CHAR:
                    row.append(True)
                elif ch == OPEN_CHAR:
                    row.append(False)
                else:
                    raise ValueError(f"Unexpected character {ch!r} in grid text")
            matrix.append(row)
        return cls.from_rows(matrix)

    def copy(self) -> "Grid":
        return Grid.from_rows(self._walls)

    # ==================================================================
    # QUERIES
    # ==================================================================
    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def is_wall(self, cell: Cell) -> bool:
        return self._walls[cell.row][cell.col]

    def is_open(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and not self._walls[cell.row][cell.col]

    def neighbours(self, cell: Cell) -> List[Cell]:
        """Open, in-bounds cardinal neighbours of `cell` in up/down/left/right order."""
        result = []
        for dr, dc in DIRECTIONS:
            r, c = cell.row + dr, cell.col + dc
            if 0 <= r < self.rows and 0 <= c < self.cols and not self._walls[r][c]:
                result.append(Cell(r, c))
        return result

    def cells(self) -> Iterator[Cell]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield Cell(r, c)

    def open_cells(self) -> List[Cell]:
        return [cell for cell in self.cells() if not self._walls[cell.row][cell.col]]

    def wall_count(self) -> int:
        return sum(row.count(True) for row in self._walls)

    # ==================================================================
    # EDITS
    # ==================================================================
    def set_wall(self, cell: Cell, wall: bool = True) -> None:
        self._check(cell)
        self._walls[cell.row][cell.col] = wall

    def toggle_wall(self, cell: Cell) -> bool:
        """Flip a cell and return its new value."""
        self._check(cell)
        self._walls[cell.row][cell.col] = not self._walls[cell.row][cell.col]
        return self._walls[cell.row][cell.col]

    def _check(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise ValueError(f"{cell!r} is outside the {self.rows}x{self.cols} grid")

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_rows(self) -> List[List[bool]]:
        return [list(row) for row in self._walls]

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": self.rows, "cols": self.cols, "walls": self.to_rows()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grid":
        g = cls.from_rows(data.get("walls", []))
        # a 0-row grid loses its width in the matrix form
        if g.rows == 0:
            return cls(int(data.get("rows", 0)), int(data.get("cols", 0)))
        if (g.rows, g.cols) != (data.get("rows", g.rows), data.get("cols", g.cols)):
            raise ValueError("Grid dimensions do not match the wall matrix")
        return g

    def to_text(self) -> str:
        return "\n".join(
            "".join(WALL_CHAR if v else OPEN_CHAR for v in row) for row in self._walls
        )

    # ==================================================================
    # DUNDERS
    # ==================================================================
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.cols, self._walls) == (other.rows, other.cols, other._walls)

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={self.wall_count()})"


def create_empty_grid(rows: int, cols: int) -> Grid:
    return Grid.create_empty(rows, cols)
