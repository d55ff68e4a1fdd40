"""
step.py — Traversal Step Snapshot
==================================
Every recorder is a generator that yields TraversalStep objects.
A step is a frozen-in-time picture of one search iteration:

    • current   – the cell just dequeued (BFS) / popped (DFS)
    • frontier  – queue / stack contents right after that iteration
    • visited   – every cell marked visited so far
    • path      – start → goal, only on the step that reaches the goal

plus what the learning-mode panels need (pseudocode line, explanation).

Design decisions:
  - TraversalStep is a frozen dataclass.  The recorder is the only
    writer; the stepper and the Flask app are pure readers.
  - All steps of one run share a single append-only VisitLog.  A step
    keeps only the log length at its instant, so `visited` at step i is
    a prefix of the log and can never be affected by later steps.
    That keeps a run at O(steps + cells) memory instead of copying the
    visited set into every step.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from grid import Cell, CellState


class VisitLog:
    """Append-only record of cells in the order they were marked visited."""

    __slots__ = ("_order", "_seen")

    def __init__(self):
        self._order: List[Cell] = []
        self._seen: set = set()

    def add(self, cell: Cell) -> None:
        if cell not in self._seen:
            self._seen.add(cell)
            self._order.append(cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self._seen

    def __len__(self) -> int:
        return len(self._order)

    def prefix(self, n: int) -> Tuple[Cell, ...]:
        return tuple(self._order[:n])


@dataclass(frozen=True)
class TraversalStep:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        current         : Cell processed in this step.
        frontier        : Pending cells (queue front first for BFS, stack bottom first for DFS).
        path            : Start → goal inclusive on the goal step, else None.
        visited_count   : Length of the shared visit log at this step.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        explanation     : Human-readable "why" text for learning mode.
        is_final        : True on the last step of the run.
    """

    step_number:     int
    current:         Cell
    frontier:        Tuple[Cell, ...]     = ()
    path:            Optional[Tuple[Cell, ...]] = None
    visited_count:   int                  = 0
    pseudocode_line: int                  = 0
    explanation:     str                  = ""
    is_final:        bool                 = False
    log:             VisitLog             = field(default_factory=VisitLog, repr=False, compare=False)

    @property
    def visit_order(self) -> Tuple[Cell, ...]:
        return self.log.prefix(self.visited_count)

    @property
    def visited(self) -> FrozenSet[Cell]:
        return frozenset(self.visit_order)

    @property
    def found_path(self) -> bool:
        return self.path is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "current":         self.current.to_dict(),
            "frontier":        [c.to_dict() for c in self.frontier],
            "visited":         [c.to_dict() for c in self.visit_order],
            "path":            [c.to_dict() for c in self.path] if self.path is not None else None,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
            "is_final":        self.is_final,
        }

    def cell_states(self, start: Cell, end: Cell) -> Dict[Cell, CellState]:
        """
        Visual state of every cell this step touches, later layers winning:
        visited < frontier < path < current < start / end.
        Cells not in the result are plain OPEN or WALL.
        """
        states: Dict[Cell, CellState] = {}
        for c in self.visit_order:
            states[c] = CellState.VISITED
        for c in self.frontier:
            states[c] = CellState.FRONTIER
        for c in self.path or ():
            states[c] = CellState.PATH
        states[self.current] = CellState.CURRENT
        states[start] = CellState.START
        states[end] = CellState.END
        return states
