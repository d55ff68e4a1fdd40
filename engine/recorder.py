"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete search run (every TraversalStep), then computes the
metrics the analytics panel and race mode need.

Usage:
    rec = Recorder()
    rec.start(algo_key="bfs", grid=g, start=Cell(1, 1), end=Cell(19, 19))
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # JSON-ready snapshot

Race mode:
    Two Recorders (BFS and DFS) run to completion on the SAME grid, then
    compare(rec1, rec2) → ComparisonResult.
"""

import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Generator, List, Optional

from grid import Cell, Grid
from algorithms import AlgoInfo, get_algorithm
from algorithms.step import TraversalStep


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:       str   = ""
    algo_label:     str   = ""
    start:          Optional[Dict[str, int]] = None
    end:            Optional[Dict[str, int]] = None
    cells_visited:  int   = 0
    path_length:    int   = 0          # edges on the final path
    path_found:     bool  = False
    total_steps:    int   = 0
    max_frontier:   int   = 0          # largest queue / stack snapshot
    wall_time_ms:   float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_cells: str = ""    # which run visited fewer cells
    winner_path:  str = ""    # which run found the shorter path
    winner_steps: str = ""    # which run finished in fewer steps

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------
def validate_endpoints(grid: Grid, start: Cell, end: Cell) -> None:
    """Start and end must be in bounds and open."""
    for name, cell in (("start", start), ("end", end)):
        if not grid.in_bounds(cell):
            raise ValueError(f"{name} {cell!r} is outside the {grid.rows}x{grid.cols} grid")
        if grid.is_wall(cell):
            raise ValueError(f"{name} {cell!r} is a wall")


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of TraversalSteps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[TraversalStep]  = []
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._grid:      Optional[Grid]     = None
        self._start:     Optional[Cell]     = None
        self._end:       Optional[Cell]     = None
        self._generator: Optional[Generator[TraversalStep, None, None]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, grid: Grid, start: Cell, end: Cell) -> None:
        """Validate inputs and attach a fresh generator for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        validate_endpoints(grid, start, end)

        self._algo_info = info
        self._grid      = grid
        self._start     = start
        self._end       = end
        self.steps      = []
        self.metrics    = None
        self._generator = info.fn(grid, start, end)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        for step in self._generator:
            self.record_step(step)
        self._generator = None
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def record_step(self, step: TraversalStep) -> None:
        self.steps.append(step)

    @property
    def final_path(self) -> Optional[List[Cell]]:
        if self.steps and self.steps[-1].path is not None:
            return list(self.steps[-1].path)
        return None

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "start":    self._start.to_dict() if self._start else None,
            "end":      self._end.to_dict() if self._end else None,
            "grid":     self._grid.to_dict() if self._grid else {},
            "metrics":  self.metrics.to_dict() if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None
        path = self.final_path or []

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            start=self._start.to_dict() if self._start else None,
            end=self._end.to_dict() if self._end else None,
            cells_visited=last.visited_count if last else 0,
            path_length=len(path) - 1 if path else 0,
            path_found=bool(path),
            total_steps=len(self.steps),
            max_frontier=max((len(s.frontier) for s in self.steps), default=0),
            wall_time_ms=round(wall_ms, 2),
        )


def record(algo_key: str, grid: Grid, start: Cell, end: Cell) -> Recorder:
    """start() + run_to_completion() in one call."""
    rec = Recorder()
    rec.start(algo_key, grid, start, end)
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    # a run that found no path loses the path race outright
    if l.path_found and not r.path_found:
        winner_path = l.algo_label
    elif r.path_found and not l.path_found:
        winner_path = r.algo_label
    elif not l.path_found:
        winner_path = "none"
    else:
        winner_path = winner(l.path_length, r.path_length)

    return ComparisonResult(
        left=l,
        right=r,
        winner_cells=winner(l.cells_visited, r.cells_visited),
        winner_path=winner_path,
        winner_steps=winner(l.total_steps, r.total_steps),
    )
