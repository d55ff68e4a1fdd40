"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over the implicit grid graph.  Yields exactly one
TraversalStep per dequeue:

  1. Dequeue a cell  →  CURRENT
  2. Goal?  →  reconstruct the shortest (edge-count) path, final step, stop
  3. Otherwise mark every open, unvisited neighbour visited, record its
     parent, enqueue it, and emit the step

Cells are marked visited when ENQUEUED, so each cell enters the queue
at most once.  Running out of queue without reaching the goal is a
normal outcome: the sequence just ends and no step carries a path.

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.
"""

from collections import deque
from typing import Deque, Dict, Generator, List

from grid import Cell, Grid
from algorithms.path import reconstruct_path
from algorithms.step import TraversalStep, VisitLog


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",               # 0
    "    queue ← [start]",                      # 1
    "    visited ← {start}",                    # 2
    "    parent ← {}",                          # 3
    "    while queue is not empty:",             # 4
    "        cell ← queue.dequeue()",           # 5
    "        if cell == end: return path",      # 6
    "        for nbr in open_neighbours(cell):", # 7
    "            if nbr not visited:",          # 8
    "                visited.add(nbr)",         # 9
    "                parent[nbr] = cell",       # 10
    "                queue.enqueue(nbr)",       # 11
    "    return NOT FOUND",                     # 12
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(
    grid: Grid,
    start: Cell,
    end: Cell,
) -> Generator[TraversalStep, None, None]:
    """
    Yields one TraversalStep per dequeued cell.

    Args:
        grid  : The grid to search (read only).
        start : Starting cell, open and in bounds.
        end   : Goal cell, open and in bounds.
    """
    step_no = 0
    queue: Deque[Cell]     = deque([start])
    visited                = VisitLog()
    parent: Dict[Cell, Cell] = {}
    visited.add(start)

    while queue:
        cell = queue.popleft()

        # -- goal check --
        if cell == end:
            path = reconstruct_path(parent, start, end)
            yield TraversalStep(
                step_number=step_no,
                current=cell,
                frontier=tuple(queue),
                path=tuple(path),
                visited_count=len(visited),
                pseudocode_line=6,
                explanation=(
                    f"Goal {end} dequeued! Shortest path has "
                    f"{len(path) - 1} edge(s)."
                ),
                is_final=True,
                log=visited,
            )
            return

        # -- expand --
        added = []
        for nbr in grid.neighbours(cell):
            if nbr not in visited:
                visited.add(nbr)
                parent[nbr] = cell
                queue.append(nbr)
                added.append(nbr)

        line = 11 if added else 5
        if added:
            explanation = (
                f"Dequeue {cell} and enqueue {len(added)} new neighbour(s): "
                f"{', '.join(str(c) for c in added)}. BFS expands the cell "
                f"discovered earliest (FIFO)."
            )
        else:
            explanation = f"Dequeue {cell}: no unvisited open neighbours."
        if not queue:
            line = 12
            explanation += f" Queue is empty, so {end} is not reachable."

        yield TraversalStep(
            step_number=step_no,
            current=cell,
            frontier=tuple(queue),
            path=None,
            visited_count=len(visited),
            pseudocode_line=line,
            explanation=explanation,
            is_final=not queue,
            log=visited,
        )
        step_no += 1


def precompute_bfs(grid: Grid, start: Cell, end: Cell) -> List[TraversalStep]:
    """Run BFS to completion and return every step."""
    return list(bfs(grid, start, end))
