"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Visitedness is decided on POP, not on push:
  - a cell can sit on the stack several times before it is processed,
  - a popped cell that is already visited is a stale duplicate and is
    dropped silently (no step),
  - every push overwrites the neighbour's parent, so the parent that
    counts is the one recorded by the most recent push before its first pop.

That is the textbook "mark on pop" variant.  Marking on push instead
would change which path DFS discovers.

Yields one TraversalStep per non-stale pop.  The frontier snapshot is
the raw stack, duplicates included, bottom first.
"""

from typing import Dict, Generator, List

from grid import Cell, Grid
from algorithms.path import reconstruct_path
from algorithms.step import TraversalStep, VisitLog


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(grid, start, end):",               # 0
    "    stack ← [start]",                      # 1
    "    visited ← {}",                         # 2
    "    parent ← {}",                          # 3
    "    while stack is not empty:",             # 4
    "        cell ← stack.pop()",               # 5
    "        if cell in visited: continue",     # 6
    "        visited.add(cell)",                # 7
    "        if cell == end: return path",      # 8
    "        for nbr in open_neighbours(cell):", # 9
    "            if nbr not visited:",          # 10
    "                parent[nbr] = cell",       # 11
    "                stack.push(nbr)",          # 12
    "    return NOT FOUND",                     # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(
    grid: Grid,
    start: Cell,
    end: Cell,
) -> Generator[TraversalStep, None, None]:
    """
    Iterative DFS with parent tracking for path reconstruction.

    Does NOT guarantee a shortest path, only some path when the goal is
    reachable.
    """
    step_no = 0
    stack: List[Cell]        = [start]
    visited                  = VisitLog()
    parent: Dict[Cell, Cell] = {}

    while stack:
        cell = stack.pop()

        # stale duplicate pushed before its first pop
        if cell in visited:
            continue

        visited.add(cell)

        # -- goal check --
        if cell == end:
            path = reconstruct_path(parent, start, end)
            yield TraversalStep(
                step_number=step_no,
                current=cell,
                frontier=tuple(stack),
                path=tuple(path),
                visited_count=len(visited),
                pseudocode_line=8,
                explanation=(
                    f"Goal {end} popped! Path found with "
                    f"{len(path) - 1} edge(s); DFS does not promise it is the shortest."
                ),
                is_final=True,
                log=visited,
            )
            return

        # -- push unvisited neighbours --
        pushed = []
        for nbr in grid.neighbours(cell):
            if nbr not in visited:
                parent[nbr] = cell
                stack.append(nbr)
                pushed.append(nbr)

        line = 12 if pushed else 7
        if pushed:
            explanation = (
                f"Pop {cell}, mark it visited and push "
                f"{', '.join(str(c) for c in pushed)}. The last one pushed "
                f"is explored next (LIFO)."
            )
        else:
            explanation = f"Pop {cell} and mark it visited: dead end, backtrack."

        # anything left on the stack may be a stale duplicate
        exhausted = all(c in visited for c in stack)
        if exhausted:
            line = 13
            explanation += f" Nothing left to explore, so {end} is not reachable."

        yield TraversalStep(
            step_number=step_no,
            current=cell,
            frontier=tuple(stack),
            path=None,
            visited_count=len(visited),
            pseudocode_line=line,
            explanation=explanation,
            is_final=exhausted,
            log=visited,
        )
        step_no += 1


def precompute_dfs(grid: Grid, start: Cell, end: Cell) -> List[TraversalStep]:
    """Run DFS to completion and return every step."""
    return list(dfs(grid, start, end))
