"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every search the playground knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, precompute, pseudocode, …),
        "dfs": …,
    }

The engine and the Flask app both consume AlgoInfo, so adding a search
means writing the generator and adding one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bfs import bfs as _bfs, precompute_bfs, PSEUDOCODE as _bfs_pc
from algorithms.dfs import dfs as _dfs, precompute_dfs, PSEUDOCODE as _dfs_pc
from algorithms.path import reconstruct_path
from algorithms.step import TraversalStep, VisitLog


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                  # registry key, e.g. "bfs"
    label:            str                  # human label, e.g. "Breadth-First Search"
    fn:               Callable             # the step generator
    precompute:       Callable             # fn run to completion → List[TraversalStep]
    pseudocode:       List[str]            # lines for the side-panel
    frontier_kind:    str = "queue"        # "queue" | "stack"
    shortest_path:    bool = False         # guarantees fewest edges?
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str = ""
    complexity_space: str = ""
    description:      str = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, precompute=precompute_bfs,
        pseudocode=_bfs_pc, frontier_kind="queue", shortest_path=True,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores ring by ring. Finds the shortest path by edge count.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, precompute=precompute_dfs,
        pseudocode=_dfs_pc, frontier_kind="stack", shortest_path=False,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(E)",
        description="Dives down one corridor before backtracking. Does NOT guarantee the shortest path.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "precompute_bfs",
    "precompute_dfs",
    "reconstruct_path",
    "TraversalStep",
    "VisitLog",
]
