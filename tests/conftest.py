from collections import deque

import pytest

from grid import Cell, Grid


def flood(grid, start):
    """Every open cell reachable from `start` (independent of the recorders)."""
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nbr in grid.neighbours(cell):
            if nbr not in seen:
                seen.add(nbr)
                queue.append(nbr)
    return seen


def shortest_distance(grid, start, end):
    """Edge count of a shortest path, or None."""
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            return dist[cell]
        for nbr in grid.neighbours(cell):
            if nbr not in dist:
                dist[nbr] = dist[cell] + 1
                queue.append(nbr)
    return None


@pytest.fixture
def center_wall_grid():
    """5x5, all open except (2, 2)."""
    g = Grid.create_empty(5, 5)
    g.set_wall(Cell(2, 2))
    return g


@pytest.fixture
def ringed_grid():
    """7x7 with a closed wall ring around (3, 3)."""
    return Grid.from_text("""
        .......
        .......
        ..###..
        ..#.#..
        ..###..
        .......
        .......
    """)


@pytest.fixture
def two_rooms_grid():
    """A 2x2 room and a detached 2x1 column."""
    return Grid.from_text("""
        ..#.
        ..#.
    """)


@pytest.fixture
def detour_grid():
    """Two routes from the top-left to the top-right, a short one and a long one."""
    return Grid.from_text("""
        .....
        .###.
        .#...
        .#.##
        .....
    """)
