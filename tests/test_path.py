from grid import Cell, Grid
from algorithms.path import reconstruct_path, is_valid_path


def test_walks_parent_chain_back_to_start():
    parent = {Cell(0, 1): Cell(0, 0), Cell(0, 2): Cell(0, 1), Cell(1, 2): Cell(0, 2)}
    assert reconstruct_path(parent, Cell(0, 0), Cell(1, 2)) == [
        Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(1, 2),
    ]


def test_start_equals_end():
    assert reconstruct_path({}, Cell(2, 2), Cell(2, 2)) == [Cell(2, 2)]


def test_broken_chain_is_truncated():
    parent = {Cell(0, 3): Cell(0, 2)}
    assert reconstruct_path(parent, Cell(0, 0), Cell(0, 3)) == [Cell(0, 0), Cell(0, 2), Cell(0, 3)]


def test_cyclic_map_terminates():
    parent = {Cell(0, 1): Cell(0, 2), Cell(0, 2): Cell(0, 1)}
    path = reconstruct_path(parent, Cell(0, 0), Cell(0, 1))
    assert path[0] == Cell(0, 0)
    assert path[-1] == Cell(0, 1)


def test_is_valid_path():
    grid = Grid.from_text("""
        ..#
        ...
    """)
    assert is_valid_path([Cell(0, 0), Cell(0, 1), Cell(1, 1), Cell(1, 2)], grid)
    assert not is_valid_path([Cell(0, 0), Cell(1, 1)], grid)
    assert not is_valid_path([Cell(0, 1), Cell(0, 2)], grid)
    assert not is_valid_path([], grid)
