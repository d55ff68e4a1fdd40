import pytest

from grid import Cell, Grid, create_empty_grid


def test_create_empty_grid_is_all_open():
    g = create_empty_grid(3, 4)
    assert (g.rows, g.cols) == (3, 4)
    assert g.wall_count() == 0
    assert len(g.open_cells()) == 12


def test_zero_sized_grid_has_no_cells():
    g = Grid.create_empty(0, 0)
    assert list(g.cells()) == []
    assert g.open_cells() == []


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid.create_empty(-1, 3)


def test_toggle_and_set_wall():
    g = Grid.create_empty(2, 2)
    assert g.toggle_wall(Cell(0, 1)) is True
    assert g.is_wall(Cell(0, 1))
    assert g.toggle_wall(Cell(0, 1)) is False
    g.set_wall(Cell(1, 1))
    assert g.is_wall(Cell(1, 1))
    g.set_wall(Cell(1, 1), False)
    assert g.is_open(Cell(1, 1))


def test_edit_out_of_bounds_rejected():
    g = Grid.create_empty(2, 2)
    with pytest.raises(ValueError):
        g.toggle_wall(Cell(2, 0))


def test_neighbours_fixed_order_up_down_left_right():
    g = Grid.create_empty(3, 3)
    assert g.neighbours(Cell(1, 1)) == [Cell(0, 1), Cell(2, 1), Cell(1, 0), Cell(1, 2)]


def test_neighbours_skip_walls_and_edges(center_wall_grid):
    assert center_wall_grid.neighbours(Cell(0, 0)) == [Cell(1, 0), Cell(0, 1)]
    assert Cell(2, 2) not in center_wall_grid.neighbours(Cell(1, 2))


def test_text_round_trip():
    text = "#.#\n...\n##."
    g = Grid.from_text(text)
    assert g.to_text() == text
    assert g.is_wall(Cell(0, 0))
    assert g.is_open(Cell(2, 2))


def test_from_text_rejects_unknown_characters():
    with pytest.raises(ValueError):
        Grid.from_text("..x")


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Grid.from_rows([[False, False], [False]])


def test_dict_round_trip(center_wall_grid):
    assert Grid.from_dict(center_wall_grid.to_dict()) == center_wall_grid


def test_copy_is_independent(center_wall_grid):
    clone = center_wall_grid.copy()
    clone.toggle_wall(Cell(0, 0))
    assert center_wall_grid.is_open(Cell(0, 0))


def test_cell_is_a_value_type():
    assert Cell(1, 2) == Cell(1, 2)
    assert len({Cell(1, 2), Cell(1, 2), Cell(2, 1)}) == 2
    assert Cell.from_dict({"row": 3, "col": 4}) == Cell(3, 4)
    assert str(Cell(3, 4)) == "(3,4)"
