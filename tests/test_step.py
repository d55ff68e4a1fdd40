from grid import Cell, CellState
from algorithms import precompute_bfs, TraversalStep, VisitLog


def test_visit_log_ignores_repeats_and_keeps_order():
    log = VisitLog()
    for c in (Cell(0, 0), Cell(0, 1), Cell(0, 0)):
        log.add(c)
    assert len(log) == 2
    assert log.prefix(1) == (Cell(0, 0),)
    assert Cell(0, 1) in log


def test_steps_share_one_log(center_wall_grid):
    steps = precompute_bfs(center_wall_grid, Cell(0, 0), Cell(4, 4))
    assert all(s.log is steps[0].log for s in steps)
    assert steps[0].visit_order == (Cell(0, 0), Cell(1, 0), Cell(0, 1))


def test_to_dict(center_wall_grid):
    step = precompute_bfs(center_wall_grid, Cell(0, 0), Cell(0, 0))[0]
    data = step.to_dict()
    assert data["current"] == {"row": 0, "col": 0}
    assert data["path"] == [{"row": 0, "col": 0}]
    assert data["visited"] == [{"row": 0, "col": 0}]
    assert data["is_final"] is True


def test_to_dict_without_path(center_wall_grid):
    step = precompute_bfs(center_wall_grid, Cell(0, 0), Cell(4, 4))[0]
    assert step.to_dict()["path"] is None


def test_cell_states_layering():
    log = VisitLog()
    for c in (Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(1, 1)):
        log.add(c)
    step = TraversalStep(
        step_number=3,
        current=Cell(0, 2),
        frontier=(Cell(1, 1), Cell(0, 2)),
        path=(Cell(0, 0), Cell(0, 1), Cell(0, 2)),
        visited_count=4,
        log=log,
    )
    states = step.cell_states(start=Cell(0, 0), end=Cell(2, 2))
    assert states[Cell(0, 0)] is CellState.START
    assert states[Cell(0, 1)] is CellState.PATH
    assert states[Cell(0, 2)] is CellState.CURRENT
    assert states[Cell(1, 1)] is CellState.FRONTIER
    assert states[Cell(2, 2)] is CellState.END
