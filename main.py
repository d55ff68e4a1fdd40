"""
main.py — Grid Traversal Playground Flask App
==============================================
JSON API behind the maze / BFS / DFS playground.

Routes:
  GET  /api/algorithms         – registry: labels, pseudocode, complexity
  GET  /api/state              – grid, endpoints, algorithm, current frame
  POST /api/grid/maze          – carve a new perfect maze
  POST /api/grid/clear         – all-open grid
  POST /api/grid/toggle        – flip one cell (click)
  POST /api/grid/draw          – force one cell to wall (drag)
  POST /api/config/algo        – bfs | dfs | race
  POST /api/config/speed       – playback speed preset
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/reset         – back to step 0
  POST /api/step/play          – toggle play/pause
  POST /api/step/tick          – auto-play timer tick
  GET  /api/compare            – BFS vs DFS analytics on the current grid

State management:
  The Flask session holds the grid (as '#'/'.' text), the algorithm, the
  current step index, the playing flag and the speed.  Steps are NOT
  stored: recording is deterministic for a given grid, so every request
  recomputes them from the grid and indexes in.

Configuration (app.config, overridable with FLASK_* environment variables):
  GRID_ROWS / GRID_COLS   – playground size (odd so mazes fit)
  START_CELL / END_CELL   – [row, col]; default (1, 1) and (rows-2, cols-2)
  DEFAULT_ALGORITHM       – "bfs"
  DEFAULT_SPEED           – "medium"
"""

import secrets
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, request, jsonify, session

from grid import Cell, Grid, generate_maze
from algorithms import TraversalStep, get_algorithm, list_algorithms
from engine import (
    Stepper,
    SPEED_PRESETS,
    race_timeline,
    record,
    compare,
    validate_endpoints,
)


ALGORITHM_MODES = ("bfs", "dfs", "race")

app = Flask(__name__)
app.secret_key = secrets.token_hex(32)
app.config.update(
    GRID_ROWS=21,
    GRID_COLS=21,
    START_CELL=None,
    END_CELL=None,
    DEFAULT_ALGORITHM="bfs",
    DEFAULT_SPEED="medium",
)
app.config.from_prefixed_env()


# ---------------------------------------------------------------------------
# Config Helpers
# ---------------------------------------------------------------------------
def grid_size() -> Tuple[int, int]:
    return int(app.config["GRID_ROWS"]), int(app.config["GRID_COLS"])


def endpoints() -> Tuple[Cell, Cell]:
    rows, cols = grid_size()
    start = app.config["START_CELL"] or (1, 1)
    end   = app.config["END_CELL"] or (rows - 2, cols - 2)
    return Cell(*start), Cell(*end)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_grid() -> Grid:
    """Deserialise grid from session, or create the default empty grid."""
    if "grid" not in session:
        session["grid"] = Grid.create_empty(*grid_size()).to_text()
    return Grid.from_text(session["grid"])


def save_grid(grid: Grid) -> None:
    # text form keeps the session cookie small
    session["grid"] = grid.to_text()


def get_state() -> Dict[str, Any]:
    """Return current app state as a dict."""
    return {
        "algorithm":    session.get("algorithm", app.config["DEFAULT_ALGORITHM"]),
        "current_step": session.get("current_step", 0),
        "is_playing":   session.get("is_playing", False),
        "speed":        session.get("speed", app.config["DEFAULT_SPEED"]),
    }


def set_state(**kwargs) -> None:
    for k, v in kwargs.items():
        session[k] = v


def reset_playback() -> None:
    set_state(current_step=0, is_playing=False)


# ---------------------------------------------------------------------------
# Step Helpers
# ---------------------------------------------------------------------------
def compute_steps(grid: Grid, algorithm: str) -> List[Any]:
    """Recorded steps for `algorithm`; race mode pairs BFS and DFS frame by frame."""
    start, end = endpoints()
    if algorithm == "race":
        bfs_rec = record("bfs", grid, start, end)
        dfs_rec = record("dfs", grid, start, end)
        return race_timeline(bfs_rec.steps, dfs_rec.steps)
    return record(algorithm, grid, start, end).steps


def load_stepper() -> Tuple[Stepper, str]:
    state = get_state()
    steps = compute_steps(get_grid(), state["algorithm"])
    stepper = Stepper(speed=state["speed"])
    stepper.load(steps, index=state["current_step"])
    if state["is_playing"]:
        stepper.resume()
    return stepper, state["algorithm"]


def step_json(step: Optional[TraversalStep]) -> Optional[Dict[str, Any]]:
    """Step payload plus the per-cell colour overlay the grid view paints."""
    if step is None:
        return None
    start, end = endpoints()
    data = step.to_dict()
    data["overlay"] = [
        {"row": c.row, "col": c.col, "state": s.value}
        for c, s in step.cell_states(start, end).items()
    ]
    return data


def frame_json(stepper: Stepper, algorithm: str) -> Dict[str, Any]:
    current = stepper.current_step
    frame: Dict[str, Any] = {
        "algorithm":    algorithm,
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "is_playing":   stepper.is_playing,
    }
    if algorithm == "race":
        bfs_step, dfs_step = current if current else (None, None)
        frame["bfs"] = step_json(bfs_step)
        frame["dfs"] = step_json(dfs_step)
    else:
        frame["step"] = step_json(current)
    return frame


def save_stepper(stepper: Stepper) -> None:
    set_state(current_step=max(stepper.current_idx, 0), is_playing=stepper.is_playing)


def request_cell(data: Dict[str, Any]) -> Cell:
    try:
        return Cell(int(data["row"]), int(data["col"]))
    except (KeyError, TypeError) as e:
        raise ValueError("Expected integer 'row' and 'col'") from e


def error(message: str, status: int = 400):
    app.logger.warning("Rejected request %s: %s", request.path, message)
    return jsonify({"error": message}), status


@app.errorhandler(ValueError)
def handle_value_error(e: ValueError):
    """Precondition failures from the grid / engine layers become 400s."""
    return error(str(e))


# ---------------------------------------------------------------------------
# API: Registry & State
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([
        {
            "key":              a.key,
            "label":            a.label,
            "pseudocode":       a.pseudocode,
            "frontier_kind":    a.frontier_kind,
            "shortest_path":    a.shortest_path,
            "tags":             a.tags,
            "complexity_time":  a.complexity_time,
            "complexity_space": a.complexity_space,
            "description":      a.description,
        }
        for a in list_algorithms()
    ])


@app.route("/api/state")
def api_state():
    grid = get_grid()
    start, end = endpoints()
    stepper, algorithm = load_stepper()
    state = get_state()
    return jsonify({
        "grid":  grid.to_dict(),
        "start": start.to_dict(),
        "end":   end.to_dict(),
        "speed": state["speed"],
        **frame_json(stepper, algorithm),
    })


# ---------------------------------------------------------------------------
# API: Grid Editing
# ---------------------------------------------------------------------------
@app.route("/api/grid/maze", methods=["POST"])
def api_grid_maze():
    data = request.get_json(silent=True) or {}
    rows, cols = grid_size()
    g = generate_maze(rows, cols, seed=data.get("seed"))
    validate_endpoints(g, *endpoints())

    save_grid(g)
    reset_playback()
    app.logger.info("Generated %dx%d maze (seed=%s)", rows, cols, data.get("seed"))
    return jsonify({"grid": g.to_dict()})


@app.route("/api/grid/clear", methods=["POST"])
def api_grid_clear():
    g = Grid.create_empty(*grid_size())
    save_grid(g)
    reset_playback()
    return jsonify({"grid": g.to_dict()})


def _edit_cell(toggle: bool):
    data = request.get_json(silent=True) or {}
    cell = request_cell(data)
    if cell in endpoints():
        return error(f"{cell!r} is the start or end cell and cannot be a wall")

    g = get_grid()
    if toggle:
        g.toggle_wall(cell)
    else:
        g.set_wall(cell, True)

    save_grid(g)
    reset_playback()
    return jsonify({"cell": cell.to_dict(), "wall": g.is_wall(cell)})


@app.route("/api/grid/toggle", methods=["POST"])
def api_grid_toggle():
    return _edit_cell(toggle=True)


@app.route("/api/grid/draw", methods=["POST"])
def api_grid_draw():
    return _edit_cell(toggle=False)


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo = (request.get_json(silent=True) or {}).get("algo", "bfs")
    if algo not in ALGORITHM_MODES:
        return error(f"Unknown algorithm: {algo}")
    set_state(algorithm=algo)
    reset_playback()
    info = get_algorithm(algo)
    return jsonify({
        "algorithm":  algo,
        "pseudocode": info.pseudocode if info else [],
    })


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = (request.get_json(silent=True) or {}).get("speed", "medium")
    if speed not in SPEED_PRESETS:
        return error(f"Unknown speed preset: {speed}")
    set_state(speed=speed)
    return jsonify({"speed": speed, "seconds_per_step": SPEED_PRESETS[speed]})


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    stepper, algorithm = load_stepper()
    if not stepper.step_forward():
        return error("Already at last step")
    save_stepper(stepper)
    return jsonify(frame_json(stepper, algorithm))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    stepper, algorithm = load_stepper()
    if not stepper.step_backward():
        return error("Already at first step")
    save_stepper(stepper)
    return jsonify(frame_json(stepper, algorithm))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    idx = (request.get_json(silent=True) or {}).get("index", 0)
    if not isinstance(idx, int):
        return error("Invalid step index")
    stepper, algorithm = load_stepper()
    stepper.jump_to(idx)
    save_stepper(stepper)
    return jsonify(frame_json(stepper, algorithm))


@app.route("/api/step/reset", methods=["POST"])
def api_step_reset():
    stepper, algorithm = load_stepper()
    stepper.reset()
    save_stepper(stepper)
    return jsonify(frame_json(stepper, algorithm))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    stepper, algorithm = load_stepper()
    stepper.toggle_play()
    save_stepper(stepper)
    return jsonify(frame_json(stepper, algorithm))


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    """The client's play timer calls this every `speed` seconds."""
    stepper, algorithm = load_stepper()
    if stepper.is_playing:
        stepper.advance()
    save_stepper(stepper)
    return jsonify(frame_json(stepper, algorithm))


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare")
def api_compare():
    grid = get_grid()
    start, end = endpoints()
    bfs_rec = record("bfs", grid, start, end)
    dfs_rec = record("dfs", grid, start, end)
    app.logger.info(
        "Compared BFS (%d steps) and DFS (%d steps)",
        len(bfs_rec.steps), len(dfs_rec.steps),
    )
    return jsonify(compare(bfs_rec, dfs_rec).to_dict())


if __name__ == "__main__":
    app.run(debug=True, port=5000)
