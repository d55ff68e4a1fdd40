import pytest

from main import app


@pytest.fixture
def client():
    saved = dict(app.config)
    app.config.update(TESTING=True, GRID_ROWS=7, GRID_COLS=7, START_CELL=None, END_CELL=None)
    with app.test_client() as c:
        yield c
    app.config.clear()
    app.config.update(saved)


def test_algorithms_listing(client):
    data = client.get("/api/algorithms").get_json()
    assert [a["key"] for a in data] == ["bfs", "dfs"]
    assert data[0]["shortest_path"] is True
    assert data[1]["frontier_kind"] == "stack"


def test_initial_state(client):
    data = client.get("/api/state").get_json()
    assert data["grid"]["rows"] == 7 and data["grid"]["cols"] == 7
    assert data["start"] == {"row": 1, "col": 1}
    assert data["end"] == {"row": 5, "col": 5}
    assert data["algorithm"] == "bfs"
    assert data["current_step"] == 0
    assert data["total_steps"] > 1
    assert data["step"]["current"] == {"row": 1, "col": 1}
    states = {(o["row"], o["col"]): o["state"] for o in data["step"]["overlay"]}
    assert states[(1, 1)] == "start" and states[(5, 5)] == "end"


def test_toggle_wall(client):
    resp = client.post("/api/grid/toggle", json={"row": 3, "col": 3})
    assert resp.status_code == 200
    assert resp.get_json()["wall"] is True
    walls = client.get("/api/state").get_json()["grid"]["walls"]
    assert walls[3][3] is True
    assert client.post("/api/grid/toggle", json={"row": 3, "col": 3}).get_json()["wall"] is False


def test_draw_always_sets_wall(client):
    client.post("/api/grid/draw", json={"row": 2, "col": 4})
    assert client.post("/api/grid/draw", json={"row": 2, "col": 4}).get_json()["wall"] is True


def test_endpoints_cannot_become_walls(client):
    resp = client.post("/api/grid/toggle", json={"row": 1, "col": 1})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_bad_cell_requests(client):
    assert client.post("/api/grid/toggle", json={"row": 9, "col": 0}).status_code == 400
    assert client.post("/api/grid/toggle", json={"row": "x", "col": 0}).status_code == 400
    assert client.post("/api/grid/toggle", json={}).status_code == 400


def test_maze_then_bfs_reaches_the_goal(client):
    resp = client.post("/api/grid/maze", json={"seed": 4})
    walls = resp.get_json()["grid"]["walls"]
    assert all(walls[0]) and all(walls[-1])

    client.post("/api/step/goto", json={"index": 10_000})
    data = client.get("/api/state").get_json()
    assert data["current_step"] == data["total_steps"] - 1
    assert data["step"]["path"][0] == {"row": 1, "col": 1}
    assert data["step"]["path"][-1] == {"row": 5, "col": 5}


def test_maze_rejected_for_even_size(client):
    app.config.update(GRID_ROWS=8, GRID_COLS=8)
    assert client.post("/api/grid/maze", json={}).status_code == 400


def test_clear_resets_grid_and_playback(client):
    client.post("/api/grid/maze", json={"seed": 1})
    client.post("/api/step/next")
    data = client.post("/api/grid/clear").get_json()
    assert not any(any(row) for row in data["grid"]["walls"])
    assert client.get("/api/state").get_json()["current_step"] == 0


def test_step_navigation(client):
    assert client.post("/api/step/prev").status_code == 400
    assert client.post("/api/step/next").get_json()["current_step"] == 1
    assert client.post("/api/step/next").get_json()["current_step"] == 2
    assert client.post("/api/step/prev").get_json()["current_step"] == 1
    assert client.post("/api/step/reset").get_json()["current_step"] == 0
    assert client.post("/api/step/goto", json={"index": "two"}).status_code == 400


def test_next_at_end_is_rejected(client):
    client.post("/api/step/goto", json={"index": 10_000})
    assert client.post("/api/step/next").status_code == 400


def test_play_and_tick(client):
    data = client.post("/api/step/play").get_json()
    assert data["is_playing"] is True
    data = client.post("/api/step/tick").get_json()
    assert data["current_step"] == 1 and data["is_playing"] is True
    data = client.post("/api/step/play").get_json()
    assert data["is_playing"] is False
    assert client.post("/api/step/tick").get_json()["current_step"] == 1


def test_race_mode_shows_both_runs(client):
    resp = client.post("/api/config/algo", json={"algo": "race"})
    assert resp.status_code == 200
    client.post("/api/step/goto", json={"index": 10_000})
    data = client.get("/api/state").get_json()
    assert data["algorithm"] == "race"
    assert data["bfs"]["path"] is not None
    assert data["dfs"]["path"] is not None


def test_unknown_algorithm_and_speed(client):
    assert client.post("/api/config/algo", json={"algo": "astar"}).status_code == 400
    assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400
    assert client.post("/api/config/speed", json={"speed": "fast"}).get_json()["speed"] == "fast"


def test_switching_algorithm_resets_playback(client):
    client.post("/api/step/next")
    data = client.post("/api/config/algo", json={"algo": "dfs"}).get_json()
    assert data["pseudocode"][0].startswith("def DFS")
    assert client.get("/api/state").get_json()["current_step"] == 0


def test_compare(client):
    data = client.get("/api/compare").get_json()
    assert data["left"]["algo_key"] == "bfs"
    assert data["right"]["algo_key"] == "dfs"
    assert data["left"]["path_length"] == 8


def test_walled_in_goal_reports_no_path(client):
    for r, c in [(4, 5), (6, 5), (5, 4), (5, 6)]:
        client.post("/api/grid/toggle", json={"row": r, "col": c})
    data = client.get("/api/compare").get_json()
    assert data["left"]["path_found"] is False
    assert data["winner_path"] == "none"
