"""
Tests for the FastAPI front end
"""

import pytest
from fastapi.testclient import TestClient

from webui.app import app

HIDDEN = 11
FLAG = 10


@pytest.fixture
def client(tmp_path, monkeypatch):
    cfg = tmp_path / "game.yaml"
    cfg.write_text("board:\n  mine_count: 30\n  seed: 3\n")
    monkeypatch.setenv("MINESWEEPER_CONFIG", str(cfg))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_client(tmp_path, monkeypatch):
    cfg = tmp_path / "broken.yaml"
    cfg.write_text("assets:\n  sprite_sheet: missing.png\n")
    monkeypatch.setenv("MINESWEEPER_CONFIG", str(cfg))
    with TestClient(app) as c:
        yield c


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "<canvas" in res.text


def test_initial_state(client):
    state = client.get("/api/state").json()
    assert state["state"] == "awaiting_first_input"
    assert state["message"] == "minesweeper"
    assert (state["width"], state["height"], state["mine_count"]) == (10, 8, 30)
    assert len(state["tiles"]) == 8 and len(state["tiles"][0]) == 10
    assert all(t == HIDDEN for row in state["tiles"] for t in row)
    assert state["frame"] == 1


def test_frame_is_png(client):
    res = client.get("/api/frame.png")
    assert res.status_code == 200
    assert res.headers["content-type"] == "image/png"
    assert res.content[:8] == b"\x89PNG\r\n\x1a\n"


def test_first_click_then_flag(client):
    # flags are ignored before the first reveal
    state = client.post("/api/input", json={"x": 0, "y": 0, "button": 2}).json()
    assert state["state"] == "awaiting_first_input"

    state = client.post("/api/input", json={"x": 5, "y": 4}).json()
    assert state["state"] in ("playing", "ended")
    assert state["tiles"][4][5] == 0
    assert state["frame"] == 2

    if state["state"] == "playing":
        hidden = [
            (x, y) for y, row in enumerate(state["tiles"]) for x, t in enumerate(row) if t == HIDDEN
        ]
        x, y = hidden[0]
        flagged = client.post("/api/input", json={"x": x, "y": y, "button": 2}).json()
        assert flagged["tiles"][y][x] == FLAG
        still = client.post("/api/input", json={"x": x, "y": y, "button": 0}).json()
        assert still["tiles"][y][x] == FLAG
        assert still["state"] == "playing"


def test_pointer_maps_to_tile(client):
    state = client.post("/api/pointer", json={"u": 0.55, "v": 0.55, "button": 0}).json()
    assert state["state"] != "awaiting_first_input"
    assert state["tiles"][4][5] != HIDDEN


def test_pointer_outside_canvas_is_dropped(client):
    state = client.post("/api/pointer", json={"u": 1.2, "v": 0.5, "button": 0}).json()
    assert state["state"] == "awaiting_first_input"
    assert state["frame"] == 1


def test_out_of_bounds_tile_is_rejected(client):
    res = client.post("/api/input", json={"x": 10, "y": 0})
    assert res.status_code == 400


def test_malformed_request(client):
    res = client.post("/api/input", json={"x": "left"})
    assert res.status_code == 422


def test_missing_assets_leave_game_inert(broken_client):
    state = broken_client.get("/api/state").json()
    assert state["state"] == "loading"
    assert state["message"] == ""

    state = broken_client.post("/api/input", json={"x": 1, "y": 1}).json()
    assert state["state"] == "loading"
    assert state["frame"] == 0

    assert broken_client.get("/api/frame.png").status_code == 503


@pytest.mark.parametrize("u", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_pointer_is_dropped(client, u):
    body = '{"u": %s, "v": 0.5, "button": 0}' % u
    res = client.post("/api/pointer", content=body, headers={"Content-Type": "application/json"})
    assert res.status_code == 200
    state = res.json()
    assert state["state"] == "awaiting_first_input"
    assert state["frame"] == 1
