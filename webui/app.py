from __future__ import annotations

import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, Response
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from minesweeper.config import load_config

from .session import MinesweeperSession

log = logging.getLogger(__name__)


class TileInputRequest(BaseModel):
    x: int
    y: int
    button: int = 0


class PointerInputRequest(BaseModel):
    u: float
    v: float
    button: int = 0


def _default_config() -> Optional[Path]:
    env_path = os.environ.get("MINESWEEPER_CONFIG")
    if env_path:
        return Path(env_path)
    return None


app = FastAPI()
_static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=_static_dir), name="static")


@app.on_event("startup")
def _load_session() -> None:
    cfg = load_config(_default_config())
    session = MinesweeperSession(cfg)
    app.state.session = session
    if session.load():
        log.info("Minesweeper ready: %dx%d with %d mines", cfg.width, cfg.height, cfg.mine_count)


def _get_session() -> MinesweeperSession:
    session = getattr(app.state, "session", None)
    if session is None:
        raise HTTPException(status_code=503, detail="Session not ready")
    return session


@app.get("/")
def index() -> FileResponse:
    index_path = _static_dir / "index.html"
    return FileResponse(index_path)


@app.get("/api/state")
def get_state() -> dict:
    state = _get_session().current_state()
    return asdict(state)


@app.post("/api/input")
def tile_input(req: TileInputRequest) -> dict:
    try:
        state = _get_session().tile_input(req.x, req.y, req.button)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return asdict(state)


@app.post("/api/pointer")
def pointer_input(req: PointerInputRequest) -> dict:
    state = _get_session().pointer_input(req.u, req.v, req.button)
    return asdict(state)


@app.get("/api/frame.png")
def frame() -> Response:
    session = _get_session()
    if not session.ready:
        raise HTTPException(status_code=503, detail="Assets not loaded")
    try:
        png = session.frame_png()
    except RuntimeError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return Response(content=png, media_type="image/png", headers={"Cache-Control": "no-store"})
