from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from minesweeper.assets import AssetLoadError, load_assets
from minesweeper.board import Tile
from minesweeper.config import GameConfig
from minesweeper.game import Button, Game, GameState, InputEvent, pointer_to_tile
from minesweeper.render import PixelRenderer, encode_png

log = logging.getLogger(__name__)


@dataclass
class BoardView:
    width: int
    height: int
    tile_size: int
    mine_count: int
    state: str
    outcome: Optional[str]
    message: str
    tiles: List[List[int]]
    frame: int


class MinesweeperSession:
    """One browser game: wires the game core to a pixel renderer and a status line."""

    def __init__(self, cfg: GameConfig, *, rng: Optional[np.random.Generator] = None) -> None:
        self.cfg = cfg
        self.message = ""
        self._renderer: Optional[PixelRenderer] = None
        self._lock = threading.Lock()
        self.game = Game(cfg, renderer=self, status=self, rng=rng)

    # Renderer / StatusDisplay for the game core
    def render(self, tiles: np.ndarray, width: int, height: int) -> None:
        if self._renderer is None:
            raise RuntimeError("Render requested before assets were loaded")
        self._renderer.render(tiles, width, height)

    def set_message(self, text: str) -> None:
        self.message = text

    @property
    def ready(self) -> bool:
        return self._renderer is not None

    def load(self) -> bool:
        try:
            assets = load_assets(self.cfg.sprite_sheet, self.cfg.tile_size)
        except AssetLoadError as exc:
            log.error("Asset loading failed, game will not start: %s", exc)
            return False
        with self._lock:
            self._renderer = PixelRenderer(assets)
            self.game.bootstrap()
        return True

    def tile_input(self, x: int, y: int, button: int) -> BoardView:
        if not (0 <= x < self.cfg.width and 0 <= y < self.cfg.height):
            raise ValueError(f"Cell out of bounds: ({x}, {y})")
        with self._lock:
            self.game.handle(InputEvent(x, y, Button.from_code(button)))
            return self._build_view()

    def pointer_input(self, u: float, v: float, button: int) -> BoardView:
        tile = pointer_to_tile(u, v, self.cfg.width, self.cfg.height)
        with self._lock:
            if tile is not None:
                self.game.handle(InputEvent(tile[0], tile[1], Button.from_code(button)))
            return self._build_view()

    def current_state(self) -> BoardView:
        with self._lock:
            return self._build_view()

    def frame_png(self) -> bytes:
        with self._lock:
            if self._renderer is None or self._renderer.frame is None:
                raise RuntimeError("No frame rendered yet")
            frame = self._renderer.frame.copy()
        return encode_png(frame)

    def _build_view(self) -> BoardView:
        game = self.game
        if game.state is GameState.LOADING:
            tiles = np.full((self.cfg.height, self.cfg.width), int(Tile.HIDDEN), dtype=np.uint8)
        else:
            tiles = game.tiles()
        return BoardView(
            width=self.cfg.width,
            height=self.cfg.height,
            tile_size=self.cfg.tile_size,
            mine_count=self.cfg.mine_count,
            state=game.state.value,
            outcome=game.outcome.value if game.outcome is not None else None,
            message=self.message,
            tiles=tiles.astype(int).tolist(),
            frame=self._renderer.frames_rendered if self._renderer is not None else 0,
        )
