from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple

import numpy as np

from .board import BoardState, is_won, tile_identity
from .config import GameConfig
from .generator import place_mines
from .reveal import reveal

log = logging.getLogger(__name__)

MSG_TITLE = "minesweeper"
MSG_LOSE = "you lose!"
MSG_WIN = "you win!"


class GameState(str, Enum):
    LOADING = "loading"
    AWAITING_FIRST_INPUT = "awaiting_first_input"
    PLAYING = "playing"
    ENDED = "ended"


class Outcome(str, Enum):
    WIN = "win"
    LOSS = "loss"


class Button(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"

    @classmethod
    def from_code(cls, code: int) -> "Button":
        # mouse button 0 is primary; every other button flags
        return cls.PRIMARY if int(code) == 0 else cls.SECONDARY


@dataclass(frozen=True)
class InputEvent:
    x: int
    y: int
    button: Button = Button.PRIMARY


class Renderer(Protocol):
    def render(self, tiles: np.ndarray, width: int, height: int) -> None: ...


class StatusDisplay(Protocol):
    def set_message(self, text: str) -> None: ...


@dataclass(frozen=True)
class Transition:
    state: GameState
    render: bool = False
    message: Optional[str] = None
    outcome: Optional[Outcome] = None


def pointer_to_tile(u: float, v: float, width: int, height: int) -> Optional[Tuple[int, int]]:
    """Map a pointer position, as a fraction of the canvas box, onto a tile.

    Returns ``None`` for positions outside the board.
    """
    if not (math.isfinite(u) and math.isfinite(v)):
        return None
    x = math.floor(u * width)
    y = math.floor(v * height)
    if 0 <= x < width and 0 <= y < height:
        return x, y
    return None


def _start_game(
    board: BoardState,
    event: InputEvent,
    mine_count: int,
    rng: Optional[np.random.Generator],
) -> None:
    board.clear()
    place_mines(board, event.x, event.y, mine_count, rng)
    board.revealed[event.y, event.x] = True
    reveal(board, event.x, event.y)


def dispatch(
    state: GameState,
    board: BoardState,
    event: Optional[InputEvent],
    *,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> Transition:
    """Apply one event to ``board`` and return the resulting transition.

    ``event=None`` is the bootstrap signal sent once assets have loaded.
    """
    if event is None:
        if state is not GameState.LOADING:
            return Transition(state)
        board.clear()
        return Transition(GameState.AWAITING_FIRST_INPUT, render=True, message=MSG_TITLE)

    if state is GameState.LOADING:
        return Transition(state)

    if state in (GameState.AWAITING_FIRST_INPUT, GameState.ENDED):
        if event.button is not Button.PRIMARY:
            return Transition(state)
        _start_game(board, event, mine_count, rng)
        message = MSG_TITLE if state is GameState.ENDED else None
        if is_won(board):
            return Transition(GameState.ENDED, render=True, message=MSG_WIN, outcome=Outcome.WIN)
        return Transition(GameState.PLAYING, render=True, message=message)

    # PLAYING
    x, y = event.x, event.y
    if event.button is Button.SECONDARY:
        board.toggle_flag(x, y)
        return Transition(state, render=True)

    if board.flags[y, x]:
        return Transition(state, render=True)

    if board.mines[y, x]:
        board.reveal_mines()
        return Transition(GameState.ENDED, render=True, message=MSG_LOSE, outcome=Outcome.LOSS)

    board.revealed[y, x] = True
    reveal(board, x, y)
    if is_won(board):
        return Transition(GameState.ENDED, render=True, message=MSG_WIN, outcome=Outcome.WIN)
    return Transition(state, render=True)


class Game:
    """Owns the board and game state; forwards transitions to its collaborators."""

    def __init__(
        self,
        cfg: GameConfig,
        renderer: Renderer,
        status: StatusDisplay,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.cfg = cfg
        self.renderer = renderer
        self.status = status
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.board = BoardState(cfg.width, cfg.height)
        self.state = GameState.LOADING
        self.outcome: Optional[Outcome] = None

    def bootstrap(self) -> Transition:
        return self._apply(None)

    def handle(self, event: InputEvent) -> Transition:
        if not self.board.in_bounds(event.x, event.y):
            raise ValueError(f"Cell out of bounds: ({event.x}, {event.y})")
        return self._apply(event)

    def click(self, x: int, y: int) -> Transition:
        return self.handle(InputEvent(x, y, Button.PRIMARY))

    def toggle_flag(self, x: int, y: int) -> Transition:
        return self.handle(InputEvent(x, y, Button.SECONDARY))

    def tiles(self) -> np.ndarray:
        return tile_identity(self.board)

    def _apply(self, event: Optional[InputEvent]) -> Transition:
        prev = self.state
        if prev is GameState.LOADING and event is not None:
            log.debug("Ignoring %s before assets are loaded", event)
        tr = dispatch(prev, self.board, event, mine_count=self.cfg.mine_count, rng=self.rng)
        self.state = tr.state
        if tr.state is not GameState.ENDED:
            self.outcome = None
        if tr.outcome is not None:
            self.outcome = tr.outcome
            log.info("Game over: %s", tr.outcome.value)
        if prev is not tr.state:
            log.debug("State %s -> %s", prev.value, tr.state.value)
        if tr.render:
            self.renderer.render(self.tiles(), self.board.width, self.board.height)
        if tr.message is not None:
            self.status.set_message(tr.message)
        return tr
