from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np


class Tile(IntEnum):
    """Rendering-facing tile identities. Values 0..8 are adjacency counts."""

    MINE = 9
    FLAG = 10
    HIDDEN = 11


TILE_KINDS = 12

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


class BoardState:
    """The four per-cell grids of one game, indexed ``grid[y, x]``.

    Flattening any grid row-major yields index ``x + y * width``.
    """

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        shape = (self.height, self.width)
        self.mines = np.zeros(shape, dtype=bool)
        self.counts = np.zeros(shape, dtype=np.uint8)
        self.revealed = np.zeros(shape, dtype=bool)
        self.flags = np.zeros(shape, dtype=bool)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def clear(self) -> None:
        self.mines.fill(False)
        self.counts.fill(0)
        self.revealed.fill(False)
        self.flags.fill(False)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> Tuple[Tuple[int, int], ...]:
        neigh = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                neigh.append((nx, ny))
        return tuple(neigh)

    def toggle_flag(self, x: int, y: int) -> None:
        self.flags[y, x] = not self.flags[y, x]

    def reveal_mines(self) -> None:
        np.logical_or(self.revealed, self.mines, out=self.revealed)


def tile_identity(board: BoardState) -> np.ndarray:
    tiles = np.full(board.shape, int(Tile.HIDDEN), dtype=np.uint8)
    tiles[board.flags] = int(Tile.FLAG)
    opened = board.revealed
    tiles[opened] = board.counts[opened]
    tiles[opened & board.mines] = int(Tile.MINE)
    return tiles


def is_won(board: BoardState) -> bool:
    # a hidden safe cell or an exposed mine both leave revealed == mines
    return not bool(np.any(board.revealed == board.mines))
