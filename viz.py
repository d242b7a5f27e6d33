from __future__ import annotations

import numpy as np

from minesweeper.board import Tile


_GLYPHS = {int(Tile.MINE): "* ", int(Tile.FLAG): "F ", int(Tile.HIDDEN): "# "}


def ascii_board(tiles: np.ndarray) -> str:
    H, W = tiles.shape
    lines = []
    header = "   " + " ".join(f"{x:2d}" for x in range(W))
    lines.append(header)
    for y in range(H):
        row = [f"{y:2d}"]
        for x in range(W):
            t = int(tiles[y, x])
            ch = _GLYPHS.get(t)
            if ch is None:
                ch = ". " if t == 0 else f"{t} "
            row.append(ch)
        lines.append(" ".join(row))
    return "\n".join(lines)


def ascii_from_game(game) -> str:
    return ascii_board(game.tiles())
