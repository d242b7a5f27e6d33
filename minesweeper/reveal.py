from __future__ import annotations

from collections import deque
from typing import Tuple

from .board import BoardState


def reveal(board: BoardState, x: int, y: int) -> None:
    """Spread from an already-revealed cell across connected zero-count cells.

    Every unrevealed neighbour of a zero cell is revealed; only zero cells are
    expanded further, so the fill stops at the first ring of numbered cells.
    Mines and flags are left untouched.
    """
    if board.mines[y, x] or board.counts[y, x] != 0:
        return

    q: deque[Tuple[int, int]] = deque()
    q.append((x, y))

    while q:
        cx, cy = q.popleft()
        for nx, ny in board.neighbors(cx, cy):
            if board.revealed[ny, nx]:
                continue
            board.revealed[ny, nx] = True
            if board.counts[ny, nx] == 0:
                q.append((nx, ny))
