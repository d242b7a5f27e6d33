from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .board import BoardState
from .config import ConfigurationError


def safe_zone(width: int, height: int, safe_x: int, safe_y: int) -> np.ndarray:
    """Mask of the 3x3 block centred on the first click, clipped to the board."""
    zone = np.zeros((height, width), dtype=bool)
    zone[max(0, safe_y - 1) : safe_y + 2, max(0, safe_x - 1) : safe_x + 2] = True
    return zone


def compute_adjacent_counts(mine_mask: np.ndarray, *, out: Optional[np.ndarray] = None) -> np.ndarray:
    """Count mines among each cell's 8 neighbours.

    The mask is embedded in a zero border, so neighbours beyond the board edge
    never count as mines. The eight shifted views of the padded mask are summed
    into ``out`` when given.
    """
    H, W = mine_mask.shape
    pad = np.zeros((H + 2, W + 2), dtype=np.uint8)
    pad[1:-1, 1:-1] = mine_mask

    if out is None:
        counts = np.zeros((H, W), dtype=np.uint8)
    else:
        counts = out
        counts.fill(0)

    np.add(counts, pad[:-2, :-2], out=counts, casting="unsafe")
    np.add(counts, pad[:-2, 1:-1], out=counts, casting="unsafe")
    np.add(counts, pad[:-2, 2:], out=counts, casting="unsafe")
    np.add(counts, pad[1:-1, :-2], out=counts, casting="unsafe")
    np.add(counts, pad[1:-1, 2:], out=counts, casting="unsafe")
    np.add(counts, pad[2:, :-2], out=counts, casting="unsafe")
    np.add(counts, pad[2:, 1:-1], out=counts, casting="unsafe")
    np.add(counts, pad[2:, 2:], out=counts, casting="unsafe")
    return counts


def generate(
    width: int,
    height: int,
    mine_count: int,
    safe_x: int,
    safe_y: int,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Place ``mine_count`` mines by rejection sampling, keeping the safe zone clear.

    Returns ``(mines, counts)`` as ``(height, width)`` arrays.
    """
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Board size must be positive, got {width}x{height}")
    if mine_count < 0:
        raise ConfigurationError(f"Mine count must be non-negative, got {mine_count}")
    if not (0 <= safe_x < width and 0 <= safe_y < height):
        raise ValueError(f"Safe anchor out of bounds: ({safe_x}, {safe_y})")

    forbidden = safe_zone(width, height, safe_x, safe_y)
    available = int(forbidden.size - forbidden.sum())
    if mine_count > available:
        raise ConfigurationError(
            f"Cannot place {mine_count} mines: only {available} cells lie outside "
            f"the safe zone around ({safe_x}, {safe_y})"
        )

    rng = rng if rng is not None else np.random.default_rng()
    mines = np.zeros((height, width), dtype=bool)
    for _ in range(mine_count):
        while True:
            mx = int(rng.integers(0, width))
            my = int(rng.integers(0, height))
            if not mines[my, mx] and not forbidden[my, mx]:
                mines[my, mx] = True
                break

    return mines, compute_adjacent_counts(mines)


def place_mines(
    board: BoardState,
    safe_x: int,
    safe_y: int,
    mine_count: int,
    rng: Optional[np.random.Generator] = None,
) -> None:
    mines, counts = generate(board.width, board.height, mine_count, safe_x, safe_y, rng)
    board.mines[...] = mines
    board.counts[...] = counts
