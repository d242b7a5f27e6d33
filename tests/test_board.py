"""
Tests for board grids, tile identities and the win check
"""

import numpy as np

from minesweeper.board import BoardState, Tile, is_won, tile_identity
from minesweeper.generator import compute_adjacent_counts


def _board():
    board = BoardState(4, 3)
    board.mines[0, 0] = True
    board.mines[2, 3] = True
    compute_adjacent_counts(board.mines, out=board.counts)
    return board


def test_grids_share_shape_and_clear_together():
    board = _board()
    board.revealed[1, 1] = True
    board.flags[0, 1] = True
    for grid in (board.mines, board.counts, board.revealed, board.flags):
        assert grid.shape == (3, 4)

    board.clear()
    assert not board.mines.any()
    assert not board.counts.any()
    assert not board.revealed.any()
    assert not board.flags.any()


def test_fresh_board_is_all_hidden():
    tiles = tile_identity(BoardState(10, 8))
    assert tiles.shape == (8, 10)
    assert (tiles == Tile.HIDDEN).all()


def test_tile_identity_projection():
    board = _board()
    board.flags[0, 0] = True       # flagged mine, hidden
    board.revealed[1, 1] = True    # count 1
    board.revealed[0, 3] = True    # count 0
    board.revealed[2, 3] = True    # exposed mine
    board.flags[0, 3] = True       # flag on an open cell is ignored

    tiles = tile_identity(board)
    assert tiles[0, 0] == Tile.FLAG
    assert tiles[1, 1] == 1
    assert tiles[0, 3] == 0
    assert tiles[2, 3] == Tile.MINE
    assert tiles[1, 0] == Tile.HIDDEN


def test_neighbors_clip_at_edges():
    board = BoardState(4, 3)
    assert len(board.neighbors(0, 0)) == 3
    assert len(board.neighbors(1, 1)) == 8
    assert len(board.neighbors(3, 1)) == 5


def test_toggle_flag_and_reveal_mines():
    board = _board()
    board.toggle_flag(2, 1)
    assert board.flags[1, 2]
    board.toggle_flag(2, 1)
    assert not board.flags[1, 2]

    board.reveal_mines()
    assert np.array_equal(board.revealed, board.mines)


def test_win_requires_all_safe_open_and_no_mine_open():
    board = _board()
    assert not is_won(board)

    board.revealed[:] = ~board.mines
    assert is_won(board)

    board.revealed[0, 0] = True
    assert not is_won(board), "an exposed mine is never a win"

    board.revealed[0, 0] = False
    board.revealed[1, 2] = False
    assert not is_won(board), "a hidden safe cell keeps the game going"


def test_win_on_mine_free_row():
    board = BoardState(3, 1)
    board.revealed[:] = True
    assert is_won(board)


def test_ascii_view_of_tiles():
    from viz import ascii_board

    tiles = np.array([[0, 1, Tile.MINE], [Tile.FLAG, Tile.HIDDEN, 8]], dtype=np.uint8)
    lines = ascii_board(tiles).splitlines()
    assert len(lines) == 3
    assert lines[1].split() == ["0", ".", "1", "*"]
    assert lines[2].split() == ["1", "F", "#", "8"]
