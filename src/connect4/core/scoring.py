from __future__ import annotations
from typing import List, Tuple

from connect4.core.board import Board
from connect4.core.rules import DIRECTIONS, window
from connect4.types import Cell, OPPONENT, PLAYER

# (own pieces, empty cells) -> score for the side owning the pieces
WINDOW_SCORES = {
    (3, 1): 100,
    (2, 2): 10,
    (1, 3): 5,
}


def _score_window(board: Board, coords: List[Tuple[int, int]]) -> int:
    cells: List[Cell] = [board.grid[r][c] for (r, c) in coords]

    o_count = cells.count(OPPONENT)
    p_count = cells.count(PLAYER)
    e_count = cells.count(None)

    # mixed window: both sides present => no line potential
    if o_count > 0 and p_count > 0:
        return 0

    if o_count:
        return WINDOW_SCORES.get((o_count, e_count), 0)
    return -WINDOW_SCORES.get((p_count, e_count), 0)


def evaluate(board: Board) -> int:
    """
    Static score of a position, positive favors the AI (OPPONENT).

    Every occupied cell anchors one window per direction. Windows that would
    leave the board are skipped. Overlapping windows are counted once per
    anchor, so threats along several lines add up.
    """
    score = 0
    for r in range(board.rows):
        for c in range(board.cols):
            if board.grid[r][c] is None:
                continue
            for d_row, d_col in DIRECTIONS:
                coords = window(board, r, c, d_row, d_col)
                if coords is not None:
                    score += _score_window(board, coords)
    return score
