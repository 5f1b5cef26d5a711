from __future__ import annotations
from typing import Optional, List, Tuple

from connect4.config import CONNECT_N
from connect4.core.board import Board
from connect4.types import Side

Coord = Tuple[int, int]  # (row, col)

# (d_row, d_col): down, right, down-right, down-left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


def window(board: Board, row: int, col: int, d_row: int, d_col: int) -> Optional[List[Coord]]:
    """
    The CONNECT_N cells starting at (row, col) in one direction, or None if
    the run leaves the board.
    """
    end_r = row + (CONNECT_N - 1) * d_row
    end_c = col + (CONNECT_N - 1) * d_col
    if not (0 <= end_r < board.rows and 0 <= end_c < board.cols):
        return None
    return [(row + i * d_row, col + i * d_col) for i in range(CONNECT_N)]


def check_winner_with_line(board: Board) -> Optional[Tuple[Side, List[Coord]]]:
    g = board.grid

    # Row-major scan; the first side found with a line is reported
    for r in range(board.rows):
        for c in range(board.cols):
            p = g[r][c]
            if p is None:
                continue
            for d_row, d_col in DIRECTIONS:
                coords = window(board, r, c, d_row, d_col)
                if coords and all(g[rr][cc] == p for rr, cc in coords):
                    return p, coords

    return None


def check_winner(board: Board) -> Optional[Side]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
