from __future__ import annotations
from typing import List, Tuple

from connect4.core.board import Board
from connect4.types import Move, Side


def legal_columns(board: Board) -> List[Move]:
    return board.valid_moves()


def is_full(board: Board) -> bool:
    return board.is_full()


def drop(board: Board, col: Move, side: Side) -> Board:
    """Copy-on-write drop: the input board is left untouched."""
    nb = board.copy()
    nb.drop(col, side)
    return nb


def successors(board: Board, side: Side) -> List[Tuple[Board, Move]]:
    # Ascending column order decides ties in both searches
    return [(drop(board, m, side), m) for m in legal_columns(board)]
