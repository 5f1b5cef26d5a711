# src/connect4/core/board.py

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from connect4.config import ROWS, COLS
from connect4.errors import ColumnFullError, InvalidColumnError
from connect4.types import Cell, Side, Move

BoardKey = Tuple[Tuple[Cell, ...], ...]


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def key(self) -> BoardKey:
        """Hashable snapshot of the full grid, used for de-duplication."""
        return tuple(tuple(row) for row in self.grid)

    def swapped(self) -> "Board":
        """Copy with every X and O exchanged."""
        flip = {None: None, "X": "O", "O": "X"}
        b = Board(self.rows, self.cols)
        b.grid = [[flip[cell] for cell in row] for row in self.grid]
        return b

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def drop(self, col: Move, side: Side) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise InvalidColumnError(f"Column {c} is out of range 0-{self.cols - 1}.")
        if self.grid[0][c] is not None:
            raise ColumnFullError(f"Column {c} is full.")

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = side
                return r

        raise ColumnFullError(f"Column {c} is full.")

    def undo(self, col: Move) -> None:
        """
        Remove the top-most piece from a column.
        Must reverse the most recent drop on this board.
        """
        c = int(col)
        for r in range(self.rows):
            if self.grid[r][c] is not None:
                self.grid[r][c] = None
                return
        raise ValueError("Cannot undo: column is empty.")

    @contextmanager
    def trial(self, col: Move, side: Side) -> Iterator["Board"]:
        """
        Drop a piece for the duration of a with-block.
        The piece is removed again on every exit path, including a break out
        of the enclosing loop.
        """
        self.drop(col, side)
        try:
            yield self
        finally:
            self.undo(col)
