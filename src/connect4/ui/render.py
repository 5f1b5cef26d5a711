from __future__ import annotations
from typing import Optional, Iterable, List, Tuple, Set

from connect4 import config
from connect4.core.board import Board
from connect4.types import Cell
from connect4.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET

Coord = Tuple[int, int]

SYMBOLS = {None: ".", "X": "X", "O": "O"}


def render_rows(board: Board) -> List[List[str]]:
    """Plain cell symbols, top row first."""
    return [[SYMBOLS[cell] for cell in row] for row in board.grid]


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == "X":
        return c("X", FG_RED)
    return c("O", FG_YELLOW)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    nums = "   " + " ".join(str(i) for i in range(board.cols))
    print(c(nums, DIM))

    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl and config.USE_COLOR:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)

        print(" | " + " ".join(parts) + " |")

    print(c("   " + "—" * (2 * board.cols - 1), DIM))
    print(c(f"   Enter 0-{board.cols - 1} to drop. Enter q to quit.", DIM))
