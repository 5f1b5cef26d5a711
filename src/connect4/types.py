# src/connect4/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Side = Literal["X", "O"]
Cell = Optional[Side]
Move = NewType("Move", int)   # column index 0..6

Outcome = Literal["in_progress", "player_win", "opponent_win", "draw"]
Difficulty = Literal["easy", "hard"]

PLAYER: Side = "X"    # the human
OPPONENT: Side = "O"  # the AI


def other(side: Side) -> Side:
    return OPPONENT if side == PLAYER else PLAYER
