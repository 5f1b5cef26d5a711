from __future__ import annotations
from dataclasses import dataclass, field

from connect4.core.board import Board
from connect4.types import Outcome, Side, PLAYER


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Side = PLAYER
    outcome: Outcome = "in_progress"
    last_status: str = "Your move! Choose a column (0-6)."

    @property
    def is_over(self) -> bool:
        return self.outcome != "in_progress"

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            current=self.current,
            outcome=self.outcome,
            last_status=self.last_status,
        )
