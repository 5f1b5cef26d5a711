from __future__ import annotations
from dataclasses import dataclass, field
import random

from connect4.game.state import GameState
from connect4.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.valid_moves()
        if not moves:
            raise ValueError("No valid moves.")
        move = self.rng.choice(moves)
        self.last_info = {"move_col": int(move), "nodes": 0, "time_ms": 0}
        return move
