from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time

from connect4.config import MAX_DEPTH
from connect4.core.board import Board
from connect4.core.rules import check_winner
from connect4.core.scoring import evaluate
from connect4.game.state import GameState
from connect4.types import Move, OPPONENT, PLAYER

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Hard difficulty: depth-limited minimax with alpha-beta pruning.

    Trial moves are made in place on the caller's board and undone through
    Board.trial, so the board is unchanged once choose_move returns.
    Columns are tried left to right and only a strictly better score replaces
    the current best, so the leftmost column wins ties.
    """
    name: str = "Hard AI"
    depth: int = MAX_DEPTH

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def choose_move(self, state: GameState) -> Move:
        return self.best_move(state.board)

    def best_move(self, board: Board) -> Move:
        moves = board.valid_moves()
        if not moves:
            raise ValueError("No valid moves.")

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        best_move = moves[0]
        best_score = -inf

        for m in moves:
            with board.trial(m, OPPONENT):
                score = self.minimax(board, self.depth, -inf, inf, False)
            if score > best_score:
                best_score = score
                best_move = m

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": int(best_score) if best_score not in (inf, -inf) else best_score,
            "move_col": int(best_move),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("minimax search: %s", self.last_info)

        return best_move

    def minimax(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
        self._nodes += 1

        if depth == 0 or check_winner(board) is not None or board.is_full():
            return float(evaluate(board))

        if maximizing:
            v = -inf
            for m in board.valid_moves():
                with board.trial(m, OPPONENT):
                    child = self.minimax(board, depth - 1, alpha, beta, False)
                v = max(v, child)
                alpha = max(alpha, child)
                if beta <= alpha:
                    self._cutoffs += 1
                    break
            return v

        v = inf
        for m in board.valid_moves():
            with board.trial(m, PLAYER):
                child = self.minimax(board, depth - 1, alpha, beta, True)
            v = min(v, child)
            beta = min(beta, child)
            if beta <= alpha:
                self._cutoffs += 1
                break
        return v
