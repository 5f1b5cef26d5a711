from __future__ import annotations

from dataclasses import dataclass, field
import heapq
import itertools
import logging
import random
import time
from typing import Dict, List, Optional, Set, Tuple

from connect4.core.board import Board, BoardKey
from connect4.core.moves import successors
from connect4.core.rules import check_winner
from connect4.core.scoring import evaluate
from connect4.game.state import GameState
from connect4.types import Move, OPPONENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchNode:
    board: Board
    last_move: Optional[Move]
    root_move: Optional[Move]  # column played at the first ply of the path
    cost_so_far: int
    heuristic: int
    total_score: int


def best_first_search(board: Board) -> Tuple[Optional[SearchNode], int]:
    """
    Look for the shortest sequence of AI drops that completes a four-in-a-row.

    Only the root node carries the evaluator heuristic; every child is ranked
    by path cost alone. Ties pop in insertion order.
    Returns (winning node or None, number of expanded nodes).
    """
    h = evaluate(board)
    start = SearchNode(board.copy(), None, None, 0, h, h)

    seq = itertools.count()
    open_heap: List[Tuple[int, int, SearchNode]] = [(start.total_score, next(seq), start)]
    open_scores: Dict[BoardKey, int] = {start.board.key(): start.total_score}
    closed: Set[BoardKey] = set()
    expanded = 0

    while open_heap:
        _, _, node = heapq.heappop(open_heap)
        key = node.board.key()
        if key in closed:
            continue
        closed.add(key)
        open_scores.pop(key, None)

        if check_winner(node.board) == OPPONENT:
            return node, expanded

        expanded += 1
        for child_board, move in successors(node.board, OPPONENT):
            child_key = child_board.key()
            if child_key in closed:
                continue

            cost = node.cost_so_far + 1
            existing = open_scores.get(child_key)
            if existing is not None and existing <= cost:
                continue

            child = SearchNode(
                board=child_board,
                last_move=move,
                root_move=node.root_move if node.root_move is not None else move,
                cost_so_far=cost,
                heuristic=0,
                total_score=cost,
            )
            open_scores[child_key] = cost
            heapq.heappush(open_heap, (child.total_score, next(seq), child))

    return None, expanded


@dataclass(slots=True)
class BestFirstAgent:
    """
    Easy difficulty.
    Plays toward the nearest AI four-in-a-row, ignoring the human's replies.
    Falls back to a random legal column when no such line exists.
    """
    name: str = "Easy AI"
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        moves = board.valid_moves()
        if not moves:
            raise ValueError("No valid moves.")

        start = time.perf_counter()
        result, expanded = best_first_search(board)

        fallback = result is None or result.root_move is None
        if fallback:
            move = self.rng.choice(moves)
        else:
            move = result.root_move

        elapsed = time.perf_counter() - start
        self.last_info = {
            "move_col": int(move),
            "nodes": expanded,
            "found": result is not None,
            "fallback": fallback,
            "path_len": result.cost_so_far if result is not None else None,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("best-first search: %s", self.last_info)
        return move
