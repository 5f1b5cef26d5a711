from __future__ import annotations

import logging
from typing import Callable, Optional

from connect4.ai.base import Agent
from connect4.ai.pick import make_agent
from connect4.core.board import Board
from connect4.core.rules import check_winner
from connect4.errors import GameOverError, InvalidColumnError
from connect4.game.state import GameState
from connect4.types import Difficulty, Move, Outcome, Side, OPPONENT, PLAYER, other

logger = logging.getLogger(__name__)


def new_game() -> GameState:
    return GameState(board=Board(), current=PLAYER)


def _outcome_after(board: Board, mover: Side) -> Outcome:
    # A win on the last empty cell is a win, not a draw
    if check_winner(board) == mover:
        return "player_win" if mover == PLAYER else "opponent_win"
    if board.is_full():
        return "draw"
    return "in_progress"


def _apply(state: GameState, column: int, side: Side) -> GameState:
    nxt = state.copy()
    nxt.board.drop(Move(column), side)
    nxt.outcome = _outcome_after(nxt.board, side)
    nxt.current = other(side)
    logger.info("%s played column %d -> %s", side, column, nxt.outcome)
    return nxt


def submit_player_move(state: GameState, column: int) -> GameState:
    """
    Apply the human's column to a copy of the state.

    Raises InvalidColumnError (state untouched) for a column outside the
    board, a full column, or a finished game.
    """
    if state.is_over:
        raise GameOverError("The game is over.")
    if state.current != PLAYER:
        raise InvalidColumnError("It is not your turn.")
    if column < 0 or column >= state.board.cols:
        logger.debug("rejected column %r", column)
        raise InvalidColumnError(f"Invalid column, choose 0-{state.board.cols - 1}.")
    if Move(column) not in state.board.valid_moves():
        logger.debug("rejected full column %r", column)
        raise InvalidColumnError(f"Column {column} is full, try another.")

    return _apply(state, column, PLAYER)


def _require_ai_turn(state: GameState) -> None:
    if state.is_over:
        raise GameOverError("The game is over.")
    if state.current != OPPONENT:
        raise InvalidColumnError("It is not the AI's turn.")


def compute_ai_move(state: GameState, difficulty: Difficulty | Agent) -> Move:
    """Pick the AI's column without touching the caller's state."""
    _require_ai_turn(state)
    agent = make_agent(difficulty) if isinstance(difficulty, str) else difficulty
    return agent.choose_move(state.copy())


def apply_ai_move(state: GameState, column: int) -> GameState:
    _require_ai_turn(state)
    return _apply(state, column, OPPONENT)


def play_turn(state: GameState, column: int, agent: Agent, on_ai_move: Optional[Callable[[Move], None]] = None) -> GameState:
    """
    One full round: the human's column, then the AI's reply unless the human's
    move ended the game.
    """
    state = submit_player_move(state, column)
    if state.is_over:
        return state

    ai_col = compute_ai_move(state, agent)
    if on_ai_move is not None:
        on_ai_move(ai_col)
    return apply_ai_move(state, ai_col)
