from __future__ import annotations

import logging
from typing import Callable, Optional

from connect4.ai.pick import make_agent
from connect4.core.rules import check_winner_with_line
from connect4.errors import InvalidColumnError
from connect4.game.engine import apply_ai_move, compute_ai_move, new_game, submit_player_move
from connect4.game.state import GameState
from connect4.types import Difficulty, Outcome
from connect4.ui.effects import ai_thinking
from connect4.ui.prompts import parse_move
from connect4.ui.render import render

logger = logging.getLogger(__name__)

OUTCOME_MESSAGES: dict[Outcome, str] = {
    "player_win": "Congratulations! You won!",
    "opponent_win": "Opponent wins! Better luck next time.",
    "draw": "It's a draw! The board is full.",
}


def _finish(state: GameState) -> GameState:
    w = check_winner_with_line(state.board)
    render(state.board, OUTCOME_MESSAGES[state.outcome], highlight=w[1] if w else None)
    logger.info("game over: %s", state.outcome)
    return state


def run_game(
    difficulty: Difficulty,
    show_thinking: bool = True,
    input_fn: Optional[Callable[[str], str]] = None,
) -> GameState:
    """
    Human (X) against the AI (O) until someone wins, the board fills up, or
    the human quits. Returns the last state.
    """
    read = input_fn or input
    agent = make_agent(difficulty)
    state = new_game()
    status = f"Difficulty: {difficulty}. Your move! Choose a column (0-{state.board.cols - 1})."

    while True:
        render(state.board, status)

        try:
            col = parse_move(read("Your move! Choose a column: "))
            if col is None:
                render(state.board, "Game quit.")
                return state

            state = submit_player_move(state, col)
        except InvalidColumnError as e:
            status = str(e)
            continue

        if state.is_over:
            return _finish(state)

        render(state.board, f"You played column {col}.")
        if show_thinking:
            ai_thinking(agent.name)

        ai_col = compute_ai_move(state, agent)
        state = apply_ai_move(state, ai_col)

        if state.is_over:
            return _finish(state)

        status = f"Opponent plays at column {ai_col}. Your move!"
