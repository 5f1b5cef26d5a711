"""
Tests for the hard-mode minimax agent.
"""

from math import inf

from connect4.ai.minimax_agent import MinimaxAgent
from connect4.core.board import Board
from connect4.core.scoring import evaluate
from connect4.game.state import GameState


MIDGAME = [
    "...O...",
    "..XX...",
    "..OXO..",
    "X.OXOX.",
]


class TestMinimaxAgent:
    def test_empty_board_returns_legal_column(self):
        agent = MinimaxAgent()
        col = agent.best_move(Board())
        assert 0 <= col <= 6
        assert col == 3
        assert agent.last_info["nodes"] > 0
        assert agent.last_info["move_col"] == col

    def test_deterministic(self, board_from_rows):
        b = board_from_rows(MIDGAME)
        first = MinimaxAgent().best_move(b)
        second = MinimaxAgent().best_move(b)
        assert first == second

    def test_board_unchanged_after_search(self, board_from_rows):
        b = board_from_rows(MIDGAME)
        before = b.key()
        MinimaxAgent().choose_move(GameState(board=b, current="O"))
        assert b.key() == before

    def test_depth_zero_prefers_leftmost_tie(self):
        # each drop at columns 0-3 scores +5; leftmost wins the tie
        assert MinimaxAgent(depth=0).best_move(Board()) == 0

    def test_single_legal_column(self, board_from_rows, draw_rows):
        b = board_from_rows(["." + draw_rows[0][1:]] + draw_rows[1:])
        assert MinimaxAgent().best_move(b) == 0

    def test_cutoff_returns_static_score(self, board_from_rows):
        b = board_from_rows(["OOO"])
        agent = MinimaxAgent()
        assert agent.minimax(b, 0, -inf, inf, True) == evaluate(b)

    def test_won_board_is_a_cutoff(self, board_from_rows):
        b = board_from_rows(["XXXX"])
        agent = MinimaxAgent()
        assert agent.minimax(b, 3, -inf, inf, True) == evaluate(b)
        assert agent._nodes == 1

    def test_alpha_beta_prunes(self, board_from_rows):
        agent = MinimaxAgent()
        agent.best_move(board_from_rows(MIDGAME))
        assert agent.last_info["cutoffs"] > 0
