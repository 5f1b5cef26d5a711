"""
Tests for the easy-mode best-first agent.
"""

import random

from connect4.ai.astar_agent import BestFirstAgent, best_first_search
from connect4.core.board import Board
from connect4.core.rules import check_winner
from connect4.core.scoring import evaluate
from connect4.game.state import GameState


class TestBestFirstSearch:
    def test_empty_board_shortest_win(self):
        node, expanded = best_first_search(Board())
        assert node is not None
        assert check_winner(node.board) == "O"
        assert node.cost_so_far == 4
        assert node.total_score == 4
        assert node.heuristic == 0
        # first column in insertion order reaches four first
        assert node.root_move == 0
        assert node.last_move == 0
        # every distinct board with at most three O drops, expanded once
        assert expanded == 120

    def test_same_board_by_two_orders_is_one_node(self, board_from_rows, draw_rows):
        # two empty cells, neither completes a line for O
        b = board_from_rows([".XOO.XO"] + draw_rows[1:])
        node, expanded = best_first_search(b)
        assert node is None
        # root, col 0, col 4, then {0, 4} once rather than once per order
        assert expanded == 4

    def test_one_move_win(self, board_from_rows):
        b = board_from_rows(["X", "OOO..XX"])
        node, _ = best_first_search(b)
        assert node.cost_so_far == 1
        assert node.root_move == 3
        assert node.last_move == 3

    def test_input_board_untouched(self, board_from_rows):
        b = board_from_rows(["X", "OOO..XX"])
        before = b.key()
        best_first_search(b)
        assert b.key() == before

    def test_exhaustion_returns_none(self, board_from_rows, draw_rows):
        # the last empty cell does not complete a line for O
        b = board_from_rows(["." + draw_rows[0][1:]] + draw_rows[1:])
        node, expanded = best_first_search(b)
        assert node is None
        assert expanded == 2

    def test_root_carries_heuristic(self, board_from_rows):
        b = board_from_rows(["OOO"])
        assert evaluate(b) == 115
        node, _ = best_first_search(b)
        assert node.root_move == 3
        assert node.total_score == node.cost_so_far


class TestBestFirstAgent:
    def test_plays_first_ply_of_winning_path(self, board_from_rows):
        agent = BestFirstAgent(rng=random.Random(0))
        col = agent.choose_move(GameState(board=board_from_rows(["X", "OOO..XX"]), current="O"))
        assert col == 3
        assert agent.last_info["found"] is True
        assert agent.last_info["fallback"] is False

    def test_random_fallback(self, board_from_rows, draw_rows):
        agent = BestFirstAgent(rng=random.Random(0))
        b = board_from_rows(["." + draw_rows[0][1:]] + draw_rows[1:])
        assert agent.choose_move(GameState(board=b, current="O")) == 0
        assert agent.last_info["fallback"] is True

    def test_fallback_is_legal(self, board_from_rows):
        # O has already won: the result is the root, so there is no first ply
        b = board_from_rows(["OOOO"])
        agent = BestFirstAgent(rng=random.Random(3))
        col = agent.choose_move(GameState(board=b, current="O"))
        assert col in b.valid_moves()
        assert agent.last_info["fallback"] is True
