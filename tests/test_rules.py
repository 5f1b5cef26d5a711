"""
Tests for four-in-a-row detection.
"""

from connect4.core import moves
from connect4.core.board import Board
from connect4.core.rules import check_winner, check_winner_with_line, is_draw


class TestWinDetector:
    def test_fresh_board_has_no_winner(self):
        assert check_winner(Board()) is None

    def test_three_in_a_row_then_fourth_drop(self, board_from_rows):
        b = board_from_rows(["XXX.OO"])
        assert check_winner(b) is None

        after = moves.drop(b, 3, "X")
        assert check_winner(after) == "X"
        assert check_winner(b) is None

    def test_vertical(self, board_from_rows):
        b = board_from_rows(["O", "OX", "OX", "OX"])
        assert check_winner(b) == "O"

    def test_diagonal_up_right(self, board_from_rows):
        b = board_from_rows([
            "...X",
            "..XO",
            ".XOO",
            "XOOX",
        ])
        side, line = check_winner_with_line(b)
        assert side == "X"
        assert sorted(line) == [(2, 3), (3, 2), (4, 1), (5, 0)]

    def test_diagonal_down_right(self, board_from_rows):
        b = board_from_rows([
            "O...",
            "XO..",
            "XXO.",
            "XOXO",
        ])
        side, line = check_winner_with_line(b)
        assert side == "O"
        assert line == [(2, 0), (3, 1), (4, 2), (5, 3)]

    def test_three_is_not_a_win(self, board_from_rows):
        b = board_from_rows(["O", "OX", "OX"])
        assert check_winner(b) is None
        assert check_winner_with_line(b) is None

    def test_broken_line_is_not_a_win(self, board_from_rows):
        b = board_from_rows(["XX.XX"])
        assert check_winner(b) is None

    def test_draw(self, board_from_rows, draw_rows):
        b = board_from_rows(draw_rows)
        assert check_winner(b) is None
        assert is_draw(b)
        assert not is_draw(Board())
