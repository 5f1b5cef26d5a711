"""
Tests for the board model and the move generator.
"""

import pytest

from connect4.core import moves
from connect4.core.board import Board
from connect4.errors import ColumnFullError, InvalidColumnError


class TestBoard:
    def test_new_board_is_empty(self):
        b = Board()
        assert all(cell is None for row in b.grid for cell in row)
        assert b.valid_moves() == list(range(7))
        assert not b.is_full()

    def test_drop_fills_bottom_up(self):
        b = Board()
        rows = [b.drop(3, "X" if i % 2 == 0 else "O") for i in range(6)]
        assert rows == [5, 4, 3, 2, 1, 0]
        assert [b.grid[r][3] for r in range(6)] == ["O", "X", "O", "X", "O", "X"]
        assert 3 not in b.valid_moves()

    def test_same_side_fill_leaves_no_gap(self):
        b = Board()
        for _ in range(6):
            b.drop(0, "O")
        assert all(b.grid[r][0] == "O" for r in range(6))

    def test_drop_into_full_column_fails_loudly(self):
        b = Board()
        for _ in range(6):
            b.drop(2, "X")
        with pytest.raises(ColumnFullError):
            b.drop(2, "O")

    @pytest.mark.parametrize("col", [-1, 7])
    def test_drop_out_of_range(self, col):
        with pytest.raises(InvalidColumnError):
            Board().drop(col, "X")

    def test_undo_removes_top_piece(self):
        b = Board()
        b.drop(4, "X")
        b.drop(4, "O")
        b.undo(4)
        assert b.grid[4][4] is None
        assert b.grid[5][4] == "X"

    def test_undo_empty_column(self):
        with pytest.raises(ValueError):
            Board().undo(0)

    def test_trial_restores_board_on_break(self):
        b = Board()
        b.drop(1, "X")
        before = b.key()
        for m in b.valid_moves():
            with b.trial(m, "O"):
                assert b.grid[5][m] is not None
                if m == 2:
                    break
        assert b.key() == before

    def test_trial_restores_board_on_exception(self):
        b = Board()
        before = b.key()
        with pytest.raises(RuntimeError):
            with b.trial(0, "O"):
                raise RuntimeError("boom")
        assert b.key() == before

    def test_copy_is_independent(self):
        b = Board()
        c = b.copy()
        c.drop(0, "X")
        assert b.grid[5][0] is None
        assert b.key() != c.key()

    def test_swapped(self, board_from_rows):
        b = board_from_rows(["X.....O"])
        s = b.swapped()
        assert s.grid[5][0] == "O"
        assert s.grid[5][6] == "X"
        assert s.swapped().key() == b.key()


class TestMoveGenerator:
    def test_legal_columns_ascending(self, board_from_rows):
        b = board_from_rows(["X", "O", "X", "O", "X", "O"])
        assert moves.legal_columns(b) == [1, 2, 3, 4, 5, 6]

    def test_drop_returns_new_board(self):
        b = Board()
        nb = moves.drop(b, 3, "O")
        assert b.grid[5][3] is None
        assert nb.grid[5][3] == "O"

    def test_successors_one_per_legal_column(self, board_from_rows):
        b = board_from_rows(["O", "X", "O", "X", "O", "X"])
        succ = moves.successors(b, "O")
        assert [m for _, m in succ] == [1, 2, 3, 4, 5, 6]
        for child, m in succ:
            assert child.grid[5][m] == "O"
        assert b.grid[5][1] is None

    def test_full_iff_no_legal_columns(self, board_from_rows, draw_rows):
        full = board_from_rows(draw_rows)
        assert moves.is_full(full)
        assert moves.legal_columns(full) == []

        almost = board_from_rows(["." + draw_rows[0][1:]] + draw_rows[1:])
        assert not moves.is_full(almost)
        assert moves.legal_columns(almost) == [0]
