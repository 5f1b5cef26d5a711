"""Shared fixtures for the Connect 4 test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest

from connect4 import config
from connect4.core.board import Board

CELLS = {".": None, "X": "X", "O": "O"}

# Full board with no four-in-a-row anywhere (runs of at most two)
DRAW_ROWS = [
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
]


def _board_from_rows(rows):
    """Build a board from strings, top row first. Short rows and missing top rows are empty."""
    rows = ["." * config.COLS] * (config.ROWS - len(rows)) + list(rows)
    b = Board()
    b.grid = [[CELLS[ch] for ch in row.ljust(config.COLS, ".")] for row in rows]
    return b


@pytest.fixture
def board_from_rows():
    return _board_from_rows


@pytest.fixture
def draw_rows():
    return list(DRAW_ROWS)


@pytest.fixture
def quiet_ui(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)
