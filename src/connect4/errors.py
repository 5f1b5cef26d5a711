from __future__ import annotations


class InvalidColumnError(ValueError):
    """A column choice that cannot be played. The caller may retry."""


class GameOverError(InvalidColumnError):
    """A move was submitted after the game reached a terminal outcome."""


class ColumnFullError(AssertionError):
    """
    A piece was dropped into a full column from inside the core.

    Legal columns are filtered before any drop, so this is a contract
    violation and is never caught.
    """
