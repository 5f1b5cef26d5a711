from __future__ import annotations
from typing import Optional

from connect4.errors import InvalidColumnError


def parse_move(raw: str) -> Optional[int]:
    """
    Turn a line of input into a 0-based column.
    Returns None when the player asks to quit. Range is checked by the engine.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    try:
        return int(s)
    except ValueError:
        raise InvalidColumnError("Invalid input. Enter a column number or q.") from None
