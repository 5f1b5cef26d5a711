from __future__ import annotations
from typing import Optional

from connect4.types import Difficulty


def choose_difficulty() -> Optional[Difficulty]:
    print("Select difficulty:")
    print("1) Easy  (best-first search)")
    print("2) Hard  (minimax, alpha-beta)")
    print("q) Quit")

    while True:
        choice = input("Choice: ").strip().lower()
        if choice in {"1", "easy", "e"}:
            return "easy"
        if choice in {"2", "hard", "h"}:
            return "hard"
        if choice in {"q", "quit", "exit"}:
            return None
        print("Invalid choice, enter 1, 2 or q.")
