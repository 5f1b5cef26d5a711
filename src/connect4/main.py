from __future__ import annotations

import argparse

from connect4 import config
from connect4.game.controller import run_game
from connect4.log import setup_logging
from connect4.ui.menu import choose_difficulty


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect4", description="Play Connect Four against the computer.")
    ap.add_argument("--difficulty", choices=["easy", "hard"], default=None, help="Skip the menu and play at this level.")
    ap.add_argument("--log-level", type=str.upper, choices=config.LOG_LEVELS, default=config.LOG_LEVEL, help="Logging level (DEBUG shows search stats).")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--fast", action="store_true", help="Skip the AI thinking delay")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    setup_logging(args.log_level)

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    difficulty = args.difficulty or choose_difficulty()
    if difficulty is None:
        return 0

    print(f"\nStarting game: You (X) vs {difficulty.title()} AI (O)\n")
    run_game(difficulty, show_thinking=not args.fast)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
