from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List

from connect4 import config
from connect4.ai.pick import AGENT_KINDS, make_agent
from connect4.game.engine import apply_ai_move, compute_ai_move, new_game, submit_player_move
from connect4.game.state import GameState
from connect4.log import setup_logging
from connect4.types import PLAYER

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "game",
    "x_agent",
    "o_agent",
    "winner",
    "moves",
    "x_time_ms",
    "x_nodes",
    "o_time_ms",
    "o_nodes",
]

WINNERS = {"player_win": "X", "opponent_win": "O", "draw": "D"}


def play_headless(game: int, x_kind: str, o_kind: str, seed: int) -> Dict[str, object]:
    """
    One self-play game through the engine.

    The agents always search for O, so X's agent is shown the board with the
    sides swapped.
    """
    agent_x = make_agent(x_kind, rng=random.Random(seed + 101))
    agent_o = make_agent(o_kind, rng=random.Random(seed + 202))

    row: Dict[str, object] = {
        "game": game,
        "x_agent": x_kind,
        "o_agent": o_kind,
        "moves": 0,
        "x_time_ms": 0,
        "x_nodes": 0,
        "o_time_ms": 0,
        "o_nodes": 0,
    }

    state = new_game()
    while not state.is_over:
        if state.current == PLAYER:
            mirrored = GameState(board=state.board.swapped(), current="O")
            move = agent_x.choose_move(mirrored)
            info = agent_x.last_info
            state = submit_player_move(state, int(move))
            side = "x"
        else:
            move = compute_ai_move(state, agent_o)
            info = agent_o.last_info
            state = apply_ai_move(state, int(move))
            side = "o"

        row["moves"] = int(row["moves"]) + 1
        row[f"{side}_time_ms"] = int(row[f"{side}_time_ms"]) + int(info.get("time_ms", 0))
        row[f"{side}_nodes"] = int(row[f"{side}_nodes"]) + int(info.get("nodes", 0))

    row["winner"] = WINNERS[state.outcome]
    return row


def run_benchmark(
    x_kind: str,
    o_kind: str,
    games: int = 10,
    seed: int = 1234,
    max_workers: int | None = None,
) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []

    if max_workers == 1:
        for g in range(games):
            rows.append(play_headless(g, x_kind, o_kind, seed + g))
            logger.info("game %d/%d complete", g + 1, games)
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            futures = [ex.submit(play_headless, g, x_kind, o_kind, seed + g) for g in range(games)]
            for fut in as_completed(futures):
                rows.append(fut.result())
                logger.info("game %d/%d complete", len(rows), games)

    rows.sort(key=lambda r: int(r["game"]))
    return rows


def write_results(rows: List[Dict[str, object]], results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = results_dir / f"bench_results_{ts}.csv"

    with out_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        w.writerows(rows)

    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Self-play benchmark between Connect-4 AI tiers.")
    ap.add_argument("--x", dest="x_kind", choices=AGENT_KINDS, default="random", help="Agent standing in for the human (X)")
    ap.add_argument("--o", dest="o_kind", choices=AGENT_KINDS, default="hard", help="Agent playing O")
    ap.add_argument("--games", type=int, default=10)
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--workers", type=int, default=None, help="Process pool size (1 runs in-process)")
    ap.add_argument("--results-dir", type=str, default=config.RESULTS_DIR)
    ap.add_argument("--log-level", type=str.upper, choices=config.LOG_LEVELS, default="INFO")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level)

    rows = run_benchmark(args.x_kind, args.o_kind, games=args.games, seed=args.seed, max_workers=args.workers)
    out_path = write_results(rows, Path(args.results_dir))

    tally = {"X": 0, "O": 0, "D": 0}
    for r in rows:
        tally[str(r["winner"])] += 1

    print(f"\n=== {args.x_kind} (X) vs {args.o_kind} (O), {len(rows)} games ===")
    print(f"X wins:    {tally['X']}")
    print(f"O wins:    {tally['O']}")
    print(f"Draws:     {tally['D']}")
    print(f"\nSaved results to: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
