from __future__ import annotations

import random
from typing import Optional

from connect4.ai.base import Agent
from connect4.types import Difficulty

AGENT_KINDS = ("easy", "hard", "random")


def make_agent(kind: Difficulty | str, rng: Optional[random.Random] = None) -> Agent:
    """
    Build the search agent for a difficulty tier.
    "random" is a baseline used by the benchmark only.
    """
    from connect4.ai.astar_agent import BestFirstAgent
    from connect4.ai.minimax_agent import MinimaxAgent
    from connect4.ai.random_agent import RandomAgent

    rng = rng or random.Random()

    if kind == "easy":
        return BestFirstAgent(rng=rng)
    if kind == "hard":
        return MinimaxAgent()
    if kind == "random":
        return RandomAgent(rng=rng)

    raise ValueError(f"Unknown agent kind: {kind!r}. Expected one of {', '.join(AGENT_KINDS)}.")
