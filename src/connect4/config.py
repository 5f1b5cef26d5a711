# src/connect4/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so AI moves aren’t instant

# Hard mode search depth (plies below the AI's trial move)
MAX_DEPTH = 4

# Logging
LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Benchmark output
RESULTS_DIR = "data/results"
