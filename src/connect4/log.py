from __future__ import annotations
import logging
import sys

from connect4.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: str | int = LOG_LEVEL) -> None:
    root = logging.getLogger("connect4")
    root.setLevel(level)

    # Re-running setup (tests, repeated main() calls) must not stack handlers
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
