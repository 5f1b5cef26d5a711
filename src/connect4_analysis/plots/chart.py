from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outpath: Path, *, show: bool) -> None:
    if show:
        plt.show()
    else:
        _ensure_dir(outpath.parent)
        fig.savefig(outpath, dpi=200, bbox_inches="tight")
        plt.close(fig)


def plot_win_rates(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked bar per matchup: X wins, O wins, draws."""
    if summary.empty:
        return None

    labels = [f"{x} vs {o}" for x, o in zip(summary["x_agent"], summary["o_agent"])]
    x_rate = summary["x_win_rate"].astype(float)
    o_rate = summary["o_win_rate"].astype(float)
    d_rate = summary["draw_rate"].astype(float)

    fig = plt.figure(figsize=(8, 5))
    plt.bar(labels, x_rate, label="X wins")
    plt.bar(labels, o_rate, bottom=x_rate, label="O wins")
    plt.bar(labels, d_rate, bottom=x_rate + o_rate, label="draws")
    plt.title("Outcome rates by matchup")
    plt.xlabel("matchup (X vs O)")
    plt.ylabel("share of games")
    plt.ylim(0, 1)
    plt.xticks(rotation=30, ha="right")
    plt.legend()

    outpath = outdir / "win_rates.png"
    _finish(fig, outpath, show=show)
    return None if show else outpath


def plot_time_histogram(df: pd.DataFrame, outdir: Path, col: str = "o_ms_per_move", *, show: bool) -> Path | None:
    if col not in df.columns or not pd.api.types.is_numeric_dtype(df[col]):
        return None

    fig = plt.figure()
    for agent, sub in df.groupby("o_agent"):
        plt.hist(sub[col].dropna(), bins=30, alpha=0.6, label=str(agent))
    plt.title(f"Histogram: {col}")
    plt.xlabel(col)
    plt.ylabel("count")
    plt.legend()

    outpath = outdir / f"hist_{col}.png"
    _finish(fig, outpath, show=show)
    return None if show else outpath
