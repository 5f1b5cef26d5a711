from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def add_per_move_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-move averages for each side. X moves first, so it plays
    ceil(moves / 2) times and O plays floor(moves / 2).
    """
    _require_cols(df, ["moves", "x_time_ms", "o_time_ms", "x_nodes", "o_nodes"])
    out = df.copy()

    x_moves = (out["moves"] + 1) // 2
    o_moves = (out["moves"] // 2).where(out["moves"] >= 2, 1)

    out["x_ms_per_move"] = out["x_time_ms"] / x_moves.where(x_moves > 0, 1)
    out["o_ms_per_move"] = out["o_time_ms"] / o_moves
    out["o_nodes_per_move"] = out["o_nodes"] / o_moves
    return out


def summarize_matchups(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (x_agent, o_agent) pairing with win rates and search cost."""
    _require_cols(df, ["x_agent", "o_agent", "winner", "moves"])
    d = add_per_move_columns(df)
    d["x_win"] = (d["winner"] == "X").astype(float)
    d["o_win"] = (d["winner"] == "O").astype(float)
    d["draw"] = (d["winner"] == "D").astype(float)

    grp = (
        d.groupby(["x_agent", "o_agent"], dropna=False)
        .agg(
            games=("winner", "count"),
            x_win_rate=("x_win", "mean"),
            o_win_rate=("o_win", "mean"),
            draw_rate=("draw", "mean"),
            mean_moves=("moves", "mean"),
            o_ms_per_move=("o_ms_per_move", "mean"),
            o_nodes_per_move=("o_nodes_per_move", "mean"),
        )
        .sort_values("o_win_rate", ascending=False)
        .reset_index()
    )
    return grp


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
