from __future__ import annotations

"""Session log summaries with pandas."""

from typing import Iterable, List

import pandas as pd

from ..results.schema import GameSessionRecord

COLUMNS = [
    "tactic_id",
    "difficulty",
    "start_time",
    "end_time",
    "duration_s",
    "items",
    "score",
    "accuracy",
]

SUMMARY_COLUMNS = ["tactic_id", "difficulty", "sessions", "best_score", "mean_accuracy", "last_played"]


def sessions_frame(records: Iterable[GameSessionRecord]) -> pd.DataFrame:
    """One row per session with UTC timestamps and a duration column."""
    rows = [
        {
            "tactic_id": r.tactic_id,
            "difficulty": r.difficulty.value,
            "start_time": r.start_time,
            "end_time": r.end_time,
            "items": len(r.items_to_memorize),
            "score": r.score,
            "accuracy": r.accuracy,
        }
        for r in records
    ]
    if not rows:
        return pd.DataFrame({c: pd.Series(dtype="object") for c in COLUMNS})
    df = pd.DataFrame(rows)
    df["duration_s"] = ((df["end_time"] - df["start_time"]) / 1000.0).astype("float32")
    df["start_time"] = pd.to_datetime(df["start_time"], unit="ms", utc=True)
    df["end_time"] = pd.to_datetime(df["end_time"], unit="ms", utc=True)
    return df[COLUMNS]


def summarize_sessions(df: pd.DataFrame) -> pd.DataFrame:
    """Per tactic x difficulty: session count, best score, mean accuracy, last played."""
    if df.empty:
        return pd.DataFrame({c: pd.Series(dtype="object") for c in SUMMARY_COLUMNS})
    out = (
        df.groupby(["tactic_id", "difficulty"], sort=True)
        .agg(
            sessions=("score", "size"),
            best_score=("score", "max"),
            mean_accuracy=("accuracy", "mean"),
            last_played=("end_time", "max"),
        )
        .reset_index()
    )
    out["mean_accuracy"] = out["mean_accuracy"].round(1)
    return out[SUMMARY_COLUMNS]


def query_trend(df: pd.DataFrame, *, tactic_id: str, difficulty: str | None = None) -> pd.DataFrame:
    """Sessions of one tactic ordered by start time."""
    dff = df[df["tactic_id"] == tactic_id]
    if difficulty is not None:
        dff = dff[dff["difficulty"].str.lower() == str(difficulty).lower()]
    return dff.sort_values("start_time").reset_index(drop=True)


def format_summary(summary: pd.DataFrame) -> str:
    """Return a human-readable summary table."""
    if summary.empty:
        return "No sessions recorded yet."
    lines: List[str] = []
    for row in summary.itertuples(index=False):
        lines.append(
            f"{row.tactic_id:<16} {row.difficulty:<12} sessions={row.sessions:<3} "
            f"best={row.best_score:<4} acc={row.mean_accuracy:.1f}%"
        )
    return "\n".join(lines)
