from __future__ import annotations

"""NDJSON attempt logs in, difficulty reports out."""

from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from .schema import Attempt

if TYPE_CHECKING:  # pragma: no cover
    from ..app.session import PracticeSession

REQUIRED_COLUMNS = ["note", "failed"]


def load_attempts(path: Path) -> pd.DataFrame:
    """Read an attempt log: one ``{note, failed, duration}`` object per line, oldest first."""
    p = Path(path)
    if p.stat().st_size == 0:
        return pd.DataFrame({"note": pd.Series(dtype="int64"), "failed": pd.Series(dtype="bool"), "duration": pd.Series(dtype="float64")})
    df = pd.read_json(p, orient="records", lines=True)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Attempt log {p} is missing columns: {', '.join(missing)}")
    if "duration" not in df.columns:
        df["duration"] = 0.0
    df["duration"] = df["duration"].fillna(0.0).astype("float64")
    df["note"] = df["note"].astype("int64")
    if df["failed"].isna().any() or not pd.api.types.is_bool_dtype(df["failed"]):
        raise ValueError(f"Attempt log {p} has rows where 'failed' is missing or not true/false")
    return df[["note", "failed", "duration"]]


def replay_attempts(df: pd.DataFrame, session: "PracticeSession") -> int:
    """Record every row into ``session`` in file order. Returns the row count."""
    count = 0
    for row in df.itertuples(index=False):
        session.record(int(row.note), Attempt(failed=bool(row.failed), duration=float(row.duration)))
        count += 1
    return count


def export_report(df: pd.DataFrame, out_path: Path) -> None:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    df.to_json(out_path, orient="records", lines=True)
