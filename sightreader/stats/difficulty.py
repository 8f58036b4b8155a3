from __future__ import annotations

"""Per-note difficulty derived from attempt histories.

A note's badness is the mean policy badness over its history. Notes with
fewer than ``min_sample_size`` attempts are left unscored. Relative
difficulty places each scored note between the policy's best (0.0) and
worst (1.0) bounds over all scored notes, for colour scales and the like.
"""

from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional

import numpy as np
import pandas as pd

from .history import AttemptHistory
from .schema import Attempt
from ..theory.clef import Clef
from ..theory.note_utils import note_name

if TYPE_CHECKING:  # pragma: no cover
    from ..policy.scoring import ScoringPolicy

REPORT_COLUMNS = ["note", "key", "name", "staff", "samples", "badness", "description", "relative"]


def history_badness(history: List[Attempt], policy: ScoringPolicy) -> Optional[float]:
    """Mean guess badness over ``history``; None when it is empty."""
    if not history:
        return None
    return float(np.mean([policy.guess_badness(a) for a in history]))


def item_badness(
    store: AttemptHistory,
    keys: Iterable[Hashable],
    policy: ScoringPolicy,
    min_sample_size: int = 1,
) -> Dict[Hashable, float]:
    """History badness for every key with at least ``min_sample_size`` attempts."""
    out: Dict[Hashable, float] = {}
    for key in keys:
        history = store.get(key)
        if not history or len(history) < min_sample_size:
            continue
        value = history_badness(history, policy)
        if value is not None:
            out[key] = value
    return out


def relative_difficulty(value: float, worst: float, best: float) -> float:
    """0.0 at ``best``, 1.0 at ``worst``, clipped; 0.0 if the bounds coincide."""
    span = worst - best
    if span == 0:
        return 0.0
    return float(np.clip((value - best) / span, 0.0, 1.0))


def difficulty_frame(
    store: AttemptHistory,
    clef: Clef,
    extra_bars: int,
    policy: ScoringPolicy,
    min_sample_size: int = 1,
) -> pd.DataFrame:
    """One row per addressable note of ``clef``, lowest first.

    Columns: note, key, name, staff, samples, badness, description, relative.
    Unscored rows carry NaN badness/relative and an empty description.
    """
    notes = clef.notes(extra_bars)
    keys = [clef.encode_note(n) for n in notes]
    scored = item_badness(store, keys, policy, min_sample_size)

    rows = []
    for note, key in zip(notes, keys):
        badness = scored.get(key)
        rows.append(
            {
                "note": note,
                "key": key,
                "name": note_name(note),
                "staff": clef.staff_for(note),
                "samples": len(store.get(key)),
                "badness": np.nan if badness is None else badness,
                "description": "" if badness is None else policy.description(badness),
            }
        )
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS[:-1])
    df["badness"] = df["badness"].astype("float64")

    if scored:
        values = list(scored.values())
        worst = policy.worst_badness(values)
        best = policy.best_badness(values)
        df["relative"] = df["badness"].map(
            lambda v: np.nan if pd.isna(v) else relative_difficulty(v, worst, best)
        ).astype("float64")
    else:
        df["relative"] = pd.Series(np.nan, index=df.index, dtype="float64")
    return df[REPORT_COLUMNS]
