from .schema import Attempt
from .history import AttemptHistory
from .difficulty import (
    REPORT_COLUMNS,
    difficulty_frame,
    history_badness,
    item_badness,
    relative_difficulty,
)
from .io import export_report, load_attempts, replay_attempts

__all__ = [
    "Attempt",
    "AttemptHistory",
    "REPORT_COLUMNS",
    "difficulty_frame",
    "history_badness",
    "item_badness",
    "relative_difficulty",
    "export_report",
    "load_attempts",
    "replay_attempts",
]
