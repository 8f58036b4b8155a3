"""sightreader package initialization.

Per-note attempt history, scoring policies and clef key spaces for staff
note-reading practice.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .stats.schema import Attempt
from .stats.history import AttemptHistory
from .policy.scoring import AccuracyPolicy, SpeedPolicy, make_policy
from .theory.clef import BASS, BOTH, TREBLE, get_clef

__all__ = [
    "__version__",
    "Attempt",
    "AttemptHistory",
    "AccuracyPolicy",
    "SpeedPolicy",
    "make_policy",
    "TREBLE",
    "BASS",
    "BOTH",
    "get_clef",
]
