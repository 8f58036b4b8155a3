from __future__ import annotations

"""Practice session: wires clef, scoring policy and attempt history.

The trial loop (note display, answer capture, timing) lives outside this
package. For each completed trial it calls ``record`` with the pitch shown
and the outcome, and gets back feedback to display.
"""

from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from ..config.config import Settings
from ..policy.scoring import ScoringPolicy, make_policy
from ..stats.difficulty import difficulty_frame, history_badness
from ..stats.history import AttemptHistory
from ..stats.schema import Attempt
from ..theory.clef import Clef, get_clef
from .explain import trace as xtrace


@dataclass(frozen=True)
class Feedback:
    key: str
    badness: float
    description: str
    history_badness: Optional[float]
    history_description: str
    samples: int


class PracticeSession:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.store = AttemptHistory()
        self.settings = settings or Settings()
        self.clef: Clef = get_clef(self.settings.clef)
        self.policy: ScoringPolicy = make_policy(self.settings.optimize_for, self.settings.bad_guess_time)

    def apply_settings(self, settings: Settings) -> None:
        """Swap clef, policy and capacity. Histories are kept as they are."""
        self.settings = settings
        self.clef = get_clef(settings.clef)
        self.policy = make_policy(settings.optimize_for, settings.bad_guess_time)
        xtrace("settings_applied", {"clef": settings.clef, "policy": self.policy.id, "take_stats_over": settings.take_stats_over})

    def key_for(self, note: int) -> str:
        return self.clef.encode_note(note)

    def record(self, note: int, attempt: Attempt) -> Feedback:
        key = self.key_for(note)
        self.store.add(key, attempt, self.settings.take_stats_over)
        history = self.store.get(key)
        badness = self.policy.guess_badness(attempt)
        overall = history_badness(history, self.policy)
        xtrace(
            "attempt_recorded",
            {"key": key, "failed": attempt.failed, "duration": attempt.duration, "badness": badness, "samples": len(history)},
        )
        return Feedback(
            key=key,
            badness=badness,
            description=self.policy.description(badness),
            history_badness=overall,
            history_description="" if overall is None else self.policy.description(overall),
            samples=len(history),
        )

    def history(self, note: int) -> List[Attempt]:
        return self.store.get(self.key_for(note))

    def report(self) -> pd.DataFrame:
        return difficulty_frame(
            self.store,
            self.clef,
            self.settings.extra_bars,
            self.policy,
            self.settings.min_sample_size,
        )

    def reset(self) -> None:
        self.store.clear()
