from __future__ import annotations

"""Scoring policies: turn attempts into badness and badness into text.

Lower badness is better. ``accuracy`` scores a miss as 1 and a hit as 0 with
fixed bounds; ``speed`` scores by response time, charging ``bad_guess_time``
for a miss, and takes its bounds from the observed sample.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Protocol, Tuple

from ..stats.schema import Attempt

POLICY_IDS: Tuple[str, ...] = ("accuracy", "speed")


class ScoringPolicy(Protocol):
    id: str

    def guess_badness(self, attempt: Attempt) -> float: ...

    def description(self, score: float) -> str: ...

    def worst_badness(self, scores: Iterable[float]) -> float: ...

    def best_badness(self, scores: Iterable[float]) -> float: ...


@dataclass(frozen=True)
class AccuracyPolicy:
    """Miss → 1, hit → 0. Described as a success percentage."""

    id: str = "accuracy"

    def guess_badness(self, attempt: Attempt) -> float:
        return 1.0 if attempt.failed else 0.0

    def description(self, score: float) -> str:
        return _to_fixed(100 - 100 * score, 0) + "%"

    def worst_badness(self, scores: Iterable[float]) -> float:
        return 1.0

    def best_badness(self, scores: Iterable[float]) -> float:
        return 0.0


@dataclass(frozen=True)
class SpeedPolicy:
    """Miss → ``bad_guess_time``; hit → its duration, capped at ``bad_guess_time``.

    The cap keeps a slow correct answer from scoring worse than a miss.
    """

    bad_guess_time: float = 10.0
    id: str = "speed"

    def guess_badness(self, attempt: Attempt) -> float:
        if attempt.failed:
            return float(self.bad_guess_time)
        return float(min(self.bad_guess_time, attempt.duration))

    def description(self, score: float) -> str:
        return _to_fixed(score, 2) + "s"

    def worst_badness(self, scores: Iterable[float]) -> float:
        return max(_non_empty(scores))

    def best_badness(self, scores: Iterable[float]) -> float:
        return min(_non_empty(scores))


def _to_fixed(value: float, digits: int) -> str:
    """Fixed-point text with .5 rounded away from zero, e.g. 62.5 -> "63"."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def _non_empty(scores: Iterable[float]) -> List[float]:
    values = [float(s) for s in scores]
    if not values:
        raise ValueError("speed policy bounds need at least one score")
    return values


def make_policy(policy_id: str, bad_guess_time: float = 10.0) -> ScoringPolicy:
    """Factory for the configured policy. Unknown ids raise ``KeyError``."""
    if policy_id == "accuracy":
        return AccuracyPolicy()
    if policy_id == "speed":
        return SpeedPolicy(bad_guess_time=float(bad_guess_time))
    raise KeyError(f"Unknown scoring policy: {policy_id}")
