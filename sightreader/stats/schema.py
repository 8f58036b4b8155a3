from __future__ import annotations

"""Attempt record shared by the history store and scoring policies."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Attempt:
    """One completed trial: whether it failed and how long it took (seconds).

    ``duration`` is ignored by every policy when ``failed`` is true.
    """

    failed: bool
    duration: float = 0.0
