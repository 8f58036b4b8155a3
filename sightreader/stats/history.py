from __future__ import annotations

"""Bounded, most-recent-first attempt history per item key.

The capacity is passed on every write rather than fixed at construction,
so a settings change takes effect without rebuilding the store. Trimming is
lazy: a key holding more entries than a newly lowered capacity keeps them
until that key is written again.

Not thread-safe; writes are expected from a single trial loop.
"""

from collections import deque
from typing import Deque, Dict, Hashable, Iterator, List

from .schema import Attempt
from ..app.explain import trace as xtrace


class AttemptHistory:
    def __init__(self) -> None:
        self._values: Dict[Hashable, Deque[Attempt]] = {}

    def add(self, key: Hashable, attempt: Attempt, evict_over: int) -> None:
        """Prepend ``attempt`` and drop the oldest entries beyond ``evict_over``."""
        if evict_over < 0:
            raise ValueError(f"evict_over must be >= 0, got {evict_over}")
        values = self._values.setdefault(key, deque())
        values.appendleft(attempt)
        dropped = 0
        while len(values) > evict_over:
            values.pop()
            dropped += 1
        if dropped:
            xtrace("history_trimmed", {"key": str(key), "dropped": dropped, "kept": len(values)})

    def get(self, key: Hashable) -> List[Attempt]:
        """History for ``key``, newest first. Unseen keys give an empty list."""
        return list(self._values.get(key, ()))

    def clear(self) -> None:
        count = len(self._values)
        self._values.clear()
        xtrace("history_cleared", {"keys": count})

    def keys(self) -> List[Hashable]:
        return list(self._values.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._values))
