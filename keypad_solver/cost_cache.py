# keypad_solver/cost_cache.py
# Memo table for "cost of one transition at one level" results.
#
# Why:
# The evaluator asks for the same (level, source, target) triple over and over.
# Without caching, 26 levels means exponential tree recursion.
# With caching, each triple is computed once => a few thousand additions.
#
# Design:
# - Key = (level, source, target)
# - The alphabet is tiny and fixed (15 buttons over both keypads), so each level is a
#   dense 15x15 table (flat list) instead of a dict of tuples.
# - Entries are never evicted or overwritten with a different value: the cost of a
#   transition at a given level is a constant. Reads, writes and the hit/miss counters
#   take one lock so worker threads can share a cache; a duplicate write stores the same number again.

from __future__ import annotations

import threading
from typing import Dict, List, Optional, Tuple

from .types import ACTIVATE, DIGITS, DOWN, LEFT, RIGHT, UP


ALPHABET: Tuple[str, ...] = tuple(DIGITS) + (ACTIVATE, UP, DOWN, LEFT, RIGHT)
_INDEX: Dict[str, int] = {b: i for i, b in enumerate(ALPHABET)}
_N = len(ALPHABET)


def button_index(button: str) -> int:
    try:
        return _INDEX[button]
    except KeyError:
        raise ValueError(f"Unknown keypad button: {button!r}") from None


class CostCache:
    """
    Per-level dense tables of transition costs.
    Grows monotonically; levels are allocated on first write.
    """

    def __init__(self) -> None:
        self._levels: List[List[Optional[int]]] = []
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def _slot(self, source: str, target: str) -> int:
        return button_index(source) * _N + button_index(target)

    def get(self, level: int, source: str, target: str) -> Optional[int]:
        slot = self._slot(source, target)
        with self._lock:
            if level >= len(self._levels):
                self.misses += 1
                return None
            res = self._levels[level][slot]
            if res is None:
                self.misses += 1
            else:
                self.hits += 1
            return res

    def put(self, level: int, source: str, target: str, value: int) -> None:
        if level < 0:
            raise ValueError(f"level must be >= 0, got {level}")
        slot = self._slot(source, target)
        with self._lock:
            while len(self._levels) <= level:
                self._levels.append([None] * (_N * _N))
            current = self._levels[level][slot]
            if current is not None and current != value:
                raise ValueError(
                    f"Conflicting cost for level={level} {source!r}->{target!r}: {current} vs {value}"
                )
            self._levels[level][slot] = int(value)

    def __contains__(self, key: Tuple[int, str, str]) -> bool:
        level, source, target = key
        if level >= len(self._levels):
            return False
        return self._levels[level][self._slot(source, target)] is not None

    def __len__(self) -> int:
        return sum(1 for table in self._levels for v in table if v is not None)

    def max_level(self) -> int:
        """Highest level with a table allocated, -1 when empty."""
        return len(self._levels) - 1

    def clear(self) -> None:
        with self._lock:
            self._levels.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> Tuple[int, int, int]:
        """
        Returns (entries, hits, misses).
        """
        return (len(self), self.hits, self.misses)
