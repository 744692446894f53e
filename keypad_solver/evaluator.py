# keypad_solver/evaluator.py
# Recursive cost evaluator for a chain of keypad robots.
#
# cost(level, source, target) = fewest presses at the top of the chain needed to move
# the pointer at this level from `source` to `target` and press it.
#   - level 0: the press happens directly -> 1
#   - level L: pick a route on this keypad; every button of that route (starting from
#     the resting 'A') must itself be pressed one level up -> sum of cost(L-1, ...)
#
# Each level only depends on level-1, so the call graph is a DAG and memoization on
# (level, source, target) makes deep chains linear in the number of levels.

from __future__ import annotations

from typing import List, Optional

from .config import DEFAULTS
from .cost_cache import CostCache
from .layout import buttons_of, kind_for_pair
from .logger import get_logger
from .routes import candidate_routes
from .types import KeypadKind, Route, pairwise_from_activate


class CostEvaluator:
    """
    Top-down memoized evaluator.
    The cache is passed in (or created) explicitly so several evaluators or worker
    threads can share it.
    """

    def __init__(self, cache: Optional[CostCache] = None):
        self.cache = cache if cache is not None else CostCache()

    def cost(self, level: int, source: str, target: str) -> int:
        if level < 0:
            raise ValueError(f"level must be >= 0, got {level}")
        if level == 0:
            return 1

        # Resolving routes first turns unknown buttons into InvalidButton.
        routes = candidate_routes(kind_for_pair(source, target), source, target)
        cached = self.cache.get(level, source, target)
        if cached is not None:
            return cached

        best = min(self.route_cost(level - 1, r) for r in routes)
        self.cache.put(level, source, target, best)
        return best

    def route_cost(self, level: int, route: Route) -> int:
        """Presses needed to type `route` when each of its buttons is evaluated at `level`."""
        return sum(self.cost(level, a, b) for a, b in pairwise_from_activate(route))

    def best_route(self, level: int, source: str, target: str) -> Route:
        """The route chosen at `level` (first candidate wins ties)."""
        if level < 1:
            raise ValueError(f"best_route needs level >= 1, got {level}")
        routes = candidate_routes(kind_for_pair(source, target), source, target)
        best = routes[0]
        best_cost = self.route_cost(level - 1, best)
        for r in routes[1:]:
            c = self.route_cost(level - 1, r)
            if c < best_cost:
                best, best_cost = r, c
        return best

    def expand_presses(self, level: int, source: str, target: str, *, max_level: Optional[int] = None) -> str:
        """
        Concrete press sequence at the top of the chain for one transition.
        len(result) == cost(level, source, target). The result grows exponentially with
        level, so it is refused above max_level (default: DEFAULTS.max_expand_level).
        """
        limit = DEFAULTS.max_expand_level if max_level is None else int(max_level)
        if level > limit:
            raise ValueError(f"Refusing to expand level {level} (> {limit}); use cost() instead")
        if level < 0:
            raise ValueError(f"level must be >= 0, got {level}")
        if level == 0:
            return target

        route = self.best_route(level, source, target)
        return "".join(self.expand_presses(level - 1, a, b, max_level=limit) for a, b in pairwise_from_activate(route))

    def fill_levels(self, max_level: int) -> int:
        """
        Bottom-up fill: every legal pair of both keypads for levels 1..max_level,
        one complete level before the next. Afterwards cost() for those levels is a
        pure cache read. Returns the number of entries written.
        """
        log = get_logger()
        written = 0
        pairs = _legal_pairs()
        for level in range(1, int(max_level) + 1):
            for source, target in pairs:
                if (level, source, target) in self.cache:
                    continue
                kind = kind_for_pair(source, target)
                value = min(self.route_cost(level - 1, r) for r in candidate_routes(kind, source, target))
                self.cache.put(level, source, target, value)
                written += 1
        log.info(f"Filled cost tables for levels 1..{max_level} ({written} new entries)")
        return written


def _legal_pairs() -> List[tuple]:
    out = []
    for kind in (KeypadKind.DIRECTIONAL, KeypadKind.NUMERIC):
        buttons = buttons_of(kind)
        for s in buttons:
            for t in buttons:
                if (s, t) not in out:
                    out.append((s, t))
    return out


def min_presses(level: int, source: str, target: str, cache: Optional[CostCache] = None) -> int:
    """Convenience wrapper around CostEvaluator(cache).cost(...)."""
    return CostEvaluator(cache).cost(level, source, target)
