# keypad_solver/routes.py
# Route candidate generator.
#
# A minimal route between two buttons is always |drow| + |dcol| moves. Only two
# orders are generated: all vertical moves first, or all horizontal moves first.
# Both have the same length here; which one wins is decided by the evaluator one
# level up.

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, List, Sequence, Tuple

from .layout import gap_of, kind_for_pair, position_of
from .types import (
    ACTIVATE,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    KeypadKind,
    NoValidRoute,
    Position,
    Route,
)


def walk(start: Position, moves: Sequence[str]) -> Iterator[Position]:
    """Yield every cell visited after each move (start excluded, ACTIVATE ignored)."""
    pos = start
    for m in moves:
        if m == ACTIVATE:
            continue
        pos = pos.step(m)
        yield pos


def crosses_gap(kind: KeypadKind, start: Position, moves: Sequence[str]) -> bool:
    gap = gap_of(kind)
    return any(p == gap for p in walk(start, moves))


def _axis_moves(src: Position, dst: Position) -> Tuple[List[str], List[str]]:
    drow = dst.row - src.row
    dcol = dst.col - src.col
    vertical = [DOWN if drow > 0 else UP] * abs(drow)
    horizontal = [RIGHT if dcol > 0 else LEFT] * abs(dcol)
    return vertical, horizontal


@lru_cache(maxsize=None)
def candidate_routes(kind: KeypadKind, source: str, target: str) -> Tuple[Route, ...]:
    """
    Minimal gap-free routes from source to target on the given keypad.
    Returns 1 or 2 routes, vertical-first before horizontal-first, each ending in 'A'.
    """
    src = position_of(kind, source)
    dst = position_of(kind, target)

    vertical, horizontal = _axis_moves(src, dst)
    vertical_first = tuple(vertical + horizontal + [ACTIVATE])
    horizontal_first = tuple(horizontal + vertical + [ACTIVATE])

    out: List[Route] = []
    for route in (vertical_first, horizontal_first):
        if route in out:
            continue
        if crosses_gap(kind, src, route):
            continue
        out.append(route)

    if not out:
        raise NoValidRoute(kind, source, target)
    return tuple(out)


def routes_for_pair(source: str, target: str) -> Tuple[Route, ...]:
    """Same as candidate_routes, with the keypad kind resolved from the buttons."""
    return candidate_routes(kind_for_pair(source, target), source, target)


def route_text(route: Route) -> str:
    return "".join(route)
