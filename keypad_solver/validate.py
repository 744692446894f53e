# keypad_solver/validate.py
# Validation utilities:
# - check every generated route stays off the gap and ends with 'A'
# - check the cost table against its basic laws (base case, self transition, monotone in level)
# - replay a press sequence through the keypads to see what it actually types
#
# Useful both during development and to sanity-check optimizer output.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .evaluator import CostEvaluator
from .layout import button_at, buttons_of, gap_of, position_of
from .routes import candidate_routes, walk
from .types import ACTIVATE, KeypadKind, KeypadError


@dataclass(frozen=True)
class ValidationIssue:
    level: str   # "ERROR" or "WARN"
    message: str
    kind: Optional[KeypadKind] = None
    source: Optional[str] = None
    target: Optional[str] = None


def validate_routes(kind: KeypadKind) -> List[ValidationIssue]:
    """Check the candidate routes of every ordered button pair on one keypad."""
    issues: List[ValidationIssue] = []
    gap = gap_of(kind)
    buttons = buttons_of(kind)

    for s in buttons:
        for t in buttons:
            try:
                routes = candidate_routes(kind, s, t)
            except KeypadError as e:
                issues.append(ValidationIssue(level="ERROR", message=str(e), kind=kind, source=s, target=t))
                continue

            src = position_of(kind, s)
            dst = position_of(kind, t)
            manhattan = abs(dst.row - src.row) + abs(dst.col - src.col)

            for r in routes:
                if not r or r[-1] != ACTIVATE:
                    issues.append(
                        ValidationIssue(level="ERROR", message=f"Route {r} does not end with 'A'", kind=kind, source=s, target=t)
                    )
                if ACTIVATE in r[:-1]:
                    issues.append(
                        ValidationIssue(level="ERROR", message=f"Route {r} presses 'A' before the end", kind=kind, source=s, target=t)
                    )
                visited = list(walk(src, r))
                if gap in visited:
                    issues.append(
                        ValidationIssue(level="ERROR", message=f"Route {r} crosses the gap {gap}", kind=kind, source=s, target=t)
                    )
                if (visited[-1] if visited else src) != dst:
                    issues.append(
                        ValidationIssue(level="ERROR", message=f"Route {r} does not end on {t!r}", kind=kind, source=s, target=t)
                    )
                if len(r) - 1 != manhattan:
                    issues.append(
                        ValidationIssue(
                            level="ERROR",
                            message=f"Route {r} has {len(r) - 1} moves, expected {manhattan}",
                            kind=kind,
                            source=s,
                            target=t,
                        )
                    )
            if len(routes) > 1 and routes[0] == routes[1]:
                issues.append(ValidationIssue(level="WARN", message="Duplicate routes", kind=kind, source=s, target=t))

    return issues


def validate_cost_table(evaluator: CostEvaluator, max_level: int) -> List[ValidationIssue]:
    """
    Check cost(0, x, y) == 1, cost(L, x, x) == 1 and cost(L+1, x, y) >= cost(L, x, y)
    for every legal pair of both keypads up to max_level.
    """
    issues: List[ValidationIssue] = []
    for kind in (KeypadKind.NUMERIC, KeypadKind.DIRECTIONAL):
        buttons = buttons_of(kind)
        for s in buttons:
            for t in buttons:
                prev = evaluator.cost(0, s, t)
                if prev != 1:
                    issues.append(
                        ValidationIssue(level="ERROR", message=f"cost(0) = {prev}, expected 1", kind=kind, source=s, target=t)
                    )
                for level in range(1, int(max_level) + 1):
                    cur = evaluator.cost(level, s, t)
                    if s == t and cur != 1:
                        issues.append(
                            ValidationIssue(
                                level="ERROR", message=f"cost({level}) of self transition = {cur}", kind=kind, source=s, target=t
                            )
                        )
                    if cur < prev:
                        issues.append(
                            ValidationIssue(
                                level="ERROR",
                                message=f"cost({level}) = {cur} < cost({level - 1}) = {prev}",
                                kind=kind,
                                source=s,
                                target=t,
                            )
                        )
                    prev = cur
    return issues


def replay_presses(presses: str, kind: KeypadKind) -> str:
    """
    Decode one layer: the buttons a robot at `kind` keypad presses when driven by
    `presses` (typed on the directional pad above it). The pointer starts on 'A'.
    Raises ValueError if the pointer enters the gap or leaves the keypad.
    """
    gap = gap_of(kind)
    pos = position_of(kind, ACTIVATE)
    out: List[str] = []
    for i, ch in enumerate(presses):
        if ch == ACTIVATE:
            out.append(button_at(kind, pos))
            continue
        pos = pos.step(ch)
        if pos == gap or button_at(kind, pos) is None:
            raise ValueError(f"Press #{i} ({ch!r}) moves the {kind.value} pointer off the keys to {pos}")
    return "".join(out)


def replay_chain(presses: str, robots: int) -> str:
    """Decode a top-level press sequence through `robots` directional pads and the numeric keypad."""
    seq = presses
    for _ in range(int(robots)):
        seq = replay_presses(seq, KeypadKind.DIRECTIONAL)
    return replay_presses(seq, KeypadKind.NUMERIC)


def raise_on_errors(issues: List[ValidationIssue]) -> None:
    errs = [i for i in issues if i.level.upper() == "ERROR"]
    if errs:
        msg = "\n".join(
            f"[{e.level}] {e.kind.value if e.kind else '-'} {e.source!r}->{e.target!r} :: {e.message}" for e in errs
        )
        raise ValueError("Validation failed:\n" + msg)
