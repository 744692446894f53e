# keypad_solver/debug.py
# Debug / inspection helpers:
# - pretty-print the route table of a keypad
# - per-code cost breakdown
# - show the concrete press sequence at every layer of a short chain

from __future__ import annotations

from typing import Optional

from .costing import expand_code
from .evaluator import CostEvaluator
from .layout import buttons_of
from .routes import candidate_routes, route_text
from .types import CodesCost, KeypadKind
from .validate import replay_presses


def print_route_table(kind: KeypadKind) -> None:
    buttons = buttons_of(kind)
    print(f"=== {kind.value} keypad routes ===")
    for s in buttons:
        for t in buttons:
            if s == t:
                continue
            routes = " | ".join(route_text(r) for r in candidate_routes(kind, s, t))
            print(f"{s} -> {t}: {routes}")


def print_codes_cost(res: CodesCost) -> None:
    print(f"Robots: {res.robots}")
    for c in res.codes:
        print(f"  {c.code:>6s}: presses={c.navigation_cost:,} x {c.numeric_value} = {c.complexity:,}")
    print(f"TOTAL COMPLEXITY: {res.total_complexity():,}")


def print_expansion(code: str, robots: int, evaluator: Optional[CostEvaluator] = None) -> None:
    """Print the press sequence seen at each pad, from the human down to the numeric keypad."""
    seq = expand_code(code, robots, evaluator)
    print(f"=== {code} through {robots} robots ===")
    print(f"human   ({len(seq):>4d}): {seq}")
    for i in range(robots):
        seq = replay_presses(seq, KeypadKind.DIRECTIONAL)
        print(f"robot {robots - i} ({len(seq):>4d}): {seq}")
    print(f"numeric ({len(code):>4d}): {replay_presses(seq, KeypadKind.NUMERIC)}")
