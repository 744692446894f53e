# keypad_solver/__init__.py
"""
Keypad chain optimizer.

A human types a door code on a numeric keypad only indirectly: through a chain of
robots, each operated from a directional keypad one level up. This package computes
the fewest presses the human needs.

Current state:
- fixed numeric + directional layouts with their gap cells
- route candidates (vertical-first / horizontal-first, gap-free)
- memoized recursive cost per (level, source, target) with dense per-level tables
- bottom-up table fill, optimal press expansion for short chains
- per-code complexity aggregation (optionally threaded)
- matplotlib drawing of both keypads with routes
"""

from .types import (
    Position,
    KeypadKind,
    Route,
    KeypadError,
    InvalidButton,
    NoValidRoute,
    MalformedCode,
    CodeCost,
    CodesCost,
)

from .layout import (
    position_of,
    gap_of,
    buttons_of,
    button_at,
    kind_for_pair,
)

from .routes import (
    candidate_routes,
    routes_for_pair,
)

from .cost_cache import CostCache

from .evaluator import (
    CostEvaluator,
    min_presses,
)

from .costing import (
    parse_code,
    navigation_cost,
    compute_code_cost,
    compute_codes_cost,
    complexity_total,
    expand_code,
)

__all__ = [
    # types
    "Position",
    "KeypadKind",
    "Route",
    "KeypadError",
    "InvalidButton",
    "NoValidRoute",
    "MalformedCode",
    "CodeCost",
    "CodesCost",
    # layout
    "position_of",
    "gap_of",
    "buttons_of",
    "button_at",
    "kind_for_pair",
    # routes
    "candidate_routes",
    "routes_for_pair",
    # evaluator
    "CostCache",
    "CostEvaluator",
    "min_presses",
    # costing
    "parse_code",
    "navigation_cost",
    "compute_code_cost",
    "compute_codes_cost",
    "complexity_total",
    "expand_code",
]
