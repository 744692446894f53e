# keypad_solver/config.py
# Centralized defaults and configuration helpers.
# Keeps "magic numbers" (chain depths, worker count, expansion limit) in one place.

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Defaults:
    # Directional-pad robots between the human and the numeric-keypad robot
    robots_short: int = 2
    robots_long: int = 25

    # Threads used by the aggregator (1 = sequential)
    workers: int = 1

    # expand_presses() output doubles-ish per level; beyond this use cost() only
    max_expand_level: int = 8

    # Plotting
    plot_font_size: int = 14


DEFAULTS = Defaults()


def robots_to_level(robots: int) -> int:
    """
    Evaluator level for a chain with `robots` directional-pad robots.
    The numeric keypad transition is one more layer on top of the robots.
    """
    robots = int(robots)
    if robots < 0:
        raise ValueError(f"robots must be >= 0, got {robots}")
    return robots + 1


def parse_robots_text(robots_text: str) -> Tuple[int, ...]:
    """
    Parse '2,25' -> (2, 25)
    """
    vals = [v.strip() for v in robots_text.split(",") if v.strip() != ""]
    if not vals:
        raise ValueError("robots_text must be like '2' or '2,25'")
    out = tuple(int(v) for v in vals)
    for r in out:
        if r < 0:
            raise ValueError(f"robot count must be >= 0, got {r}")
    return out
