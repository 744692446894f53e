# keypad_solver/types.py
# Core data structures for the keypad chain optimizer.
# Keep this file dependency-light so it can be imported everywhere.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


ACTIVATE = "A"

UP = "^"
DOWN = "v"
LEFT = "<"
RIGHT = ">"

DIGITS = "0123456789"


# ----------------------------
# Geometry
# ----------------------------

@dataclass(frozen=True, order=True)
class Position:
    """Grid cell, row 0 is the top row and col 0 the leftmost column."""
    row: int
    col: int

    def step(self, move: str) -> "Position":
        if move == UP:
            return Position(self.row - 1, self.col)
        if move == DOWN:
            return Position(self.row + 1, self.col)
        if move == LEFT:
            return Position(self.row, self.col - 1)
        if move == RIGHT:
            return Position(self.row, self.col + 1)
        raise ValueError(f"Not a move: {move!r}")


class KeypadKind(Enum):
    NUMERIC = "numeric"
    DIRECTIONAL = "directional"


# A route is a tuple of directional buttons, always ending with ACTIVATE.
Route = Tuple[str, ...]


# ----------------------------
# Errors
# ----------------------------

class KeypadError(ValueError):
    """Base class for all keypad optimizer errors."""


class InvalidButton(KeypadError):
    def __init__(self, kind: KeypadKind, button: str):
        self.kind = kind
        self.button = button
        super().__init__(f"Invalid {kind.value} keypad button: {button!r}")


class NoValidRoute(KeypadError):
    def __init__(self, kind: KeypadKind, source: str, target: str):
        self.kind = kind
        self.source = source
        self.target = target
        super().__init__(
            f"No valid route on {kind.value} keypad from {source!r} to {target!r} (both cross the gap)"
        )


class MalformedCode(KeypadError):
    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Malformed code {code!r}: {reason}")


# ----------------------------
# Outputs
# ----------------------------

@dataclass(frozen=True)
class CodeCost:
    """Cost breakdown of one code."""
    code: str
    navigation_cost: int
    numeric_value: int

    @property
    def complexity(self) -> int:
        return self.navigation_cost * self.numeric_value


@dataclass
class CodesCost:
    """Cost breakdown of a whole code list at one depth."""
    robots: int
    codes: List[CodeCost] = field(default_factory=list)

    def total_navigation_cost(self) -> int:
        return sum(c.navigation_cost for c in self.codes)

    def total_complexity(self) -> int:
        return sum(c.complexity for c in self.codes)


# ----------------------------
# Helper utilities
# ----------------------------

def is_digit_button(button: str) -> bool:
    return len(button) == 1 and button in DIGITS


def pairwise_from_activate(buttons) -> List[Tuple[str, str]]:
    """
    Consecutive pairs of ['A'] + buttons.
    The leading 'A' is where every hand rests before its first press.
    """
    seq = [ACTIVATE] + list(buttons)
    return list(zip(seq, seq[1:]))
