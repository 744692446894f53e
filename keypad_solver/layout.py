# keypad_solver/layout.py
# Static geometry of the two keypads.
#
# Numeric keypad (gap bottom-left):     Directional keypad (gap top-left):
#   7 8 9                                   . ^ A
#   4 5 6                                   < v >
#   1 2 3
#   . 0 A

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .types import (
    ACTIVATE,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    InvalidButton,
    KeypadKind,
    Position,
    is_digit_button,
)


_NUMERIC_ROWS = ("789", "456", "123", " 0A")
_DIRECTIONAL_ROWS = (" " + UP + ACTIVATE, LEFT + DOWN + RIGHT)


def _build(rows: Tuple[str, ...]) -> Tuple[Dict[str, Position], Position]:
    positions: Dict[str, Position] = {}
    gap: Optional[Position] = None
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch == " ":
                gap = Position(r, c)
            else:
                positions[ch] = Position(r, c)
    if gap is None:
        raise ValueError("Keypad layout has no gap cell")
    return positions, gap


_POSITIONS: Dict[KeypadKind, Dict[str, Position]] = {}
_GAPS: Dict[KeypadKind, Position] = {}
_SHAPES: Dict[KeypadKind, Tuple[int, int]] = {}

for _kind, _rows in ((KeypadKind.NUMERIC, _NUMERIC_ROWS), (KeypadKind.DIRECTIONAL, _DIRECTIONAL_ROWS)):
    _POSITIONS[_kind], _GAPS[_kind] = _build(_rows)
    _SHAPES[_kind] = (len(_rows), len(_rows[0]))


def position_of(kind: KeypadKind, button: str) -> Position:
    try:
        return _POSITIONS[kind][button]
    except KeyError:
        raise InvalidButton(kind, button) from None


def gap_of(kind: KeypadKind) -> Position:
    return _GAPS[kind]


def shape_of(kind: KeypadKind) -> Tuple[int, int]:
    """(rows, cols) of the keypad grid, gap included."""
    return _SHAPES[kind]


def buttons_of(kind: KeypadKind) -> Tuple[str, ...]:
    """Alphabet of a keypad in reading order (top-left to bottom-right)."""
    return tuple(sorted(_POSITIONS[kind], key=lambda b: _POSITIONS[kind][b]))


def button_at(kind: KeypadKind, pos: Position) -> Optional[str]:
    """Reverse lookup. None for the gap and for cells off the grid."""
    for button, p in _POSITIONS[kind].items():
        if p == pos:
            return button
    return None


def kind_for_pair(source: str, target: str) -> KeypadKind:
    """Numeric layout when either endpoint is a digit, directional otherwise."""
    if is_digit_button(source) or is_digit_button(target):
        return KeypadKind.NUMERIC
    return KeypadKind.DIRECTIONAL
