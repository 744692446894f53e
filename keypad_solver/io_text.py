# keypad_solver/io_text.py
# Load door codes from plain text: one code per line.
#
# Expected shape:
#   029A
#   980A
#   179A
#
# Surrounding whitespace is stripped and blank lines are skipped. Codes are not
# validated here; costing.parse_code does that before any evaluation.

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, TextIO


def parse_codes(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip() != ""]


def load_codes(path: str | Path) -> List[str]:
    """Read codes from a text file (UTF-8)."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return parse_codes(f.read())


def read_codes(stream: Optional[TextIO] = None) -> List[str]:
    """Read codes from a stream (stdin by default)."""
    stream = stream if stream is not None else sys.stdin
    return parse_codes(stream.read())


def dump_codes(codes: List[str], path: str | Path) -> None:
    """Write codes back out, one per line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for c in codes:
            f.write(f"{c}\n")
