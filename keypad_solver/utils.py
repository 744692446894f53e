# keypad_solver/utils.py
# Small utilities used across the project:
# - timing context manager
# - JSON export of cost results (per-code breakdown + totals)
#
# Keeps dependencies minimal (stdlib only).

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

from .types import CodesCost


@contextmanager
def timer(label: str = "timer") -> Iterator[Dict[str, float]]:
    """
    Usage:
      with timer("part2") as t:
          ...
      print(t["seconds"])
    """
    t0 = time.perf_counter()
    payload: Dict[str, float] = {}
    try:
        yield payload
    finally:
        payload["seconds"] = time.perf_counter() - t0


def result_to_dict(res: CodesCost) -> Dict[str, Any]:
    """
    Convert CodesCost to a JSON-friendly dict.
    """
    return {
        "robots": res.robots,
        "codes": [
            {
                "code": c.code,
                "navigation_cost": c.navigation_cost,
                "numeric_value": c.numeric_value,
                "complexity": c.complexity,
            }
            for c in res.codes
        ],
        "totals": {
            "navigation_cost": res.total_navigation_cost(),
            "complexity": res.total_complexity(),
        },
    }


def save_results_json(results: List[CodesCost], path: str | Path, *, indent: int = 2) -> None:
    """Save one or more results (one per chain depth) into JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"results": [result_to_dict(r) for r in results]}
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=indent)
