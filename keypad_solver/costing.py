# keypad_solver/costing.py
# Code cost aggregation:
# - navigation cost of one code = presses at the top of the chain to type it
# - complexity of one code = navigation cost * numeric value of the code
# - total = sum of complexities over the code list
#
# Notes:
# - `robots` is the number of directional-pad robots between the human and the
#   robot standing at the numeric keypad (2 and 25 in the usual puzzle).
# - Every code is validated before any evaluation starts. One malformed code fails
#   the whole run with MalformedCode; no partial totals are returned.

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from .config import DEFAULTS, robots_to_level
from .cost_cache import CostCache
from .evaluator import CostEvaluator
from .logger import get_logger
from .types import CodeCost, CodesCost, MalformedCode, pairwise_from_activate


_CODE_RE = re.compile(r"([0-9]+)A")


def parse_code(code: str) -> int:
    """
    Numeric value of a code: '029A' -> 29.
    Raises MalformedCode unless the code is digits followed by a single trailing 'A'.
    """
    if not isinstance(code, str):
        raise MalformedCode(str(code), "not a string")
    if not code:
        raise MalformedCode(code, "empty code")
    m = _CODE_RE.fullmatch(code)
    if m is None:
        if not code.endswith("A"):
            raise MalformedCode(code, "must end with 'A'")
        if not code[:-1]:
            raise MalformedCode(code, "missing numeric prefix")
        raise MalformedCode(code, "only digits may precede the trailing 'A'")
    return int(m.group(1))


def navigation_cost(code: str, robots: int, evaluator: Optional[CostEvaluator] = None) -> int:
    """Presses at the top of the chain needed to type `code` on the numeric keypad."""
    parse_code(code)
    ev = evaluator or CostEvaluator()
    level = robots_to_level(robots)
    return sum(ev.cost(level, a, b) for a, b in pairwise_from_activate(code))


def compute_code_cost(code: str, robots: int, evaluator: Optional[CostEvaluator] = None) -> CodeCost:
    value = parse_code(code)
    return CodeCost(code=code, navigation_cost=navigation_cost(code, robots, evaluator), numeric_value=value)


def compute_codes_cost(
    codes: Iterable[str],
    robots: int,
    *,
    cache: Optional[CostCache] = None,
    workers: Optional[int] = None,
) -> CodesCost:
    """
    Evaluate every code against one shared cache.
    With workers > 1 the codes are evaluated concurrently; the result order still
    follows the input order.
    """
    code_list: List[str] = list(codes)
    for c in code_list:
        parse_code(c)

    evaluator = CostEvaluator(cache)
    n_workers = DEFAULTS.workers if workers is None else int(workers)
    if n_workers < 1:
        raise ValueError(f"workers must be >= 1, got {n_workers}")

    if n_workers == 1 or len(code_list) <= 1:
        per_code = [compute_code_cost(c, robots, evaluator) for c in code_list]
    else:
        with ThreadPoolExecutor(max_workers=n_workers) as pool:
            per_code = list(pool.map(lambda c: compute_code_cost(c, robots, evaluator), code_list))

    result = CodesCost(robots=int(robots), codes=per_code)
    entries, hits, misses = evaluator.cache.stats()
    get_logger().debug(
        f"robots={robots}: {len(per_code)} codes, cache entries={entries} hits={hits} misses={misses}"
    )
    return result


def complexity_total(
    codes: Iterable[str],
    robots: int,
    *,
    cache: Optional[CostCache] = None,
    workers: Optional[int] = None,
) -> int:
    """Sum of navigation_cost * numeric_value over all codes."""
    return compute_codes_cost(codes, robots, cache=cache, workers=workers).total_complexity()


def expand_code(code: str, robots: int, evaluator: Optional[CostEvaluator] = None) -> str:
    """
    One optimal top-level press sequence for `code`.
    Only practical for small robot counts (see CostEvaluator.expand_presses).
    """
    parse_code(code)
    ev = evaluator or CostEvaluator()
    level = robots_to_level(robots)
    return "".join(ev.expand_presses(level, a, b) for a, b in pairwise_from_activate(code))
