# keypad_solver/test_evaluator.py
# Cost evaluator and cache tests. Run with pytest or:
#   python -m keypad_solver.test_evaluator

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from keypad_solver.cost_cache import ALPHABET, CostCache
from keypad_solver.evaluator import CostEvaluator, min_presses
from keypad_solver.layout import buttons_of
from keypad_solver.logger import muted
from keypad_solver.types import InvalidButton, KeypadKind
from keypad_solver.validate import raise_on_errors, validate_cost_table


def _all_pairs():
    for kind in (KeypadKind.NUMERIC, KeypadKind.DIRECTIONAL):
        for s in buttons_of(kind):
            for t in buttons_of(kind):
                yield s, t


def test_base_case_and_self_transition() -> None:
    ev = CostEvaluator()
    for s, t in _all_pairs():
        assert ev.cost(0, s, t) == 1
    for level in range(0, 10):
        for b in ALPHABET:
            assert ev.cost(level, b, b) == 1


def test_known_small_costs() -> None:
    ev = CostEvaluator()
    # level 1 is the route length
    assert ev.cost(1, "A", "0") == 2
    assert ev.cost(1, "A", "<") == 4
    assert ev.cost(1, "2", "9") == 4
    # "v<<A" typed one level up is "v<A<AA>>^A"
    assert ev.cost(2, "A", "<") == 10
    assert ev.best_route(2, "A", "<") == ("v", "<", "<", "A")


def test_monotone_in_level() -> None:
    ev = CostEvaluator()
    issues = validate_cost_table(ev, 12)
    raise_on_errors(issues)
    for s, t in _all_pairs():
        for level in range(0, 12):
            assert ev.cost(level + 1, s, t) >= ev.cost(level, s, t)


def test_deterministic_with_and_without_cache() -> None:
    shared = CostEvaluator()
    first = shared.cost(25, "A", "7")
    assert shared.cost(25, "A", "7") == first
    assert CostEvaluator().cost(25, "A", "7") == first
    assert min_presses(25, "A", "7") == first
    # deep levels need big integers; Python ints just keep growing
    assert CostEvaluator().cost(60, "A", "7") > 2 ** 63


def test_bottom_up_matches_top_down() -> None:
    bottom_up = CostEvaluator()
    with muted():
        written = bottom_up.fill_levels(10)
    assert written > 0
    top_down = CostEvaluator()
    for s, t in _all_pairs():
        for level in range(1, 11):
            assert (level, s, t) in bottom_up.cache
            assert bottom_up.cache.get(level, s, t) == top_down.cost(level, s, t)

    # a second fill has nothing left to write
    with muted():
        assert bottom_up.fill_levels(10) == 0


def test_cache_table() -> None:
    cache = CostCache()
    assert cache.get(3, "A", "<") is None
    cache.put(3, "A", "<", 21)
    assert cache.get(3, "A", "<") == 21
    assert (3, "A", "<") in cache
    assert (2, "A", "<") not in cache
    assert len(cache) == 1
    assert cache.max_level() == 3

    # idempotent write is fine, a different value is not
    cache.put(3, "A", "<", 21)
    try:
        cache.put(3, "A", "<", 22)
    except ValueError:
        pass
    else:
        raise AssertionError("conflicting write accepted")

    entries, hits, misses = cache.stats()
    assert (entries, hits, misses) == (1, 1, 1)
    cache.clear()
    assert len(cache) == 0 and cache.max_level() == -1


def test_cache_counters_under_threads() -> None:
    cache = CostCache()
    cache.put(1, "A", "<", 4)

    def reader() -> None:
        for _ in range(2000):
            cache.get(1, "A", "<")
            cache.get(1, "A", ">")

    with ThreadPoolExecutor(max_workers=8) as pool:
        for f in [pool.submit(reader) for _ in range(8)]:
            f.result()

    assert cache.stats() == (1, 16000, 16000)


def test_evaluator_fills_shared_cache() -> None:
    cache = CostCache()
    ev = CostEvaluator(cache)
    ev.cost(3, "A", "0")
    assert (3, "A", "0") in cache
    assert (2, "A", "<") in cache
    assert CostEvaluator(cache).cost(3, "A", "0") == ev.cost(3, "A", "0")


def test_expand_presses() -> None:
    ev = CostEvaluator()
    assert ev.expand_presses(0, "A", "0") == "0"
    assert ev.expand_presses(1, "A", "0") == "<A"
    assert ev.expand_presses(2, "A", "<") == "v<A<AA>>^A"
    for level in range(0, 6):
        for s, t in (("A", "0"), ("9", "1"), ("A", "<"), ("v", "A")):
            assert len(ev.expand_presses(level, s, t)) == ev.cost(level, s, t)

    try:
        ev.expand_presses(30, "A", "0")
    except ValueError:
        pass
    else:
        raise AssertionError("deep expansion not refused")


def test_errors_propagate() -> None:
    ev = CostEvaluator()
    for s, t in (("A", "x"), ("^", "5"), ("B", "B")):
        try:
            ev.cost(3, s, t)
        except InvalidButton:
            pass
        else:
            raise AssertionError(f"{s!r}->{t!r} accepted")
    try:
        ev.cost(-1, "A", "0")
    except ValueError:
        pass
    else:
        raise AssertionError("negative level accepted")


def main() -> None:
    print("Running evaluator tests...")
    test_base_case_and_self_transition()
    test_known_small_costs()
    test_monotone_in_level()
    test_deterministic_with_and_without_cache()
    test_bottom_up_matches_top_down()
    test_cache_table()
    test_cache_counters_under_threads()
    test_evaluator_fills_shared_cache()
    test_expand_presses()
    test_errors_propagate()
    print("OK")


if __name__ == "__main__":
    main()
