# keypad_solver/test_costing.py
# Code aggregation tests on the worked example. Run with pytest or:
#   python -m keypad_solver.test_costing

from __future__ import annotations

from keypad_solver.cost_cache import CostCache
from keypad_solver.costing import (
    complexity_total,
    compute_code_cost,
    compute_codes_cost,
    expand_code,
    navigation_cost,
    parse_code,
)
from keypad_solver.evaluator import CostEvaluator
from keypad_solver.types import MalformedCode
from keypad_solver.validate import replay_chain


EXAMPLE_CODES = ["029A", "980A", "179A", "456A", "379A"]
EXAMPLE_PRESSES_2_ROBOTS = {"029A": 68, "980A": 60, "179A": 68, "456A": 64, "379A": 64}


def test_parse_code() -> None:
    assert parse_code("029A") == 29
    assert parse_code("980A") == 980
    assert parse_code("000A") == 0
    for bad in ("", "A", "029", "02A9A", "12B", "029AA", " 029A", "x29A", "029A\n", "029A\r"):
        try:
            parse_code(bad)
        except MalformedCode as e:
            assert e.code == bad
        else:
            raise AssertionError(f"{bad!r} accepted")


def test_single_code() -> None:
    assert navigation_cost("029A", 0) == 12
    assert navigation_cost("029A", 1) == 28
    assert navigation_cost("029A", 2) == 68
    cc = compute_code_cost("029A", 2)
    assert cc.numeric_value == 29
    assert cc.complexity == 1972


def test_example_two_robots() -> None:
    res = compute_codes_cost(EXAMPLE_CODES, 2)
    assert [c.code for c in res.codes] == EXAMPLE_CODES
    assert {c.code: c.navigation_cost for c in res.codes} == EXAMPLE_PRESSES_2_ROBOTS
    assert res.total_complexity() == 126384
    assert complexity_total(EXAMPLE_CODES, 2) == 126384


def test_example_twenty_five_robots() -> None:
    total = complexity_total(EXAMPLE_CODES, 25)
    assert total == 154115708116294
    assert total > complexity_total(EXAMPLE_CODES, 24) * 2


def test_workers_and_shared_cache() -> None:
    cache = CostCache()
    seq = complexity_total(EXAMPLE_CODES, 25, cache=cache, workers=1)
    par = complexity_total(EXAMPLE_CODES, 25, workers=4)
    again = complexity_total(EXAMPLE_CODES, 25, cache=cache, workers=3)
    assert seq == par == again
    # part 1 reuses the deep run's cache
    assert complexity_total(EXAMPLE_CODES, 2, cache=cache) == 126384


def test_malformed_code_fails_whole_run() -> None:
    cache = CostCache()
    try:
        complexity_total(["029A", "98?A", "179A"], 2, cache=cache)
    except MalformedCode as e:
        assert e.code == "98?A"
    else:
        raise AssertionError("malformed code accepted")
    # validation happens before any evaluation
    assert len(cache) == 0

    # a trailing newline is not part of a valid code either
    try:
        complexity_total(["029A", "179A\n"], 2, cache=cache)
    except MalformedCode as e:
        assert e.code == "179A\n"
    else:
        raise AssertionError("code with trailing newline accepted")
    assert len(cache) == 0

    try:
        complexity_total(["029A"], 2, workers=0)
    except ValueError:
        pass
    else:
        raise AssertionError("workers=0 accepted")


def test_expansion_replays_to_code() -> None:
    ev = CostEvaluator()
    for robots in range(0, 4):
        for code in EXAMPLE_CODES:
            presses = expand_code(code, robots, ev)
            assert len(presses) == navigation_cost(code, robots, ev)
            assert replay_chain(presses, robots) == code


def test_replay_rejects_gap() -> None:
    # from 'A' on the numeric keypad: '<' to 0, '<' into the gap
    try:
        replay_chain("<<A", 0)
    except ValueError:
        pass
    else:
        raise AssertionError("gap not detected")


def main() -> None:
    print("Running costing tests...")
    test_parse_code()
    test_single_code()
    test_example_two_robots()
    test_example_twenty_five_robots()
    test_workers_and_shared_cache()
    test_malformed_code_fails_whole_run()
    test_expansion_replays_to_code()
    test_replay_rejects_gap()
    print("OK")


if __name__ == "__main__":
    main()
