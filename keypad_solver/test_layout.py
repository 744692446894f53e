# keypad_solver/test_layout.py
# Layout table and route generator tests. Run with pytest or:
#   python -m keypad_solver.test_layout

from __future__ import annotations

from keypad_solver.layout import button_at, buttons_of, gap_of, kind_for_pair, position_of, shape_of
from keypad_solver import routes
from keypad_solver.routes import candidate_routes, routes_for_pair, walk
from keypad_solver.types import InvalidButton, KeypadKind, NoValidRoute, Position
from keypad_solver.validate import raise_on_errors, validate_routes


NUM = KeypadKind.NUMERIC
DIR = KeypadKind.DIRECTIONAL


def test_positions_and_gaps() -> None:
    assert position_of(NUM, "7") == Position(0, 0)
    assert position_of(NUM, "0") == Position(3, 1)
    assert position_of(NUM, "A") == Position(3, 2)
    assert gap_of(NUM) == Position(3, 0)

    assert position_of(DIR, "^") == Position(0, 1)
    assert position_of(DIR, "A") == Position(0, 2)
    assert position_of(DIR, "<") == Position(1, 0)
    assert gap_of(DIR) == Position(0, 0)

    assert shape_of(NUM) == (4, 3)
    assert shape_of(DIR) == (2, 3)
    assert len(buttons_of(NUM)) == 11
    assert buttons_of(DIR) == ("^", "A", "<", "v", ">")


def test_invalid_button() -> None:
    for kind, button in ((NUM, "^"), (NUM, "B"), (DIR, "5"), (DIR, "")):
        try:
            position_of(kind, button)
        except InvalidButton as e:
            assert e.kind is kind
            assert isinstance(e, ValueError)
        else:
            raise AssertionError(f"{button!r} accepted on {kind.value} keypad")


def test_reverse_lookup() -> None:
    assert button_at(NUM, Position(1, 1)) == "5"
    assert button_at(NUM, gap_of(NUM)) is None
    assert button_at(DIR, Position(5, 5)) is None


def test_kind_for_pair() -> None:
    assert kind_for_pair("A", "0") is NUM
    assert kind_for_pair("9", "A") is NUM
    assert kind_for_pair("A", "<") is DIR
    assert kind_for_pair("A", "A") is DIR


def test_routes_forced_by_gap() -> None:
    # Horizontal-first would walk through the numeric gap.
    assert candidate_routes(NUM, "A", "1") == (("^", "<", "<", "A"),)
    assert candidate_routes(NUM, "0", "7") == (("^", "^", "^", "<", "A"),)
    # Vertical-first would.
    assert candidate_routes(NUM, "1", "A") == ((">", ">", "v", "A"),)
    # Directional gap.
    assert candidate_routes(DIR, "A", "<") == (("v", "<", "<", "A"),)
    assert candidate_routes(DIR, "<", "^") == ((">", "^", "A"),)


def test_routes_two_candidates_and_dedup() -> None:
    assert candidate_routes(NUM, "2", "9") == (("^", "^", ">", "A"), (">", "^", "^", "A"))
    assert candidate_routes(NUM, "A", "0") == (("<", "A"),)
    assert candidate_routes(NUM, "5", "5") == (("A",),)
    assert routes_for_pair("A", "v") == (("v", "<", "A"), ("<", "v", "A"))


def test_all_routes_valid() -> None:
    for kind in (NUM, DIR):
        issues = validate_routes(kind)
        raise_on_errors(issues)
        assert not issues

    for kind in (NUM, DIR):
        gap = gap_of(kind)
        for s in buttons_of(kind):
            for t in buttons_of(kind):
                for r in candidate_routes(kind, s, t):
                    assert r[-1] == "A"
                    assert gap not in list(walk(position_of(kind, s), r))


def test_no_valid_route_error() -> None:
    e = NoValidRoute(NUM, "1", "A")
    assert isinstance(e, ValueError)
    assert "'1'" in str(e) and "'A'" in str(e)

    # Put the gap on the target cell so both orders walk into it.
    original_gap_of = routes.gap_of
    routes.candidate_routes.cache_clear()
    routes.gap_of = lambda kind: position_of(kind, "5")
    try:
        candidate_routes(NUM, "1", "5")
    except NoValidRoute as err:
        assert (err.kind, err.source, err.target) == (NUM, "1", "5")
    else:
        raise AssertionError("route through the gap accepted")
    finally:
        routes.gap_of = original_gap_of
        routes.candidate_routes.cache_clear()

    assert candidate_routes(NUM, "1", "5") == (("^", ">", "A"), (">", "^", "A"))


def main() -> None:
    print("Running layout tests...")
    test_positions_and_gaps()
    test_invalid_button()
    test_reverse_lookup()
    test_kind_for_pair()
    test_routes_forced_by_gap()
    test_routes_two_candidates_and_dedup()
    test_all_routes_valid()
    test_no_valid_route_error()
    print("OK")


if __name__ == "__main__":
    main()
