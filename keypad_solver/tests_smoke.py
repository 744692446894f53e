# keypad_solver/tests_smoke.py
# Very small smoke tests you can run with:
#   python -m keypad_solver.tests_smoke
#
# These are not full unit tests, but they quickly tell you if
# the evaluator, aggregation, CLI, JSON export and plotting are wired correctly.

from __future__ import annotations

import io
import json
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from keypad_solver.cli import main as cli_main
from keypad_solver.costing import compute_codes_cost
from keypad_solver.debug import print_codes_cost, print_expansion, print_route_table
from keypad_solver.io_text import dump_codes, load_codes, parse_codes, read_codes
from keypad_solver.plotting import plot_keypads, save_keypads_png
from keypad_solver.profile import Profiler
from keypad_solver.types import KeypadKind
from keypad_solver.utils import result_to_dict, save_results_json


EXAMPLE_TEXT = "029A\n980A\n179A\n456A\n379A\n"


def test_parse_codes() -> None:
    assert parse_codes("  029A \n\n980A\r\n") == ["029A", "980A"]
    assert parse_codes("") == []
    assert read_codes(io.StringIO(EXAMPLE_TEXT)) == ["029A", "980A", "179A", "456A", "379A"]

    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "sub" / "codes.txt"
        dump_codes(["029A", "980A"], path)
        assert load_codes(path) == ["029A", "980A"]


def test_cli_end_to_end() -> None:
    with tempfile.TemporaryDirectory() as d:
        src = Path(d) / "codes.txt"
        src.write_text(EXAMPLE_TEXT, encoding="utf-8")
        out_json = Path(d) / "out" / "result.json"
        out_png = Path(d) / "keypads.png"

        buf = io.StringIO()
        with redirect_stdout(buf):
            cli_main(
                [
                    "--input", str(src),
                    "--robots", "2,25",
                    "--prefill",
                    "--validate",
                    "--breakdown",
                    "--profile",
                    "--quiet",
                    "--json", str(out_json),
                    "--png", str(out_png),
                ]
            )
        text = buf.getvalue()
        assert "Part 1: 126384" in text
        assert "Part 2: 154115708116294" in text
        assert "Elapsed time:" in text
        assert "TOTAL" in text

        payload = json.loads(out_json.read_text(encoding="utf-8"))
        assert [r["robots"] for r in payload["results"]] == [2, 25]
        assert payload["results"][0]["totals"]["complexity"] == 126384
        assert payload["results"][0]["codes"][0] == {
            "code": "029A",
            "navigation_cost": 68,
            "numeric_value": 29,
            "complexity": 1972,
        }
        assert out_png.exists() and out_png.stat().st_size > 0


def test_cli_expand_default_depths() -> None:
    with tempfile.TemporaryDirectory() as d:
        src = Path(d) / "codes.txt"
        src.write_text("029A\n", encoding="utf-8")

        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            cli_main(["--input", str(src), "--expand"])
        text = out.getvalue()
        assert "Part 1: 1972" in text
        assert "Part 2:" in text
        # the short chain is expanded, the deep one only warned about
        assert "numeric (   4): 029A" in text
        assert text.count("=== 029A through") == 1
        assert "Skipping --expand for robots=25" in err.getvalue()


def test_cli_malformed_input_exits() -> None:
    with tempfile.TemporaryDirectory() as d:
        src = Path(d) / "codes.txt"
        src.write_text("029A\nhello\n", encoding="utf-8")
        try:
            with redirect_stdout(io.StringIO()):
                cli_main(["--input", str(src), "--robots", "2", "--quiet"])
        except SystemExit as e:
            assert e.code == 1
        else:
            raise AssertionError("malformed input did not exit")


def test_debug_output() -> None:
    res = compute_codes_cost(["029A"], 2)
    buf = io.StringIO()
    with redirect_stdout(buf):
        print_codes_cost(res)
        print_route_table(KeypadKind.DIRECTIONAL)
        print_expansion("029A", 2)
    text = buf.getvalue()
    assert "TOTAL COMPLEXITY: 1,972" in text
    assert "A -> <: v<<A" in text
    assert "numeric (   4): 029A" in text
    assert result_to_dict(res)["totals"] == {"navigation_cost": 68, "complexity": 1972}


def test_plot_and_json_helpers() -> None:
    fig = plot_keypads({KeypadKind.NUMERIC: [("A", ("^", "<", "<", "A"))], KeypadKind.DIRECTIONAL: [("A", ("v", "<", "A"))]})
    assert len(fig.axes) == 2
    plt.close(fig)

    with tempfile.TemporaryDirectory() as d:
        png = Path(d) / "plain.png"
        save_keypads_png(str(png))
        assert png.exists()

        res = compute_codes_cost(["029A", "980A"], 2)
        out = Path(d) / "r.json"
        save_results_json([res], out)
        assert json.loads(out.read_text(encoding="utf-8"))["results"][0]["totals"]["navigation_cost"] == 128


def test_profiler() -> None:
    prof = Profiler()
    with prof.phase("a"):
        pass
    prof.start("b")
    prof.stop("b")
    assert set(prof.phases) == {"a", "b"}
    assert prof.total() >= 0.0
    assert "TOTAL" in prof.report()


def main() -> None:
    print("Running smoke tests...")
    test_parse_codes()
    test_cli_end_to_end()
    test_cli_expand_default_depths()
    test_cli_malformed_input_exits()
    test_debug_output()
    test_plot_and_json_helpers()
    test_profiler()
    print("OK")


if __name__ == "__main__":
    main()
