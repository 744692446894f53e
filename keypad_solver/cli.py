# keypad_solver/cli.py
# Command line entry point:
# - reads door codes from a file or stdin (one per line)
# - evaluates the total complexity for each requested chain depth
# - optional per-code breakdown, press expansion, JSON export and keypad PNG
#
# Run:
#   python -m keypad_solver --input codes.txt
#   python -m keypad_solver --input codes.txt --robots 2,25 --breakdown --json out/result.json
#   cat codes.txt | python -m keypad_solver --robots 3 --profile

from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Sequence, Tuple

from .config import DEFAULTS, parse_robots_text, robots_to_level
from .cost_cache import CostCache
from .costing import compute_codes_cost
from .debug import print_codes_cost, print_expansion
from .evaluator import CostEvaluator
from .io_text import load_codes, read_codes
from .logger import get_logger, set_enabled, set_verbose
from .profile import Profiler
from .types import CodesCost, KeypadKind, Route, pairwise_from_activate
from .utils import save_results_json, timer
from .validate import raise_on_errors, validate_routes


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Minimal button presses through a chain of keypad robots")
    p.add_argument("--input", type=str, default="", help="Codes file, one code per line (default: stdin)")
    p.add_argument(
        "--robots",
        type=str,
        default=f"{DEFAULTS.robots_short},{DEFAULTS.robots_long}",
        help="Comma separated directional-pad robot counts to evaluate, e.g. 2,25",
    )
    p.add_argument("--workers", type=int, default=DEFAULTS.workers, help="Threads used to evaluate codes")
    p.add_argument("--prefill", action="store_true", help="Fill cost tables bottom-up before evaluating")
    p.add_argument("--validate", action="store_true", help="Check route tables before evaluating")
    p.add_argument("--breakdown", action="store_true", help="Print per-code costs")
    p.add_argument("--expand", action="store_true", help="Print the press sequence per layer (small depths only)")
    p.add_argument("--json", type=str, default="", help="Save results as JSON (optional)")
    p.add_argument("--png", type=str, default="", help="Save keypad drawing with the first code's routes (optional)")
    p.add_argument("--profile", action="store_true", help="Print timing per depth")
    p.add_argument("--quiet", action="store_true", help="Silence progress messages")
    p.add_argument("--verbose", action="store_true", help="Print debug messages")
    return p


def first_code_routes(code: str, robots: int, evaluator: CostEvaluator) -> Dict[KeypadKind, List[Tuple[str, Route]]]:
    """Numeric keypad routes chosen for each transition of `code`."""
    level = robots_to_level(robots)
    return {
        KeypadKind.NUMERIC: [(a, evaluator.best_route(level, a, b)) for a, b in pairwise_from_activate(code) if a != b]
    }


def run(codes: Sequence[str], robots_list: Sequence[int], args: argparse.Namespace) -> List[CodesCost]:
    log = get_logger()
    cache = CostCache()
    evaluator = CostEvaluator(cache)
    prof = Profiler()

    if args.validate:
        with prof.phase("validate"):
            for kind in (KeypadKind.NUMERIC, KeypadKind.DIRECTIONAL):
                raise_on_errors(validate_routes(kind))
        log.info("Route tables OK")

    if args.prefill:
        with prof.phase("prefill"):
            evaluator.fill_levels(robots_to_level(max(robots_list)))

    results: List[CodesCost] = []
    for i, robots in enumerate(robots_list, start=1):
        with prof.phase(f"robots={robots}"):
            res = compute_codes_cost(codes, robots, cache=cache, workers=args.workers)
        results.append(res)
        print(f"Part {i}: {res.total_complexity()}")
        if args.breakdown:
            print_codes_cost(res)
        if args.expand and robots_to_level(robots) > DEFAULTS.max_expand_level:
            log.warn(
                f"Skipping --expand for robots={robots}: level {robots_to_level(robots)} "
                f"is above the expansion limit {DEFAULTS.max_expand_level}"
            )
        elif args.expand:
            for code in codes:
                print_expansion(code, robots, evaluator)

    if args.profile:
        print(prof.report())

    if args.json.strip():
        save_results_json(results, args.json.strip())
        log.info(f"Exported JSON to: {args.json.strip()}")

    if args.png.strip() and codes:
        from .plotting import save_keypads_png

        save_keypads_png(args.png.strip(), routes=first_code_routes(codes[0], robots_list[0], evaluator))
        log.info(f"Keypad drawing saved to: {args.png.strip()}")

    return results


def main(argv: Optional[List[str]] = None) -> None:
    args = build_argparser().parse_args(argv)
    set_enabled(not args.quiet)
    set_verbose(args.verbose)
    log = get_logger()

    try:
        robots_list = parse_robots_text(args.robots)
    except ValueError as e:
        raise SystemExit(f"Invalid --robots: {e}")

    codes = load_codes(args.input) if args.input.strip() else read_codes()
    if not codes:
        raise SystemExit("No codes found in input.")
    log.info(f"Loaded {len(codes)} codes")

    try:
        with timer("solve") as t:
            run(codes, robots_list, args)
    except ValueError as e:
        log.error(str(e))
        raise SystemExit(1)

    print(f"Elapsed time: {t['seconds']:.4f} seconds")


if __name__ == "__main__":
    main()
