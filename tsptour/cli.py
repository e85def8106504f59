from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .errors import TourError
from .exhaustive import ExhaustiveConfig, ExhaustiveTourSolver
from .heuristic import HeuristicTourSolver
from .matrix import load_matrix

HEADERS = {"heuristic": "heuristic tour: ", "exhaustive": "optimal tour: "}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tsptour", description="Traveling salesman tours from a cost matrix file")
    ap.add_argument("method", choices=sorted(HEADERS), help="MST shortcut heuristic or exhaustive search")
    ap.add_argument("n", type=int, help="number of cities")
    ap.add_argument("file", help="whitespace separated N x N cost matrix")
    ap.add_argument("--time-limit", type=float, default=None, help="seconds before the exhaustive search gives up")
    ap.add_argument("--max-cities", type=int, default=None, help="refuse exhaustive search above this size")
    ap.add_argument("--both-directions", action="store_true", help="also evaluate reversed cycles (asymmetric costs)")
    ap.add_argument("--zero-cost-edges", action="store_true", help="read 0 as a free edge instead of a missing one")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def format_result(method: str, result) -> str:
    tour = " ".join(str(c) for c in result.tour)
    return f"{HEADERS[method]}{tour}\ntour cost:    {result.cost}"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        D = load_matrix(args.file, n=args.n, missing=None if args.zero_cost_edges else 0)
    except TourError as exc:
        print(f"Error loading input file: {exc}")
        return 1

    try:
        if args.method == "heuristic":
            result = HeuristicTourSolver(D).run()
        else:
            cfg = ExhaustiveConfig(both_directions=args.both_directions,
                                   max_cities=args.max_cities, time_limit=args.time_limit)
            result = ExhaustiveTourSolver(D, cfg).run()
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    print(format_result(args.method, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
