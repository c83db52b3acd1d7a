#!/usr/bin/env python3
import argparse, logging, sys
from time import perf_counter

from src.domains.board import MalformedInput
from src.domains.puzzle_file import read_board, format_solution
from src.search.solver import Solver, SearchTimeout


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Solve a sliding-tile puzzle file with A*.")
    p.add_argument("puzzle", help="File with N followed by N*N tiles (0 is the blank)")
    p.add_argument("--timeout_sec", type=float, default=None, help="Wall time limit")
    p.add_argument("--max_expansions", type=int, default=None, help="Expansion limit")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    t0 = perf_counter()
    try:
        board = read_board(args.puzzle)
    except (OSError, MalformedInput) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        solver = Solver(board, timeout_sec=args.timeout_sec, max_expansions=args.max_expansions)
    except SearchTimeout as e:
        print(f"error: search {e}", file=sys.stderr)
        return 1

    print(format_solution(solver.solution(), solver.moves()))
    print(f"Elapsed time (in milliseconds): {int((perf_counter() - t0) * 1000)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
