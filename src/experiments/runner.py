from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from src.domains.board import Board
from src.domains.instances import scramble, parity_solvable, unsolvable_variant
from src.search.solver import Solver, SearchTimeout

logger = logging.getLogger(__name__)

HEADER = [
    "algorithm", "n", "depth", "seed",
    "expanded", "generated", "moves", "time_sec",
    "peak_open", "termination", "solvable", "parity_solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    board: Board


def make_instances(n: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, board=scramble(n, d, seed)))
            seed += 1
    return out


def solve_row(board: Board, inst: Instance, timeout_sec=None, max_expansions=None) -> Dict[str, object]:
    try:
        solver = Solver(board, timeout_sec=timeout_sec, max_expansions=max_expansions)
        res = solver.stats()
        solvable = int(solver.is_solvable())
    except SearchTimeout as e:
        res = e.stats
        solvable = ""
    return {
        "algorithm": res["algorithm"],
        "n": board.dimension(),
        "depth": inst.depth,
        "seed": inst.seed,
        "expanded": res["expanded"],
        "generated": res["generated"],
        "moves": "" if res["g"] is None else res["g"],
        "time_sec": f"{res['time']:.6f}",
        "peak_open": res["peak_open"],
        "termination": res["termination"],
        "solvable": solvable,
        "parity_solvable": int(parity_solvable(board)),
    }


def run_instances(
    insts: List[Instance],
    include_unsolvable: bool = False,
    timeout_sec: float | None = None,
    max_expansions: int | None = None,
) -> List[Dict[str, object]]:
    rows = []
    for inst in insts:
        boards = [inst.board]
        if include_unsolvable:
            boards.append(unsolvable_variant(inst.board))
        for b in boards:
            row = solve_row(b, inst, timeout_sec, max_expansions)
            if row["solvable"] != "" and row["solvable"] != row["parity_solvable"]:
                logger.warning("twin race and parity rule disagree on %r", b)
            rows.append(row)
    return rows


def main(argv=None):
    ap = argparse.ArgumentParser(description="A* + twin N-puzzle benchmark runner")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22, 26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--max_expansions", type=int, default=None, help="Per-instance expansion limit")
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--n", type=int, default=None, help="Square board size (N×N)")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also solve the twin of each instance")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    n = args.n if args.n is not None else (4 if args.domain == "p15" else 3)
    insts = make_instances(n, args.depths, args.per_depth, args.seed)
    rows = run_instances(insts, args.include_unsolvable, args.timeout_sec, args.max_expansions)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        w.writerows(rows)

    print(f"Wrote {args.out} ({len(insts)} instances, {len(rows)} rows)")


if __name__ == "__main__":
    main()
