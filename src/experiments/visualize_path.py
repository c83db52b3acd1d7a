#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from src.domains.board import Board
from src.domains.instances import scramble
from src.domains.puzzle_file import read_board
from src.search.solver import Solver


def draw_board(board: Board, out_path: Path, title: str = ""):
    n = board.dimension()
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1, color="black")
        ax.plot([i, i], [0, n], linewidth=1, color="black")
    for idx, t in enumerate(board.tiles):
        if t == 0:
            continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.55, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def save_path_frames(solver: Solver, outdir: Path) -> int:
    path = solver.solution()
    for i, b in enumerate(path):
        draw_board(b, outdir / f"step_{i:03d}.png", title=f"move {i}/{solver.moves()}")
    return len(path)


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--puzzle", default=None, help="Puzzle file; otherwise a seeded scramble is used")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args(argv)

    start = read_board(args.puzzle) if args.puzzle else scramble(args.n, args.depth, args.seed)
    solver = Solver(start)
    if not solver.is_solvable():
        print("No solution possible")
        return

    count = save_path_frames(solver, Path(args.outdir))
    print(f"Saved {count} frames to {args.outdir}")


if __name__ == "__main__":
    main()
