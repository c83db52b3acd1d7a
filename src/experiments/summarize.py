#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional

import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["time_sec", "expanded", "generated"]


def load(paths: List[str]) -> pd.DataFrame:
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        df["file"] = Path(p).name
        frames.append(df)
    df = pd.concat(frames, ignore_index=True)
    df["termination"] = df["termination"].fillna("ok")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of the search metrics per (n, solvable, depth), finished runs only."""
    ok = df[df["termination"] == "ok"]
    g = ok.groupby(["n", "solvable", "depth"])
    out = g[METRICS].agg(["mean", "std"])
    out.columns = [f"{m}_{s}" for m, s in out.columns]
    out["moves_mean"] = g["moves"].mean()
    out["count"] = g.size()
    return out.reset_index()


def plot_expanded(summary: pd.DataFrame, out_path: Path) -> None:
    plt.figure(figsize=(6, 4))
    for (n, solvable), sub in summary.groupby(["n", "solvable"]):
        label = f"{n}x{n} {'solvable' if solvable == 1 else 'unsolvable'}"
        plt.errorbar(sub["depth"], sub["expanded_mean"], yerr=sub["expanded_std"].fillna(0),
                     marker="o", capsize=3, label=label)
    plt.xlabel("scramble depth")
    plt.ylabel("mean nodes expanded")
    plt.yscale("log")
    plt.legend()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize runner.py CSVs.")
    ap.add_argument("csv", nargs="+", help="CSV files produced by runner.py")
    ap.add_argument("--plot", type=Path, default=None, help="Save an expansions-by-depth plot here")
    args = ap.parse_args(argv)

    df = load(args.csv)
    summary = summarize(df)
    timeouts = int((df["termination"] != "ok").sum())

    print(summary.to_string(index=False, float_format=lambda x: f"{x:.4f}"))
    if timeouts:
        print(f"\n{timeouts} run(s) hit a limit and were left out")
    if args.plot is not None:
        plot_expanded(summary, args.plot)
        print(f"Saved: {args.plot}")


if __name__ == "__main__":
    main()
