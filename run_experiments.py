#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m src.experiments.runner --domain p8 --depths 6 10 14 18 22 --per_depth 10 --include_unsolvable --out results/p8.csv")
    run("python -m src.experiments.runner --domain p15 --depths 6 10 14 18 --per_depth 10 --timeout_sec 30 --out results/p15.csv")
    run("python -m src.experiments.summarize results/p8.csv results/p15.csv --plot results/plots/expanded_by_depth.png")

if __name__ == "__main__":
    main()
