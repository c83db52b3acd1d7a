import csv

import pandas as pd

from src.experiments import runner, solve, summarize, visualize_path
from src.domains.board import Board
from src.domains.puzzle_file import read_board
from src.search.solver import Solver


def test_make_instances():
    insts = runner.make_instances(3, [4, 8], per_depth=3, start_seed=10)
    assert len(insts) == 6
    assert [i.depth for i in insts] == [4, 4, 4, 8, 8, 8]
    assert [i.seed for i in insts] == list(range(10, 16))


def test_run_instances_with_unsolvable_variants():
    insts = runner.make_instances(3, [6], per_depth=3)
    rows = runner.run_instances(insts, include_unsolvable=True)
    assert len(rows) == 6
    assert [r["solvable"] for r in rows] == [1, 0, 1, 0, 1, 0]
    for r in rows:
        assert r["solvable"] == r["parity_solvable"]
        assert r["termination"] == "ok"
        assert set(r) == set(runner.HEADER)
    assert all(r["moves"] <= 6 for r in rows if r["solvable"] == 1)
    assert all(r["moves"] == -1 for r in rows if r["solvable"] == 0)


def test_run_instances_records_timeouts():
    hard = Board.from_grid([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
    rows = runner.run_instances([runner.Instance(seed=0, depth=0, board=hard)], max_expansions=1)
    assert rows[0]["termination"] == "timeout"
    assert rows[0]["moves"] == ""
    assert rows[0]["solvable"] == ""


def test_runner_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "res" / "p8.csv"
    runner.main(["--depths", "4", "--per_depth", "2", "--include_unsolvable", "--out", str(out)])
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert list(rows[0]) == runner.HEADER
    assert "Wrote" in capsys.readouterr().out


def test_summarize_groups_finished_runs(tmp_path):
    rows = runner.run_instances(runner.make_instances(3, [4, 8], per_depth=2), include_unsolvable=True)
    df = pd.DataFrame(rows)
    df["time_sec"] = df["time_sec"].astype(float)
    summary = summarize.summarize(df)
    assert len(summary) == 4
    assert set(summary["solvable"]) == {0, 1}
    assert (summary["count"] == 2).all()
    assert "expanded_mean" in summary.columns

    plot = tmp_path / "plots" / "expanded.png"
    summarize.plot_expanded(summary, plot)
    assert plot.exists()


def test_summarize_main_reads_runner_csv(tmp_path, capsys):
    out = tmp_path / "p8.csv"
    runner.main(["--depths", "4", "--per_depth", "2", "--out", str(out)])
    summarize.main([str(out)])
    assert "expanded_mean" in capsys.readouterr().out


def test_solve_cli(tmp_path, capsys):
    p = tmp_path / "puzzle.txt"
    p.write_text("3\n1 2 3\n4 5 6\n7 0 8\n")
    assert solve.main([str(p)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Minimum number of moves = 1")
    assert "Elapsed time (in milliseconds):" in out


def test_solve_cli_unsolvable(tmp_path, capsys):
    p = tmp_path / "puzzle.txt"
    p.write_text("3\n1 2 3\n4 5 6\n8 7 0\n")
    assert solve.main([str(p)]) == 0
    assert capsys.readouterr().out.startswith("No solution possible")


def test_solve_cli_malformed(tmp_path, capsys):
    p = tmp_path / "puzzle.txt"
    p.write_text("3\n1 2 3\n4 5 6\n7 7 0\n")
    assert solve.main([str(p)]) == 2
    assert "error:" in capsys.readouterr().err


def test_visualize_path_frames(tmp_path):
    p = tmp_path / "puzzle.txt"
    p.write_text("3\n0 1 3\n4 2 5\n7 8 6\n")
    solver = Solver(read_board(p))
    count = visualize_path.save_path_frames(solver, tmp_path / "frames")
    assert count == 5
    assert len(list((tmp_path / "frames").glob("step_*.png"))) == 5
