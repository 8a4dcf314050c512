import csv

import pytest

from covpath import cli
from covpath.cli import main, parse_blocked


def test_parse_blocked():
    assert parse_blocked("") == []
    assert parse_blocked("2,0; 2,1;;3,3") == [(2, 0), (2, 1), (3, 3)]
    with pytest.raises(ValueError):
        parse_blocked("1;2")
    with pytest.raises(ValueError):
        parse_blocked("a,b")


def test_example_prints_grid_then_result(capsys):
    assert main(["example"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "0 0 0 0 0 0 0 0 "
    assert out[2] == "1 1 1 1 1 0 0 0 "
    assert out[8] == ""
    assert out[9].startswith("Best coverage: ")
    assert out[10].startswith("Path length: ")
    assert " -> " in out[11]


def test_solve_inline_grid(capsys):
    assert main(["solve", "--rows", "3", "--cols", "3", "--moves", "9", "--stats"]) == 0
    out = capsys.readouterr().out
    assert "Best coverage: 9\nPath length: 9\n" in out
    assert "(0,0) -> (1,0) -> (2,0)" in out
    assert "search" in out


def test_solve_reports_no_free_cells(capsys):
    code = main(["solve", "--rows", "2", "--cols", "2", "--blocked", "0,0;0,1;1,0;1,1", "--moves", "3"])
    assert code == 0
    out = capsys.readouterr().out
    assert "No free cells." in out
    assert "Best coverage" not in out


def test_invalid_arguments_exit_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["solve", "--moves", "0"])
    assert exc.value.code == 2
    with pytest.raises(SystemExit) as exc:
        main(["solve", "--blocked", "1;2"])
    assert exc.value.code == 2
    with pytest.raises(SystemExit) as exc:
        main(["solve", "--rows", "0"])
    assert exc.value.code == 2


def test_missing_files_exit_with_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["solve", "--env", str(tmp_path / "nope" / "grid.txt")])
    assert exc.value.code == 2
    with pytest.raises(SystemExit) as exc:
        main(["bench", "--envdir", str(tmp_path / "no_such_dir")])
    assert exc.value.code == 2
    assert "No such file or directory" in capsys.readouterr().err


def test_out_of_memory_is_fatal(monkeypatch, capsys):
    def boom(grid, num_moves):
        raise MemoryError()

    monkeypatch.setattr(cli, "solve", boom)
    assert main(["example"]) == 1
    captured = capsys.readouterr()
    assert "Failed: out of memory" in captured.err
    assert "Best coverage" not in captured.out


def test_example_png(tmp_path, capsys):
    out = tmp_path / "example.png"
    assert main(["example", "--png", str(out)]) == 0
    assert out.exists()


def test_gen_then_bench(tmp_path, capsys):
    envdir = tmp_path / "envs"
    assert main(["gen", "--count", "3", "--rows", "4", "--cols", "4", "--p", "0.2",
                 "--out", str(envdir), "--seed", "5"]) == 0
    assert sorted(p.name for p in envdir.iterdir()) == ["grid_000.txt", "grid_001.txt", "grid_002.txt"]

    report = tmp_path / "bench.csv"
    pngs = tmp_path / "pngs"
    assert main(["bench", "--envdir", str(envdir), "--moves", "6",
                 "--out", str(pngs), "--csv", str(report)]) == 0
    out = capsys.readouterr().out
    assert "grid_000.txt" in out

    with open(report, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["env"] for r in rows] == ["grid_000.txt", "grid_001.txt", "grid_002.txt"]
    for r in rows:
        assert int(r["coverage"]) <= int(r["length"]) <= 6
