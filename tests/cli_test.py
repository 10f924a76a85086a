import csv
import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pairheap import cli


def test_sort_ints(capsys):
    assert cli.main(["sort", "5", "3", "9", "1", "3"]) == 0
    assert capsys.readouterr().out.strip() == "1 3 3 5 9"


def test_sort_strings(capsys):
    cli.main(["sort", "--type", "str", "pear", "apple", "fig"])
    assert capsys.readouterr().out.strip() == "apple fig pear"


def test_sort_floats_and_negatives(capsys):
    cli.main(["sort", "--type", "float", "2.5", "-1", "0"])
    assert capsys.readouterr().out.strip() == "-1.0 0.0 2.5"


def test_sort_nothing_prints_empty_line(capsys):
    cli.main(["sort"])
    assert capsys.readouterr().out == "\n"


def test_sort_rejects_unparseable_value(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["sort", "1", "two"])
    assert exc.value.code == 2
    assert "cannot parse value as int" in capsys.readouterr().err


def test_bench_writes_report(tmp_path, capsys):
    out = tmp_path / "report.csv"
    cli.main(["bench", "--path", str(out), "--base-input", "3", "--doublings", "2", "--seed", "1",
              "--iterations", "1", "--ops", "insert, merge"])
    assert f"Wrote 4 benchmark rows to {out}" in capsys.readouterr().out
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert {r[1] for r in rows[1:]} == {"insert", "merge"}


def test_bench_rejects_unknown_op(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["bench", "--path", str(tmp_path / "r.csv"), "--ops", "bogus"])
    assert exc.value.code == 2
    assert "unknown operation" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.main([])
