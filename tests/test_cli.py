import argparse
import logging

import pytest

import hyperbolic_tree.__main__ as cli


def test_main_writes_tikz_document(tmp_path):
    tikz_path = tmp_path / "out" / "tree.tex"

    cli.main(["--seed", "5", "--width", "300", "--height", "300", "--tikz-output-path", str(tikz_path)])

    document = tikz_path.read_text(encoding="utf-8")
    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "\\draw[htvedge]" in document
    assert "{A-0};" in document


def test_main_prints_picture_without_output_path(capsys):
    cli.main(["--seed", "5", "--drag", "190,190,200,200"])

    out = capsys.readouterr().out
    assert out.startswith("\\begin{tikzpicture}")
    assert "\\documentclass" not in out


def test_print_tree_logs_layout(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    cli.main(["--print-tree", "--min-branch", "2", "--branch", "0", "--tikz-output-path", str(tmp_path / "t.tex")])

    assert "A-0 layout=" in caplog.text
    assert "└B-2" in caplog.text


def test_parse_drag():
    assert cli._parse_drag("90, 90,100,100") == ((90.0, 90.0), (100.0, 100.0))
    with pytest.raises(argparse.ArgumentTypeError):
        cli._parse_drag("1,2,3")
    with pytest.raises(argparse.ArgumentTypeError):
        cli._parse_drag("1,2,3,x")


def test_invalid_drag_exits():
    with pytest.raises(SystemExit):
        cli.main(["--drag", "nope"])
