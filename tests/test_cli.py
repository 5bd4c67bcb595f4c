#!/usr/bin/env python3
"""
Tests for the command line front end.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

from bfi.cli import main

PROGRAMS = os.path.join(os.path.dirname(__file__), '..', 'programs')


def test_inline_source_joined():
    stdout = io.BytesIO()
    assert main(['-c', '++++++++[>++++++++<-]', '>+.'], stdout=stdout) == 0
    assert stdout.getvalue() == b"A"


def test_inline_source_starting_with_dash():
    stdout = io.BytesIO()
    assert main(['-c', '-', '[-]+.'], stdout=stdout) == 0
    assert stdout.getvalue() == b"\x01"


def test_file_argument():
    stdout = io.BytesIO()
    assert main([os.path.join(PROGRAMS, 'hello.bf')], stdout=stdout) == 0
    assert stdout.getvalue() == b"Hello World!\n"


def test_each_file_gets_a_fresh_tape(tmp_path):
    first = tmp_path / "a.bf"
    first.write_text("+++.")
    second = tmp_path / "b.bf"
    second.write_text("+.")
    stdout = io.BytesIO()
    assert main([str(first), str(second)], stdout=stdout) == 0
    assert stdout.getvalue() == b"\x03\x01"


def test_no_arguments(capsys):
    stdout = io.BytesIO()
    assert main([], stdout=stdout) == 2
    assert stdout.getvalue() == b""
    assert "missing source" in capsys.readouterr().err


def test_missing_file_reported(tmp_path, capsys):
    stdout = io.BytesIO()
    assert main([str(tmp_path / "missing.bf")], stdout=stdout) == 1
    assert "could not open" in capsys.readouterr().err


def test_bad_file_stops_before_any_run(tmp_path, capsys):
    good = tmp_path / "good.bf"
    good.write_text("+.")
    bad = tmp_path / "bad.bf"
    bad.write_text("+]")
    stdout = io.BytesIO()
    assert main([str(good), str(bad)], stdout=stdout) == 1
    assert stdout.getvalue() == b""
    assert "unmatched closing bracket" in capsys.readouterr().err


def test_runtime_error_reported(capsys):
    stdout = io.BytesIO()
    assert main(['-c', ','], stdin=io.BytesIO(), stdout=stdout) == 1
    assert "input exhausted" in capsys.readouterr().err


def test_dump(capsys):
    stdout = io.BytesIO()
    assert main(['--dump', '-c', '+[-]'], stdout=stdout) == 0
    assert stdout.getvalue() == b""
    err = capsys.readouterr().err
    assert "<inline> (4 instructions)" in err
    assert "CLOSE(loop=0, partner=1)" in err


def test_files_and_inline_source_together_are_rejected(tmp_path, capsys):
    path = tmp_path / "a.bf"
    path.write_text("+++.")
    stdout = io.BytesIO()
    assert main([str(path), '-c', '+.'], stdout=stdout) == 2
    assert stdout.getvalue() == b""
    assert "-c takes the rest of the command line" in capsys.readouterr().err


def test_inline_source_that_looks_like_a_long_option():
    stdout = io.BytesIO()
    assert main(['-c', '--d', '.'], stdout=stdout) == 0
    assert stdout.getvalue() == b"\xfe"
