"""Tests for the tokscan command line."""

import io
import json
import sys
import pytest
from unittest.mock import MagicMock, patch
from tokscan.tokscan import main, variables_parse, __version__


@pytest.fixture(autouse=True)
def no_user_vars(tmp_path):
    with patch("tokscan.tokscan.VARS_FILE", tmp_path / "no-such-vars.json"):
        yield


def run_cli(argv):
    with pytest.raises(SystemExit) as exit_info:
        main(argv)
    return exit_info.value.code


def test_version_output(capsys):
    assert run_cli(["-V"]) == 0
    captured = capsys.readouterr()
    assert "tokscan" in captured.out
    assert __version__ in captured.out


def test_text_substitution(capsys):
    code = run_cli(["--var", "user=alice", "--text", "hello ${user}"])
    assert code == 0
    assert capsys.readouterr().out == "hello alice"


def test_default_value_flag(capsys):
    code = run_cli(["--enable-default-value", "--text", "${host:localhost}"])
    assert code == 0
    assert capsys.readouterr().out == "localhost"


def test_custom_separator_and_markers(capsys):
    code = run_cli(
        [
            "--enable-default-value",
            "--separator",
            "|",
            "--open",
            "{{",
            "--close",
            "}}",
            "--text",
            "{{a|1}} {{b}}",
        ]
    )
    assert code == 0
    assert capsys.readouterr().out == "1 {{b}}"


def test_vars_file(tmp_path, capsys):
    path = tmp_path / "vars.json"
    path.write_text(json.dumps({"user": "bob", "host": "db"}))
    code = run_cli(
        ["--vars-file", str(path), "--var", "host=cache", "--text", "${user}@${host}"]
    )
    assert code == 0
    assert capsys.readouterr().out == "bob@cache"


def test_missing_vars_file(tmp_path, capsys):
    code = run_cli(["--vars-file", str(tmp_path / "absent.json"), "--text", "x"])
    assert code == 1
    assert "Variables file not found" in capsys.readouterr().err


def test_vars_file_is_directory(tmp_path, capsys):
    code = run_cli(["--vars-file", str(tmp_path), "--text", "x"])
    assert code == 1
    assert "Cannot read variables file" in capsys.readouterr().err


def test_no_vars_leaves_placeholders(capsys):
    code = run_cli(["--no-vars", "--var", "a=1", "--text", "${a}"])
    assert code == 0
    assert capsys.readouterr().out == "${a}"


def test_stdin_input(monkeypatch, capsys):
    stdin = io.StringIO("line ${n}\n")
    monkeypatch.setattr(sys, "stdin", stdin)
    code = run_cli(["--var", "n=1"])
    assert code == 0
    assert capsys.readouterr().out == "line 1\n"


def test_no_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", MagicMock(isatty=lambda: True))
    assert run_cli([]) == 1
    assert "No input" in capsys.readouterr().err


def test_include_error(tmp_path, capsys):
    code = run_cli(["--include", "--text", f"%{{{tmp_path / 'absent.txt'}}}"])
    assert code == 1
    assert "File not found" in capsys.readouterr().err


def test_include_file(tmp_path, capsys):
    (tmp_path / "notes.txt").write_text("remember", encoding="utf-8")
    code = run_cli(
        ["--include", "--var", f"dir={tmp_path}", "--text", "%{${dir}/notes.txt}"]
    )
    assert code == 0
    assert capsys.readouterr().out == "remember"


def test_invalid_var_definition(capsys):
    assert run_cli(["--var", "novalue", "--text", "x"]) == 1
    assert "KEY=VALUE" in capsys.readouterr().err


def test_invalid_args(capsys):
    assert run_cli(["--invalid"]) != 0
    assert "unrecognized arguments" in capsys.readouterr().err


def test_variables_parse():
    assert variables_parse(["a=1", "b=x=y", "c="]) == {"a": "1", "b": "x=y", "c": ""}
    with pytest.raises(ValueError):
        variables_parse(["=1"])
