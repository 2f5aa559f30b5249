"""
Tests for the pipeline helpers
"""
import pytest

from sprs import LexError, ParseError, check_source, parse_source, run_source
from sprs.runner import DEBUG_ENV_VAR
from sprs.types import Type
from sprs.values import UNIT


def test_run_source(capsys, monkeypatch):
    """
    Test that run_source prints program output and returns the result.
    """
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
    result = run_source("fn main() { print(1 + 1); }", "demo.sprs")
    assert result == UNIT
    assert capsys.readouterr().out == "2\n"


def test_debug_dump(capsys, monkeypatch):
    """
    Test that the debug variable dumps tokens, AST and hints first.
    """
    monkeypatch.setenv(DEBUG_ENV_VAR, "1")
    run_source("fn main() { a = 3; print(a); }")
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out
    assert "Type hints:" in out
    assert "  a: Int" in out
    assert out.endswith("3\n")


def test_check_source_does_not_run(capsys):
    """
    Test that check_source annotates without evaluating.
    """
    hints = check_source("fn main() { print(1); return 1 == 1; }")
    assert hints.signature("main").return_type == Type.BOOL
    assert capsys.readouterr().out == ""


def test_errors_propagate_with_file_name():
    """
    Test that stage errors reach the caller unchanged.
    """
    with pytest.raises(LexError):
        run_source("fn main() { x = 1 / 2; }")
    with pytest.raises(ParseError) as exc:
        parse_source("fn main( {}", "bad.sprs")
    assert "bad.sprs" in str(exc.value)
