"""Tests for the command-line interface."""
import sys

import pytest

import lrcalc.app as app


def run_cli(monkeypatch, *args):
    # Logging is configured by conftest; keep handlers off the captured streams
    monkeypatch.setattr(app, "configure_logging", lambda level: None)
    monkeypatch.setattr(sys, "argv", ["lrcalc", *args])
    app.main()


def test_cli_prints_result(monkeypatch, capsys):
    """Test that the result is printed on stdout."""
    run_cli(monkeypatch, "2+3*4")
    assert capsys.readouterr().out.strip() == "20"


def test_cli_joins_arguments(monkeypatch, capsys):
    """Test that separate arguments form one expression."""
    run_cli(monkeypatch, "2", "+", "(3", "*", "4)")
    assert capsys.readouterr().out.strip() == "14"


def test_cli_prints_decimal_result(monkeypatch, capsys):
    """Test that fractional results are rendered in plain notation."""
    run_cli(monkeypatch, "15/4")
    assert capsys.readouterr().out.strip() == "3.75"


def test_cli_usage_without_arguments(monkeypatch, capsys):
    """Test that usage is shown and the exit code is 1 without an expression."""
    with pytest.raises(SystemExit) as exc_info:
        run_cli(monkeypatch)
    assert exc_info.value.code == 1
    assert "Usage: lrcalc '<expression>'" in capsys.readouterr().out


def test_cli_reports_errors(monkeypatch, capsys):
    """Test that calculation errors go to stderr with exit code 2."""
    with pytest.raises(SystemExit) as exc_info:
        run_cli(monkeypatch, "5/0")
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Division by zero" in captured.err


def test_cli_reports_bad_alphabet_setting(monkeypatch, capsys):
    """Test that an unknown alphabet setting exits 1 with a message, not a traceback."""
    monkeypatch.setattr(app, "OPERATOR_ALPHABET", "roman")
    with pytest.raises(SystemExit) as exc_info:
        run_cli(monkeypatch, "1+1")
    assert exc_info.value.code == 1
    assert "Configuration error: Unknown operator alphabet 'roman'" in capsys.readouterr().err


def test_cli_trace_summary(monkeypatch, capsys):
    """Test that the trace summary is printed when enabled."""
    monkeypatch.setattr(app, "SHOW_TRACE", True)
    run_cli(monkeypatch, "1+1")
    captured = capsys.readouterr()
    assert captured.out.strip() == "2"
    assert "=== Calculation Trace ===" in captured.err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
