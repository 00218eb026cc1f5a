import sys

from apps.cli import run


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["run.py", *argv])
    return run.main()


def test_cli_reports_found(monkeypatch, capsys):
    assert _run(monkeypatch, "--secret", "ABC") == 0
    out = capsys.readouterr().out
    assert "Secret code is found: ABC" in out
    assert "Queries: 11" in out

def test_cli_reports_length_exceeded(monkeypatch, capsys):
    assert _run(monkeypatch, "--secret", "BACXIU" * 4) == 1
    out = capsys.readouterr().out
    assert "ERROR: Secret code length exceeds 18. Aborting." in out

def test_cli_honours_max_length(monkeypatch, capsys):
    assert _run(monkeypatch, "--secret", "ABCA", "--max-length", "3") == 1
    assert "exceeds 3" in capsys.readouterr().out
