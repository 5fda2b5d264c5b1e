from __future__ import annotations

import runpy
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "run_ssp.py"


def run_script(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *argv])
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_prints_points(monkeypatch, capsys):
    run_script(monkeypatch, "--knot", "0:1", "--knot", "1:1", "-n", "5", "--precision", "3")
    lines = capsys.readouterr().out.splitlines()
    assert lines[-5:] == ["0.000", "0.250", "0.500", "0.750", "1.000"]
    assert any(line.startswith("n = 5") for line in lines)


def test_default_knots_and_clamped_count(monkeypatch, capsys):
    run_script(monkeypatch, "-n", "1")
    out = capsys.readouterr().out
    assert "n = 2" in out
    assert "0.0000  1.0000" in out


def test_writes_plot(monkeypatch, capsys, tmp_path):
    output = tmp_path / "figures" / "ssp.png"
    run_script(monkeypatch, "--knot", "0:0.2", "--knot", "0.5:1", "--knot", "1:0.2",
               "-n", "9", "--plot", str(output))
    assert output.exists()
    assert str(output) in capsys.readouterr().out


def test_malformed_knot_is_a_usage_error(monkeypatch):
    with pytest.raises(SystemExit) as excinfo:
        run_script(monkeypatch, "--knot", "0.5")
    assert excinfo.value.code == 2
