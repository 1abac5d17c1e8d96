from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from statvalues.main import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("TXT_LOG_PATH", raising=False)


def test_describe() -> None:
    result = runner.invoke(app, ["describe", "1", "2", "3", "4", "-k", "1", "-k", "2"])
    assert result.exit_code == 0, result.output
    assert "count: 4" in result.output
    assert "mean: 2.500000" in result.output
    assert "variance: 1.250000" in result.output
    assert "moment[2]: 7.500000" in result.output


def test_describe_rejects_bad_moment() -> None:
    result = runner.invoke(app, ["describe", "1", "2", "-k", "0"])
    assert result.exit_code == 2


def test_probability() -> None:
    result = runner.invoke(app, ["probability", "3", "1", "2", "3", "3"])
    assert result.exit_code == 0, result.output
    assert "P(3): 0.500000" in result.output


def test_probability_single_precision_event_matches_data() -> None:
    result = runner.invoke(app, ["probability", "--width", "float", "3.14", "3.14", "1"])
    assert result.exit_code == 0, result.output
    assert ": 0.500000" in result.output


def test_results_written_to_txt_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    log_path = tmp_path / "results.log"
    monkeypatch.setenv("TXT_LOG_PATH", str(log_path))
    result = runner.invoke(app, ["describe", "5", "5", "-k", "3"])
    assert result.exit_code == 0, result.output
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4
    assert lines[-1].endswith("> moment[3]: 125.000000")


def test_describe_accepts_negative_first_value() -> None:
    result = runner.invoke(app, ["describe", "-1", "-1", "5", "8", "10", "4", "4", "8", "-k", "2"])
    assert result.exit_code == 0, result.output
    assert "count: 8" in result.output
    assert "mean: 4.625000" in result.output
    assert "moment[2]: 35.875000" in result.output


def test_probability_accepts_negative_event_and_values() -> None:
    result = runner.invoke(app, ["probability", "-1", "-1", "3.14", "-0.5", "-1"])
    assert result.exit_code == 0, result.output
    assert "P(-1): 0.500000" in result.output


def test_default_log_level_keeps_stdout_to_results(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    result = runner.invoke(app, ["describe", "2", "4", "-k", "1"])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "count: 2",
        "mean: 3.000000",
        "variance: 1.000000",
        "moment[1]: 3.000000",
    ]
