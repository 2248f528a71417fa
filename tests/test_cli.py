import io
from pathlib import Path

import pytest

from garbagestream.cli import main


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input-9.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_both_parts(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "{{<ab>},{<ab>},{<ab>},{<ab>}}\n")

    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Part 1: 9\nPart 2: 8\n"


def test_cli_reports_syntax_error_without_metrics(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = _write(tmp_path, "{<!>}")

    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out == "syntax error: unterminated '<'\n"
    assert "Part" not in out


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("<random characters>"))

    assert main(["-"]) == 0
    assert capsys.readouterr().out == "Part 1: 0\nPart 2: 17\n"


def test_cli_missing_file_exits_with_usage_error(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.txt")])

    assert exc_info.value.code == 2
    assert "can't read" in capsys.readouterr().err


def test_cli_defaults_to_data_input(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "input-9.txt").write_text("{{},{}}", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main([]) == 0
    assert capsys.readouterr().out == "Part 1: 5\nPart 2: 0\n"
