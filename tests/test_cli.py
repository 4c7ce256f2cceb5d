"""Tests for cli.py: argument parsing, config resolution and subcommand dispatch."""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from mars_robots.cli import _coerce_bool, _coerce_int, main
from mars_robots.io.paths import outcomes_path, run_summary_path

SAMPLE_INPUT = """5 3
1 1 E
RFRFRFRF

3 2 N
FRRFLLFFRRFLL

0 3 W
LLFFFLFLFL
"""


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_INPUT)
    return path


def test_run_prints_text_report(sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["run", str(sample_file)])
    assert capsys.readouterr().out.splitlines() == ["1 1 E", "3 3 N LOST", "2 3 S"]


def test_run_reads_stdin(capsys: pytest.CaptureFixture[str]) -> None:
    with patch.object(sys, "stdin", io.StringIO("5 5\n1 2 N\nLMLMLMLMM\n")):
        main(["run", "-"])
    assert capsys.readouterr().out.strip() == "1 3 N"


def test_run_json_format(sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["run", str(sample_file), "--format", "json"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["lost"] == 1
    assert [o["line"] for o in summary["outcomes"]] == ["1 1 E", "3 3 N LOST", "2 3 S"]


def test_run_persists_when_out_dir_given(sample_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    main(["run", str(sample_file), "--out-dir", str(out_dir)])
    assert outcomes_path(out_dir).exists()
    assert run_summary_path(out_dir).exists()


def test_run_dispatches_render(sample_file: Path, tmp_path: Path) -> None:
    figure = tmp_path / "paths.png"
    with patch("mars_robots.cli.render_paths") as mock_render:
        main(["run", str(sample_file), "--render", str(figure), "--theme", "dark"])
    mock_render.assert_called_once()
    _, output_path, render_config = mock_render.call_args.args
    assert output_path == figure
    assert render_config.theme == "dark"


def test_config_file_values_apply(sample_file: Path, tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"output_format": "json", "input_path": str(sample_file)}))
    with patch("builtins.print") as mock_print:
        main(["run", "--config", str(config_path)])
    printed = mock_print.call_args.args[0]
    assert json.loads(printed)["robots"] == 3


def test_cli_flag_overrides_config_file(
    sample_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"output_format": "json"}))
    main(["run", str(sample_file), "--config", str(config_path), "--format", "text"])
    assert capsys.readouterr().out.splitlines()[0] == "1 1 E"


def test_parse_error_exits_with_token(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("5 3\n1 1 Q\nF\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["run", str(bad)])
    assert excinfo.value.code == 2
    assert "'Q'" in capsys.readouterr().err


def test_strict_flag_enforces_limits(tmp_path: Path) -> None:
    big = tmp_path / "big.txt"
    big.write_text("60 3\n1 1 E\nF\n")
    main(["run", str(big)])
    with pytest.raises(SystemExit):
        main(["run", str(big), "--strict"])


def test_unknown_theme_in_config_file_exits(
    sample_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"theme": "neon"}))
    figure = tmp_path / "p.png"
    with pytest.raises(SystemExit) as excinfo:
        main(["run", str(sample_file), "--config", str(config_path), "--render", str(figure)])
    assert excinfo.value.code == 2
    assert "neon" in capsys.readouterr().err
    assert not figure.exists()


def test_non_utf8_input_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "latin.txt"
    bad.write_bytes(b"5 3\n1 1 \xff\nF\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["run", str(bad)])
    assert excinfo.value.code == 2
    assert "not valid UTF-8" in capsys.readouterr().err


def test_unreadable_input_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["run", str(tmp_path)])
    assert excinfo.value.code == 2
    assert "Cannot read input" in capsys.readouterr().err


def test_non_numeric_config_value_exits(sample_file: Path, tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"dpi": "high"}))
    with pytest.raises(SystemExit) as excinfo:
        main(["run", str(sample_file), "--config", str(config_path)])
    assert excinfo.value.code == 2


def test_missing_input_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["run", str(tmp_path / "nope.txt")])


def test_missing_config_file_exits(sample_file: Path, tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["run", str(sample_file), "--config", str(tmp_path / "missing.json")])


def test_no_subcommand_exits() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_render_subcommand_redraws_persisted_run(sample_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    main(["run", str(sample_file), "--out-dir", str(out_dir)])
    figure = out_dir / "paths.png"
    main(["render", "--out-dir", str(out_dir), "--output", str(figure), "--dpi", "40"])
    assert figure.exists()


def test_render_subcommand_missing_run_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["render", "--out-dir", str(tmp_path), "--output", str(tmp_path / "x.png")])


def test_coerce_helpers() -> None:
    assert _coerce_bool("yes", "k") is True
    assert _coerce_int(3.0, "k") == 3
    with pytest.raises(ValueError):
        _coerce_int(True, "k")
    with pytest.raises(ValueError):
        _coerce_bool("maybe", "k")
    with pytest.raises(ValueError):
        _coerce_int(2.5, "k")
