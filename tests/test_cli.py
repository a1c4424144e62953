from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from lagoon.config import OCEANHUNTER_CFG_NAME, OCEANHUNTER_CFG_SIZE
from oceanhunter.cli import app


def _write_levels(path: Path) -> Path:
    payload = {
        "levels": [
            {
                "name": "Reef",
                "length": 20,
                "spawns": [
                    {"t": 1, "type": "fish", "x": 0.2, "y": 0.3},
                    {"t": 30, "type": "eel", "hp": 2},
                ],
            }
        ]
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_levels_command_prints_builtin_timeline() -> None:
    result = CliRunner().invoke(app, ["levels"])

    assert result.exit_code == 0, result.output
    assert "source: <builtin>" in result.output
    assert "Level 0 'Default'" in result.output
    assert "type=boss" in result.output


def test_levels_command_flags_spawns_after_level_end(tmp_path: Path) -> None:
    path = _write_levels(tmp_path / "levels.json")

    result = CliRunner().invoke(app, ["levels", str(path)])

    assert result.exit_code == 0, result.output
    assert "Level 0 'Reef' length=20s" in result.output
    assert "never spawns" in result.output


def test_oracle_command_emits_json_lines() -> None:
    result = CliRunner().invoke(app, ["oracle", "--max-frames", "120", "--sample-rate", "60", "--seed", "1"])

    assert result.exit_code == 0, result.output
    lines = [json.loads(line) for line in result.stdout.splitlines() if line.startswith("{")]
    assert [payload["frame"] for payload in lines] == [0, 60]
    assert lines[0]["level"] == "Default"


def test_oracle_command_rejects_unknown_output_mode() -> None:
    result = CliRunner().invoke(app, ["oracle", "--output", "verbose"])

    assert result.exit_code == 1
    assert "Invalid output mode" in result.output


def test_config_command_creates_and_prints_cfg(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["config", "--base-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / OCEANHUNTER_CFG_NAME).stat().st_size == OCEANHUNTER_CFG_SIZE
    assert "screen: 1280x720" in result.output
    assert "fire_rate: 8" in result.output
    assert "reserved" not in result.output


def test_config_command_rejects_bad_file(tmp_path: Path) -> None:
    path = tmp_path / OCEANHUNTER_CFG_NAME
    path.write_bytes(b"\x01\x02")

    result = CliRunner().invoke(app, ["config", "--path", str(path)])

    assert result.exit_code == 1
    assert "unexpected size" in result.output


def test_run_command_builds_world_and_view(monkeypatch, tmp_path: Path) -> None:
    captured: dict[str, Any] = {}

    def _fake_run_view(view, **kwargs):  # noqa: ANN001, ANN003
        captured["view"] = view
        captured.update(kwargs)

    monkeypatch.setattr("lagoon.app.run_view", _fake_run_view)
    levels = _write_levels(tmp_path / "levels.json")

    result = CliRunner().invoke(
        app,
        ["run", "--levels", str(levels), "--base-dir", str(tmp_path / "runtime"), "--seed", "4"],
    )

    assert result.exit_code == 0, result.output
    assert (captured["width"], captured["height"]) == (1280, 720)
    assert (tmp_path / "runtime" / OCEANHUNTER_CFG_NAME).exists()
    view = captured["view"]
    assert view._world.level.name == "Reef"


def test_oracle_command_reports_bad_input_script(tmp_path: Path) -> None:
    bad_aim = tmp_path / "bad_aim.json"
    bad_aim.write_text(json.dumps({"frames": [{"frame": 0, "aim": [1]}]}), encoding="utf-8")
    not_json = tmp_path / "not_json.json"
    not_json.write_text("{frames:", encoding="utf-8")

    for path, message in ((bad_aim, "invalid aim payload"), (not_json, "oracle:")):
        result = CliRunner().invoke(app, ["oracle", "--input-file", str(path), "--max-frames", "1"])

        assert result.exit_code == 1
        assert message in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
