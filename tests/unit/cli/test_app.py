# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for the jslintr CLI entry point and commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from jslintr.cli import main
from jslintr.cli.commands.check import CLEAN_MESSAGE
from jslintr.engines.loader import bundled_engine_root

pytestmark = [pytest.mark.unit, pytest.mark.cli]


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    _ = (tmp_path / "dirty.js").write_text("var x = 5", encoding="utf-8")
    _ = (tmp_path / "clean.js").write_text('"use strict";\nvar x = 5;\n', encoding="utf-8")
    return tmp_path


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "jslintr 0.1.0"


def test_missing_command_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main([])
    assert excinfo.value.code == 2


def test_check_clean_file_prints_fresh(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["check", "clean.js", "--engine-dir", str(engine_dir)]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == CLEAN_MESSAGE
    assert captured.err == ""


def test_check_dirty_file_reports_to_stderr(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = main(["check", "dirty.js", "clean.js", "--engine", "jslint", "--engine-dir", str(engine_dir)])
    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err == (
        "\nIn [dirty.js]:\n"
        'Error at line 1 character 1: Missing "use strict" statement.\n'
        "  var x = 5\n"
        "Error at line 1 character 10: Missing semicolon.\n"
        "  var x = 5\n"
        "\n"
    )


def test_check_option_overrides_apply(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = (workspace / "dirty.js").write_text("var x = 5;", encoding="utf-8")
    args = ["check", "dirty.js", "--engine-dir", str(engine_dir), "-o", "strict=false"]
    assert main(args) == 0
    assert CLEAN_MESSAGE in capsys.readouterr().out


def test_check_json_output(workspace: Path, engine_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["check", "dirty.js", "clean.js", "--engine-dir", str(engine_dir), "--out", "json"])
    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert [entry["path"] for entry in payload] == ["dirty.js", "clean.js"]
    assert payload[0]["clean"] is False
    assert payload[0]["diagnostics"][1] == {
        "line": 1,
        "character": 10,
        "reason": "Missing semicolon.",
        "evidence": "var x = 5",
    }
    assert payload[1] == {"path": "clean.js", "clean": True, "diagnostics": []}


def test_check_reads_config_file_from_project(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = (workspace / "jslintr.toml").write_text(
        f'engine = "jslint"\nengine_dir = {json.dumps(str(engine_dir))}\n\n[options]\nstrict = false\n',
        encoding="utf-8",
    )
    _ = (workspace / "dirty.js").write_text("if (a) b();", encoding="utf-8")
    assert main(["check", "dirty.js"]) == 0
    assert CLEAN_MESSAGE in capsys.readouterr().out


def test_check_missing_engine_exits_two(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["check", "clean.js", "--engine-dir", str(workspace / "nowhere")]) == 2
    assert "not found" in capsys.readouterr().err


def test_check_unknown_engine_exits_two(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["check", "clean.js", "--engine", "eslint"]) == 2
    assert "Unknown engine variant 'eslint'" in capsys.readouterr().err


def test_check_bad_option_token_exits_two(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["check", "clean.js", "--engine-dir", str(engine_dir), "-o", "strict"]) == 2
    assert "Expected NAME=VALUE" in capsys.readouterr().err


def test_check_missing_file_exits_two(workspace: Path, engine_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["check", "missing.js", "--engine-dir", str(engine_dir)]) == 2
    assert "missing.js" in capsys.readouterr().err


def test_check_json_logging_goes_to_stderr(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    args = ["check", "clean.js", "--engine-dir", str(engine_dir), "--log-format", "json", "--log-level", "debug"]
    assert main(args) == 0
    records = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert records
    assert {record["logger"] for record in records} >= {"jslintr.engine", "jslintr.engine.sandbox"}
    checked = next(record for record in records if record["message"].startswith("Checked clean.js"))
    assert checked["component"] == "engine"
    assert checked["engine"] == "jshint"
    assert checked["diagnostics"] == 0


def test_options_command_lists_resolved_values(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    args = ["options", "--engine", "jslint", "--engine-dir", str(engine_dir), "-o", "white=true", "-o", "maxlen=80"]
    assert main([*args, "--out", "json"]) == 0
    rows = {row["option"]: row for row in json.loads(capsys.readouterr().out)}
    assert len(rows) == 28
    assert rows["white"]["value"] is True
    assert rows["maxlen"] == {"option": "maxlen", "value": 80, "description": "(passed through)"}
    assert rows["strict"]["description"] == 'require the "use strict"; pragma'


def test_options_command_text_table(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["options"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split(" | ")[0].strip() == "option"
    assert any(line.startswith("curly ") and "| true" in line for line in lines)


def test_engines_list_reports_installation(
    workspace: Path,
    engine_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["engines", "list", "--engine-dir", str(engine_dir), "--out", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [(row["engine"], row["entrypoint"], row["installed"]) for row in rows] == [
        ("jslint", "JSLINT", True),
        ("jshint", "JSHINT", True),
    ]


def test_engines_list_missing_scripts(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["engines", "list", "--engine-dir", str(workspace), "--out", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert all(row["installed"] is False for row in rows)
    assert rows[0]["script"] == str(workspace / "jslint.js")


def test_engines_list_defaults_to_bundled_scripts(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["engines", "list", "--out", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert all(row["installed"] is True for row in rows)
    assert all(len(row["sha256"]) == 12 for row in rows)
    assert rows[0]["script"] == str(bundled_engine_root() / "jslint.js")
