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

"""Unit tests for Config Loader."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from jslintr.config.loader import load_config
from jslintr.config.models import (
    DEFAULT_TIME_LIMIT,
    CheckerSettings,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    InvalidOptionAssignmentError,
)
from jslintr.core.model_types import MalformedPolicy
from jslintr.exceptions import JslintrValidationError

pytestmark = pytest.mark.unit


def _write(path: Path, content: str) -> Path:
    path.write_text(dedent(content), encoding="utf-8")
    return path


def test_load_config_defaults_when_no_file(tmp_path: Path) -> None:
    loaded = load_config(start=tmp_path)
    assert loaded.path is None
    assert loaded.options == {}
    assert loaded.settings == CheckerSettings()
    assert loaded.settings.engine == "jshint"
    assert loaded.settings.time_limit == DEFAULT_TIME_LIMIT


def test_load_config_reads_standalone_file(tmp_path: Path) -> None:
    config = _write(
        tmp_path / "jslintr.toml",
        """
        engine = "JSLint"
        time_limit = 3
        malformed_policy = "fail"

        [options]
        strict = false
        predef = ["jQuery"]
        """,
    )
    loaded = load_config(start=tmp_path)
    assert loaded.path == config.resolve()
    assert loaded.settings.engine == "jslint"
    assert loaded.settings.time_limit == 3
    assert loaded.settings.malformed_policy is MalformedPolicy.FAIL
    assert loaded.options == {"strict": False, "predef": ["jQuery"]}


def test_load_config_prefers_jslintr_toml_over_pyproject(tmp_path: Path) -> None:
    _ = _write(tmp_path / "pyproject.toml", '[tool.jslintr]\nengine = "jslint"\n')
    _ = _write(tmp_path / "jslintr.toml", 'engine = "jshint"\n')
    assert load_config(start=tmp_path).settings.engine == "jshint"


def test_load_config_reads_pyproject_tool_table(tmp_path: Path) -> None:
    _ = _write(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.jslintr]
        engine = "jslint"

        [tool.jslintr.options]
        white = true
        """,
    )
    loaded = load_config(start=tmp_path)
    assert loaded.settings.engine == "jslint"
    assert loaded.options == {"white": True}


def test_pyproject_without_tool_table_is_skipped(tmp_path: Path) -> None:
    _ = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    loaded = load_config(start=tmp_path)
    assert loaded.path is None


def test_engine_dir_is_resolved_relative_to_config(tmp_path: Path) -> None:
    _ = _write(tmp_path / ".jslintr.toml", 'engine_dir = "vendor/js"\n')
    loaded = load_config(start=tmp_path)
    assert loaded.settings.engine_dir == (tmp_path / "vendor" / "js").resolve()


def test_explicit_missing_file_raises_read_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError):
        _ = load_config(tmp_path / "missing.toml")


def test_explicit_pyproject_without_table_is_invalid(tmp_path: Path) -> None:
    config = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    with pytest.raises(InvalidConfigFileError, match="does not define jslintr configuration"):
        _ = load_config(config)


def test_invalid_toml_raises_read_error(tmp_path: Path) -> None:
    _ = _write(tmp_path / "jslintr.toml", "engine = \n")
    with pytest.raises(ConfigReadError) as excinfo:
        _ = load_config(start=tmp_path)
    assert isinstance(excinfo.value, JslintrValidationError)


@pytest.mark.parametrize(
    "content",
    [
        'engine = "eslint"\n',
        "time_limit = 0\n",
        'unknown_key = "x"\n',
        'malformed_policy = "ignore"\n',
    ],
)
def test_invalid_values_raise_invalid_config(tmp_path: Path, content: str) -> None:
    _ = _write(tmp_path / "jslintr.toml", content)
    with pytest.raises(InvalidConfigFileError):
        _ = load_config(start=tmp_path)


def test_checker_settings_reject_non_positive_limits() -> None:
    with pytest.raises(ValidationError, match="memory_limit must be a positive integer"):
        _ = CheckerSettings(memory_limit=-1)


def test_checker_settings_allow_disabling_limits() -> None:
    settings = CheckerSettings(time_limit=None, memory_limit=None)
    assert settings.time_limit is None
    assert settings.memory_limit is None


def test_config_model_to_settings_keeps_absolute_engine_dir(tmp_path: Path) -> None:
    model = ConfigModel(engine_dir=tmp_path)
    assert model.to_settings(base_dir=Path("/elsewhere")).engine_dir == tmp_path


def test_invalid_option_assignment_message() -> None:
    error = InvalidOptionAssignmentError("strict")
    assert str(error) == "Expected NAME=VALUE for option override, got 'strict'"
    assert isinstance(error, ValueError)
