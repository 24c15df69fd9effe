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

"""Unit tests for Checker."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from jslintr.checker import Checker
from jslintr.config.loader import LoadedConfig
from jslintr.config.models import CheckerSettings
from jslintr.config.options import JSHintOptions, JSLintOptions
from jslintr.core.model_types import EngineVariant, MalformedPolicy
from jslintr.engines.loader import EngineLoader
from jslintr.exceptions import EngineExecutionError, EngineNotFoundError, MalformedDiagnosticError

pytestmark = [pytest.mark.unit, pytest.mark.engine]

STRICT_CLEAN = '"use strict";\nvar x = 5;\n'


def test_default_variant_is_jshint(engine_settings: CheckerSettings) -> None:
    checker = Checker(settings=engine_settings)
    assert checker.variant is EngineVariant.JSHINT
    assert isinstance(checker.options, JSHintOptions)


def test_variant_argument_overrides_settings(engine_settings: CheckerSettings) -> None:
    checker = Checker(variant="JSLint", settings=engine_settings)
    assert checker.variant is EngineVariant.JSLINT
    assert type(checker.options) is JSLintOptions
    assert checker.settings.engine == "JSLint"
    assert checker.settings.engine_dir == engine_settings.engine_dir


def test_unknown_variant_raises_engine_not_found() -> None:
    with pytest.raises(EngineNotFoundError, match="Unknown engine variant 'eslint'"):
        _ = Checker(variant="eslint")


def test_missing_script_raises_engine_not_found_on_check(tmp_path: Path) -> None:
    checker = Checker(variant="jslint", settings=CheckerSettings(engine_dir=tmp_path))
    with pytest.raises(EngineNotFoundError, match="not found"):
        _ = checker.check("var x;")


def test_check_reports_findings_one_indexed(engine_settings: CheckerSettings) -> None:
    report = Checker(variant="jslint", settings=engine_settings).check("var x = 5")
    assert report == "\n".join([
        'Error at line 1 character 1: Missing "use strict" statement.',
        "  var x = 5",
        "Error at line 1 character 10: Missing semicolon.",
        "  var x = 5",
    ])


def test_clean_input_returns_none(engine_settings: CheckerSettings) -> None:
    assert Checker(variant="jslint", settings=engine_settings).check(STRICT_CLEAN) is None
    assert Checker(variant="jshint", settings=engine_settings).check(STRICT_CLEAN) is None


def test_option_accessors_affect_later_checks(engine_settings: CheckerSettings) -> None:
    checker = Checker(variant="jslint", settings=engine_settings)
    assert checker.check("var x = 5;") is not None
    checker.options.strict = False
    assert checker.get("strict") is False
    assert checker.check("var x = 5;") is None
    checker["strict"] = True
    assert checker["strict"] is True
    assert checker.check("var x = 5;") is not None
    checker.set("strict", False)
    assert checker.check("var x = 5;") is None


def test_constructor_overrides_win_over_defaults(engine_settings: CheckerSettings) -> None:
    checker = Checker({"evil": True}, "jslint", settings=engine_settings)
    assert checker.get("evil") is True
    assert checker.check('"use strict";\neval("1");\n') is None
    assert Checker(variant="jslint", settings=engine_settings).check('"use strict";\neval("1");\n') == "\n".join([
        "Error at line 2 character 1: eval is evil.",
        '  eval("1");',
    ])


def test_unknown_options_are_stored_and_forwarded(engine_settings: CheckerSettings) -> None:
    checker = Checker({"predef": ["jQuery"]}, "jshint", settings=engine_settings)
    assert "predef" in checker
    assert checker.store.snapshot()["predef"] == ["jQuery"]
    assert checker.check(STRICT_CLEAN) is None


def test_engine_script_is_loaded_once(engine_settings: CheckerSettings, monkeypatch: pytest.MonkeyPatch) -> None:
    loader = EngineLoader(engine_settings.engine_dir)
    calls: list[object] = []
    original = loader.load

    def counting_load(variant: object) -> object:
        calls.append(variant)
        return original(variant)  # type: ignore[arg-type]

    monkeypatch.setattr(loader, "load", counting_load)
    checker = Checker(variant="jslint", settings=engine_settings, loader=loader)
    _ = checker.check("var a = 1;")
    _ = checker.check("var b = 2;")
    assert calls == [EngineVariant.JSLINT]
    assert checker.loader is loader


def test_engine_failure_is_never_reported_clean(tmp_path: Path) -> None:
    (tmp_path / "jshint.js").write_text('var JSHINT = function () { throw new TypeError("bad"); };', encoding="utf-8")
    checker = Checker(settings=CheckerSettings(engine_dir=tmp_path))
    with pytest.raises(EngineExecutionError, match="bad"):
        _ = checker.check("var x;")


def test_malformed_policy_comes_from_settings(tmp_path: Path) -> None:
    (tmp_path / "jslint.js").write_text(
        "var JSLINT = function () { JSLINT.errors = [{line: 0}]; };",
        encoding="utf-8",
    )
    lenient = Checker(variant="jslint", settings=CheckerSettings(engine_dir=tmp_path))
    strict = Checker(
        variant="jslint",
        settings=CheckerSettings(engine_dir=tmp_path, malformed_policy=MalformedPolicy.FAIL),
    )
    assert lenient.check("") is None
    assert lenient.run("").skipped == 1
    with pytest.raises(MalformedDiagnosticError):
        _ = strict.check("")


def test_from_config_merges_file_and_call_options(engine_dir: Path) -> None:
    loaded = LoadedConfig(
        settings=CheckerSettings(engine="jslint", engine_dir=engine_dir),
        options={"strict": False, "white": True},
    )
    checker = Checker.from_config(loaded, options={"white": False})
    assert checker.variant is EngineVariant.JSLINT
    assert checker.get("strict") is False
    assert checker.get("white") is False


def test_checker_is_usable_from_several_threads(engine_settings: CheckerSettings) -> None:
    checker = Checker(variant="jslint", settings=engine_settings)
    expected = checker.check("var x = 5")
    results: list[str | None] = []
    lock = threading.Lock()

    def worker() -> None:
        report = checker.check("var x = 5")
        with lock:
            results.append(report)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == [expected] * 4


def test_repr_mentions_variant(engine_settings: CheckerSettings) -> None:
    assert repr(Checker(variant="jslint", settings=engine_settings)) == "Checker(variant='jslint', options=27)"
