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

"""Unit tests for Config Options."""

from __future__ import annotations

import pytest

from jslintr.config.options import (
    OPTION_MODELS,
    JSHintOptions,
    JSLintOptions,
    base_defaults,
    option_descriptions,
    variant_extra_defaults,
)
from jslintr.core.model_types import EngineVariant

pytestmark = pytest.mark.unit

JSHINT_ONLY = {"asi", "boss", "curly", "devel", "noarg", "noempty", "nonew"}


def test_base_profile_declares_twenty_seven_options() -> None:
    defaults = base_defaults()
    assert len(defaults) == 27
    assert defaults["strict"] is True
    assert defaults["eqeqeq"] is True
    assert defaults["evil"] is False
    assert defaults["white"] is False


def test_jshint_profile_extends_base_with_its_own_switches() -> None:
    extras = variant_extra_defaults(EngineVariant.JSHINT)
    assert set(extras) == JSHINT_ONLY
    assert extras["curly"] is True
    assert extras["asi"] is False
    assert set(JSHintOptions.model_fields) == set(JSLintOptions.model_fields) | JSHINT_ONLY


def test_jslint_has_no_extra_defaults() -> None:
    assert variant_extra_defaults(EngineVariant.JSLINT) == {}


def test_option_models_map_each_variant() -> None:
    assert OPTION_MODELS[EngineVariant.JSLINT] is JSLintOptions
    assert OPTION_MODELS[EngineVariant.JSHINT] is JSHintOptions


def test_option_descriptions_cover_every_declared_field() -> None:
    descriptions = option_descriptions(EngineVariant.JSHINT)
    assert set(descriptions) == set(JSHintOptions.model_fields)
    assert descriptions["strict"] == 'require the "use strict"; pragma'
    assert all(descriptions.values())


def test_option_records_do_not_validate_values() -> None:
    record = JSLintOptions.model_construct(strict="sometimes", predef=["jQuery"])
    assert record.strict == "sometimes"
    assert record.__pydantic_extra__ == {"predef": ["jQuery"]}
    record.white = 4
    assert record.white == 4
