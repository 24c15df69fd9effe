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

"""Option records and default profiles for the supported engine variants.

Each known option is declared once as a field with its default and a short
description. ``JSLintOptions`` is the strict base profile and
``JSHintOptions`` adds the options that only JSHint understands. Both accept
unknown keys, which are kept in the model's extra mapping and forwarded to
the engine untouched.

Values are never validated: records are built with ``model_construct`` and
attribute assignment is unchecked, so whatever the caller stores is what the
engine receives.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

from jslintr.core.model_types import EngineVariant

# Option values are opaque to jslintr; the engine decides what they mean.
OptionValue = Any


class JSLintOptions(BaseModel):
    """Options shared by JSLint and JSHint, with JSLint's strict defaults."""

    model_config = ConfigDict(extra="allow", validate_assignment=False, populate_by_name=True)

    adsafe: OptionValue = Field(default=False, description="if ADsafe should be enforced")
    bitwise: OptionValue = Field(default=True, description="if bitwise operators should not be allowed")
    browser: OptionValue = Field(default=False, description="if the standard browser globals should be predefined")
    cap: OptionValue = Field(default=False, description="if upper case HTML should be allowed")
    css: OptionValue = Field(default=False, description="if CSS workarounds should be tolerated")
    debug: OptionValue = Field(default=False, description="if debugger statements should be allowed")
    eqeqeq: OptionValue = Field(default=True, description="if === should be required")
    evil: OptionValue = Field(default=False, description="if eval should be allowed")
    forin: OptionValue = Field(default=False, description="if for in statements must filter")
    fragment: OptionValue = Field(default=False, description="if HTML fragments should be allowed")
    immed: OptionValue = Field(default=True, description="if immediate invocations must be wrapped in parens")
    laxbreak: OptionValue = Field(default=False, description="if line breaks should not be checked")
    newcap: OptionValue = Field(default=True, description="if constructor names must be capitalized")
    nomen: OptionValue = Field(default=True, description="disallow initial or trailing underscores in names")
    on: OptionValue = Field(default=False, description="if HTML event handlers should be allowed")
    onevar: OptionValue = Field(default=True, description="if only one var statement per function should be allowed")
    passfail: OptionValue = Field(default=False, description="if the scan should stop on first error")
    plusplus: OptionValue = Field(default=True, description="if increment/decrement should not be allowed")
    regexp: OptionValue = Field(default=True, description="if the . should not be allowed in regexp literals")
    rhino: OptionValue = Field(default=False, description="if the Rhino environment globals should be predefined")
    undef: OptionValue = Field(default=True, description="if variables should be declared before used")
    safe: OptionValue = Field(default=False, description="if use of some browser features should be restricted")
    sidebar: OptionValue = Field(default=False, description="if the System object should be predefined")
    strict: OptionValue = Field(default=True, description='require the "use strict"; pragma')
    sub: OptionValue = Field(default=False, description="if all forms of subscript notation are tolerated")
    white: OptionValue = Field(default=False, description="if strict whitespace rules apply")
    widget: OptionValue = Field(default=False, description="if the Yahoo Widgets globals should be predefined")


class JSHintOptions(JSLintOptions):
    """JSLint's options plus the lenient JSHint-only switches."""

    asi: OptionValue = Field(default=False, description="tolerate automatic semicolon insertion")
    boss: OptionValue = Field(
        default=False,
        description="allow foo == null and assignments inside if, for and while conditions",
    )
    curly: OptionValue = Field(default=True, description="require curly braces around logical blocks")
    devel: OptionValue = Field(
        default=False,
        description="allow logging functions that should be removed for production",
    )
    noarg: OptionValue = Field(default=True, description="prohibit use of arguments.caller and arguments.callee")
    noempty: OptionValue = Field(default=True, description="prohibit empty blocks")
    nonew: OptionValue = Field(default=False, description='prohibit construction using "new" for side effects')


OPTION_MODELS: Final[dict[EngineVariant, type[JSLintOptions]]] = {
    EngineVariant.JSLINT: JSLintOptions,
    EngineVariant.JSHINT: JSHintOptions,
}


def _field_defaults(model: type[BaseModel], *, exclude: type[BaseModel] | None = None) -> dict[str, object]:
    skipped = set(exclude.model_fields) if exclude is not None else set()
    return {name: info.default for name, info in model.model_fields.items() if name not in skipped}


def base_defaults() -> dict[str, object]:
    """Defaults shared by every variant (Profile A)."""
    return _field_defaults(JSLintOptions)


def variant_extra_defaults(variant: EngineVariant) -> dict[str, object]:
    """Defaults a variant layers on top of the base profile.

    Args:
        variant: Engine variant to inspect.

    Returns:
        Options declared by the variant's record but not by the base record.
        Empty for JSLint.
    """
    model = OPTION_MODELS[variant]
    if model is JSLintOptions:
        return {}
    return _field_defaults(model, exclude=JSLintOptions)


def option_descriptions(variant: EngineVariant) -> dict[str, str]:
    """Return the documented meaning of every option the variant declares."""
    return {name: info.description or "" for name, info in OPTION_MODELS[variant].model_fields.items()}


__all__ = [
    "OPTION_MODELS",
    "JSHintOptions",
    "JSLintOptions",
    "OptionValue",
    "base_defaults",
    "option_descriptions",
    "variant_extra_defaults",
]
