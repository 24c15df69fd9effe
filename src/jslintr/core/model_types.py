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

"""Model types and enumerations for jslintr.

The enums here are shared by the configuration layer, the engine adapter and
the CLI. Each exposes a ``from_str`` constructor that accepts user input in
any letter case.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final, Self

from .type_aliases import EntryPoint


_LABELS: Final[dict[str, str]] = {
    "EngineVariant": "engine variant",
    "MalformedPolicy": "malformed diagnostic policy",
    "LogFormat": "log format",
    "LogComponent": "log component",
    "DataFormat": "output format",
}


class _ChoiceEnum(StrEnum):
    """String enum parsed from user input in any letter case."""

    @classmethod
    def from_str(cls, raw: str) -> Self:
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            label = _LABELS.get(cls.__name__, "value")
            raise ValueError(f"Unknown {label} '{raw}'") from exc


class EngineVariant(_ChoiceEnum):
    """Analyzer flavours that jslintr knows how to drive.

    Attributes:
        JSLINT: Douglas Crockford's strict linter.
        JSHINT: The community fork that tolerates common idioms.
    """

    JSLINT = "jslint"
    JSHINT = "jshint"

    @property
    def entrypoint(self) -> EntryPoint:
        """Global function the engine script defines (``JSLINT``/``JSHINT``)."""
        return EntryPoint(self.value.upper())

    @property
    def script_name(self) -> str:
        return f"{self.value}.js"


DEFAULT_VARIANT: EngineVariant = EngineVariant.JSHINT


class MalformedPolicy(_ChoiceEnum):
    """What to do with an engine record that lacks required fields."""

    SKIP = "skip"
    FAIL = "fail"


class LogFormat(_ChoiceEnum):
    TEXT = "text"
    JSON = "json"


class LogComponent(_ChoiceEnum):
    """Subsystem tag carried by structured log records.

    Attributes:
        ENGINE: Engine script loading and orchestration.
        SANDBOX: Per-check interpreter contexts.
        CONFIG: Option resolution and config file loading.
        CLI: Command dispatch.
    """

    ENGINE = "engine"
    SANDBOX = "sandbox"
    CONFIG = "config"
    CLI = "cli"


class DataFormat(_ChoiceEnum):
    TEXT = "text"
    JSON = "json"


__all__ = [
    "DEFAULT_VARIANT",
    "DataFormat",
    "EngineVariant",
    "LogComponent",
    "LogFormat",
    "MalformedPolicy",
]
