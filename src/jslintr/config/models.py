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

"""Configuration models and validation errors for jslintr.

``CheckerSettings`` carries everything about a checker that is not an
analyzer option: which engine to run, where its script lives, the sandbox
limits, and how malformed engine output is treated. ``ConfigModel`` is the
schema of a ``jslintr.toml`` file (or a ``[tool.jslintr]`` table), which
combines settings with an ``[options]`` table of analyzer options.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationInfo, field_validator

from jslintr.core.model_types import DEFAULT_VARIANT, EngineVariant, MalformedPolicy
from jslintr.exceptions import JslintrValidationError

DEFAULT_TIME_LIMIT: Final[int] = 10
DEFAULT_MEMORY_LIMIT: Final[int] = 256 * 1024 * 1024


class ConfigValidationError(JslintrValidationError):
    """Base for errors in jslintr settings, config files and option overrides."""


class ConfigReadError(ConfigValidationError):
    """A config file exists but could not be read or is not valid TOML.

    Attributes:
        path: The file that failed.
        error: The I/O or TOML error that was raised.
    """

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """A config file parsed but its jslintr table is missing or has bad values."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid jslintr configuration in {path}: {error}")


class InvalidOptionAssignmentError(ConfigValidationError):
    """Raised when a ``NAME=VALUE`` option override cannot be parsed."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Expected NAME=VALUE for option override, got '{token}'")


def _positive_or_none(value: int | None, field: str) -> int | None:
    if value is None:
        return None
    if value <= 0:
        message = f"{field} must be a positive integer"
        raise ValueError(message)
    return value


class CheckerSettings(BaseModel):
    """Runtime settings for one checker instance.

    Attributes:
        engine: Engine variant name, matched case-insensitively when the engine
            is loaded so that an unknown name surfaces as ``EngineNotFoundError``.
        engine_dir: Directory holding ``jslint.js``/``jshint.js``. ``None``
            selects ``JSLINTR_ENGINE_DIR`` or the bundled resources.
        time_limit: Seconds a single check may run inside its sandbox.
        memory_limit: Bytes of heap a single sandbox may allocate.
        max_stack_size: Interpreter stack size in bytes, ``None`` for the
            interpreter default.
        malformed_policy: Whether malformed engine records are skipped or fail
            the check.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    engine: str = DEFAULT_VARIANT.value
    engine_dir: Path | None = None
    time_limit: int | None = DEFAULT_TIME_LIMIT
    memory_limit: int | None = DEFAULT_MEMORY_LIMIT
    max_stack_size: int | None = None
    malformed_policy: MalformedPolicy = MalformedPolicy.SKIP

    @field_validator("time_limit", "memory_limit", "max_stack_size")
    @classmethod
    def _check_limits(cls, value: int | None, info: ValidationInfo) -> int | None:
        return _positive_or_none(value, info.field_name or "limit")

    @field_validator("malformed_policy", mode="before")
    @classmethod
    def _coerce_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return MalformedPolicy.from_str(value)
        return value


class ConfigModel(BaseModel):
    """Schema of a jslintr configuration file."""

    model_config = ConfigDict(extra="forbid")

    engine: str = DEFAULT_VARIANT.value
    engine_dir: Path | None = None
    time_limit: int | None = DEFAULT_TIME_LIMIT
    memory_limit: int | None = DEFAULT_MEMORY_LIMIT
    max_stack_size: int | None = None
    malformed_policy: MalformedPolicy = MalformedPolicy.SKIP
    options: dict[str, JsonValue] = Field(default_factory=dict)

    @field_validator("time_limit", "memory_limit", "max_stack_size")
    @classmethod
    def _check_limits(cls, value: int | None, info: ValidationInfo) -> int | None:
        return _positive_or_none(value, info.field_name or "limit")

    @field_validator("engine")
    @classmethod
    def _known_engine(cls, value: str) -> str:
        return EngineVariant.from_str(value).value

    @field_validator("malformed_policy", mode="before")
    @classmethod
    def _coerce_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return MalformedPolicy.from_str(value)
        return value

    def to_settings(self, *, base_dir: Path | None = None) -> CheckerSettings:
        """Build runtime settings, resolving ``engine_dir`` against ``base_dir``."""
        engine_dir = self.engine_dir
        if engine_dir is not None and base_dir is not None and not engine_dir.is_absolute():
            engine_dir = (base_dir / engine_dir).resolve()
        return CheckerSettings(
            engine=self.engine,
            engine_dir=engine_dir,
            time_limit=self.time_limit,
            memory_limit=self.memory_limit,
            max_stack_size=self.max_stack_size,
            malformed_policy=self.malformed_policy,
        )


__all__ = [
    "DEFAULT_MEMORY_LIMIT",
    "DEFAULT_TIME_LIMIT",
    "CheckerSettings",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "InvalidOptionAssignmentError",
]
