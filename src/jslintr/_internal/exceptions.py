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

"""Common exception hierarchy for jslintr."""

from __future__ import annotations

__all__ = [
    "EngineExecutionError",
    "EngineNotFoundError",
    "JslintrError",
    "JslintrValidationError",
    "MalformedDiagnosticError",
]


class JslintrError(Exception):
    """Base error for all jslintr exceptions."""


class JslintrValidationError(JslintrError, ValueError):
    """Raised when input data fails validation checks."""


class EngineNotFoundError(JslintrError, LookupError):
    """Raised when a requested engine variant has no bundled script.

    Attributes:
        variant: The variant name exactly as the caller supplied it.
        path: Script location that was probed, when the variant itself is known.
    """

    def __init__(self, variant: str, path: object | None = None) -> None:
        self.variant = variant
        self.path = path
        if path is None:
            message = f"Unknown engine variant '{variant}'"
        else:
            message = f"Engine script for '{variant}' not found at {path}"
        super().__init__(message)


class EngineExecutionError(JslintrError, RuntimeError):
    """Raised when the engine script fails inside its sandbox.

    Attributes:
        engine: Name of the engine variant that was running.
        detail: Message reported by the embedded interpreter.
    """

    def __init__(self, engine: str, detail: str) -> None:
        self.engine = engine
        self.detail = detail
        super().__init__(f"{engine} failed: {detail}")


class MalformedDiagnosticError(JslintrError, ValueError):
    """Raised when an engine emits a diagnostic record that cannot be read.

    Attributes:
        index: Position of the record in the engine's error list.
        record: The offending record as decoded from the sandbox.
        reason: Short description of what is wrong with the record.
    """

    def __init__(self, index: int, record: object, reason: str) -> None:
        self.index = index
        self.record = record
        self.reason = reason
        super().__init__(f"Malformed diagnostic #{index}: {reason} ({record!r})")
