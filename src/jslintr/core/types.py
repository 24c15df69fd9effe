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

"""Core data classes for analyzer diagnostics and check results.

Positions are stored exactly as the engine reports them (0-indexed). The
1-indexed values used in human-readable output are derived on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .model_types import EngineVariant


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """Immutable record of a single analyzer finding.

    Attributes:
        line: Line of the finding, 0-indexed as reported by the engine.
        character: Column of the finding, 0-indexed as reported by the engine.
        reason: Human-readable message from the engine.
        evidence: The offending source line, verbatim.
    """

    line: int
    character: int
    reason: str
    evidence: str = ""

    @property
    def display_line(self) -> int:
        return self.line + 1

    @property
    def display_character(self) -> int:
        return self.character + 1

    def to_dict(self) -> dict[str, object]:
        return {
            "line": self.display_line,
            "character": self.display_character,
            "reason": self.reason,
            "evidence": self.evidence,
        }


@dataclass(slots=True, frozen=True)
class CheckResult:
    """Outcome of one sandboxed engine run.

    Attributes:
        engine: Variant that produced the diagnostics.
        diagnostics: Findings in the order the engine emitted them.
        duration_ms: Wall-clock time spent inside the sandbox.
        skipped: Number of engine records dropped as malformed.
    """

    engine: EngineVariant
    diagnostics: tuple[Diagnostic, ...]
    duration_ms: float
    skipped: int = 0

    @property
    def clean(self) -> bool:
        return not self.diagnostics


@dataclass(slots=True, frozen=True)
class FileReport:
    """Formatted report for one file checked in a batch.

    Attributes:
        path: File that was checked.
        report: Formatted findings, or ``None`` when the file is clean.
        diagnostics: Structured findings backing ``report``.
    """

    path: Path
    report: str | None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def clean(self) -> bool:
        return self.report is None


__all__ = ["CheckResult", "Diagnostic", "FileReport"]
