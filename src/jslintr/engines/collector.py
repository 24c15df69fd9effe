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

"""Collection and formatting of engine diagnostics.

The sandbox hands the engine's error list across the boundary as JSON text.
``ResultCollector`` decodes it into :class:`~jslintr.core.types.Diagnostic`
records in emission order, and :func:`format_diagnostics` renders them as
the two-line-per-finding report::

    Error at line 1 character 10: Missing semicolon.
      var x = 5

Record policy: ``null`` entries (JSLint appends one when it gives up early)
are dropped silently. Records missing ``line``, ``character`` or ``reason``,
or carrying non-integer positions, are malformed; under
``MalformedPolicy.SKIP`` they are logged and dropped, under
``MalformedPolicy.FAIL`` the whole check raises ``MalformedDiagnosticError``.
A missing ``evidence`` renders as an empty string.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Final, cast

from jslintr.core.model_types import EngineVariant, LogComponent, MalformedPolicy
from jslintr.core.types import Diagnostic
from jslintr.exceptions import EngineExecutionError, MalformedDiagnosticError
from jslintr.json import decode_records
from jslintr.logging import structured_extra

logger: logging.Logger = logging.getLogger("jslintr.engine")

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("line", "character", "reason")


def _as_position(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_record(index: int, record: object) -> Diagnostic:
    """Convert one decoded engine record into a diagnostic.

    Args:
        index: Position of the record in the engine's list (for error messages).
        record: Decoded JSON value.

    Returns:
        Diagnostic: The parsed finding.

    Raises:
        MalformedDiagnosticError: If the record is not an object, lacks a
            required field, or has a non-integer position.
    """
    if not isinstance(record, Mapping):
        raise MalformedDiagnosticError(index, record, "record is not an object")
    data = cast("Mapping[str, object]", record)
    missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        raise MalformedDiagnosticError(index, record, f"missing {', '.join(missing)}")
    line = _as_position(data["line"])
    character = _as_position(data["character"])
    if line is None or character is None:
        raise MalformedDiagnosticError(index, record, "line and character must be integers")
    evidence = data.get("evidence")
    return Diagnostic(
        line=line,
        character=character,
        reason=str(data["reason"]),
        evidence="" if evidence is None else str(evidence),
    )


class ResultCollector:
    """Receives the engine's diagnostics from inside a sandbox.

    :meth:`receive` takes the JSON text the glue script evaluates to. It only
    stores the payload; decoding happens in :meth:`collect` so that malformed
    output is reported as a host-side error.
    """

    def __init__(self, engine: EngineVariant, *, policy: MalformedPolicy = MalformedPolicy.SKIP) -> None:
        self.engine = engine
        self.policy = policy
        self._payloads: list[str] = []
        self.skipped = 0

    @property
    def received(self) -> bool:
        return bool(self._payloads)

    def receive(self, payload: object) -> None:
        self._payloads.append(payload if isinstance(payload, str) else str(payload))

    def collect(self) -> list[Diagnostic]:
        """Decode every received payload into diagnostics, preserving order.

        Raises:
            EngineExecutionError: If a payload is not a JSON array.
            MalformedDiagnosticError: Under the ``fail`` policy, for the first
                malformed record.
        """
        diagnostics: list[Diagnostic] = []
        self.skipped = 0
        for payload in self._payloads:
            try:
                records = decode_records(payload)
            except ValueError as exc:
                raise EngineExecutionError(self.engine, f"unreadable diagnostics payload: {exc}") from exc
            diagnostics.extend(self._parse_all(records))
        return diagnostics

    @staticmethod
    def format(diagnostics: Iterable[Diagnostic]) -> str | None:
        """Render diagnostics as the line-oriented report; see :func:`format_diagnostics`."""
        return format_diagnostics(diagnostics)

    def _parse_all(self, records: Iterable[object]) -> list[Diagnostic]:
        parsed: list[Diagnostic] = []
        for index, record in enumerate(records):
            if record is None:
                continue
            try:
                parsed.append(parse_record(index, record))
            except MalformedDiagnosticError as exc:
                if self.policy is MalformedPolicy.FAIL:
                    raise
                self.skipped += 1
                logger.warning(
                    "Skipping malformed %s diagnostic: %s",
                    self.engine,
                    exc.reason,
                    extra=structured_extra(
                        component=LogComponent.ENGINE,
                        engine=self.engine,
                        details={"index": exc.index},
                    ),
                )
        return parsed


def format_diagnostic(diagnostic: Diagnostic) -> tuple[str, str]:
    """Render one diagnostic as its locator line and evidence line."""
    return (
        f"Error at line {diagnostic.display_line} character {diagnostic.display_character}: {diagnostic.reason}",
        f"  {diagnostic.evidence}",
    )


def format_diagnostics(diagnostics: Iterable[Diagnostic]) -> str | None:
    """Render diagnostics in order as a newline-joined report.

    Returns:
        The report text, or ``None`` when there are no diagnostics.
    """
    lines: list[str] = []
    for diagnostic in diagnostics:
        lines.extend(format_diagnostic(diagnostic))
    if not lines:
        return None
    return "\n".join(lines)


__all__ = [
    "REQUIRED_FIELDS",
    "ResultCollector",
    "format_diagnostic",
    "format_diagnostics",
    "parse_record",
]
