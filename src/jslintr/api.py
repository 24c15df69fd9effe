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

"""High-level helpers for checking text and files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from jslintr.checker import Checker
from jslintr.core.model_types import LogComponent
from jslintr.core.types import FileReport
from jslintr.engines.collector import format_diagnostics
from jslintr.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from jslintr.core.model_types import EngineVariant

logger: logging.Logger = logging.getLogger("jslintr.engine")


def check_text(
    text: str,
    options: Mapping[str, object] | None = None,
    variant: str | EngineVariant | None = None,
) -> str | None:
    """Check one piece of text with a throwaway checker."""
    return Checker(options, variant).check(text)


def check_files(paths: Iterable[Path | str], checker: Checker) -> list[FileReport]:
    """Check each file with ``checker``, in the given order.

    Files are read as UTF-8. Engine failures propagate; they stop the batch.

    Args:
        paths: Files to check.
        checker: Configured checker shared by every file.

    Returns:
        One report per file, clean files included.
    """
    reports: list[FileReport] = []
    for raw_path in paths:
        path = Path(raw_path)
        result = checker.run(path.read_text(encoding="utf-8"))
        reports.append(
            FileReport(
                path=path,
                report=format_diagnostics(result.diagnostics),
                diagnostics=result.diagnostics,
            ),
        )
        logger.info(
            "Checked %s: %s findings",
            path,
            len(result.diagnostics),
            extra=structured_extra(
                component=LogComponent.ENGINE,
                engine=checker.variant,
                path=path,
                duration_ms=result.duration_ms,
                diagnostics=len(result.diagnostics),
            ),
        )
    return reports


def render_batch(reports: Iterable[FileReport]) -> str | None:
    """Join the reports of files with findings into ``In [path]:`` blocks.

    Returns:
        The combined text, or ``None`` when every file is clean.
    """
    blocks = [f"\nIn [{report.path}]:\n{report.report}\n" for report in reports if report.report is not None]
    if not blocks:
        return None
    return "\n".join(blocks)


__all__ = ["check_files", "check_text", "render_batch"]
