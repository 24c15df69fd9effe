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

"""``jslintr check``: lint files and report findings."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

from jslintr.api import check_files, render_batch
from jslintr.cli.context import build_checker
from jslintr.cli.helpers import echo, register_argument, register_engine_options, render_data
from jslintr.core.model_types import DataFormat

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jslintr.cli.types import SubparserCollection
    from jslintr.core.types import FileReport

logger: logging.Logger = logging.getLogger("jslintr.cli")

CLEAN_MESSAGE: Final[str] = "JSLinty-fresh!"
EXIT_CLEAN: Final[int] = 0
EXIT_FINDINGS: Final[int] = 1


def register_check_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``jslintr check`` command to the CLI."""
    check = subparsers.add_parser(
        "check",
        help="Lint JavaScript files",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(check, "paths", nargs="+", type=Path, help="Files to check.")
    register_engine_options(check)


def _json_rows(reports: Sequence[FileReport]) -> list[dict[str, object]]:
    return [
        {
            "path": str(report.path),
            "clean": report.clean,
            "diagnostics": [diagnostic.to_dict() for diagnostic in report.diagnostics],
        }
        for report in reports
    ]


def execute_check(args: argparse.Namespace) -> int:
    """Run ``jslintr check``.

    Returns:
        ``0`` when every file is clean, ``1`` when any file has findings.
    """
    checker = build_checker(args)
    reports = check_files(args.paths, checker)
    fmt = DataFormat.from_str(args.out)
    dirty = any(not report.clean for report in reports)
    if fmt is DataFormat.JSON:
        for line in render_data(_json_rows(reports), fmt, headers=()):
            echo(line)
        return EXIT_FINDINGS if dirty else EXIT_CLEAN
    combined = render_batch(reports)
    if combined is None:
        echo(CLEAN_MESSAGE)
        return EXIT_CLEAN
    echo(combined, err=True)
    return EXIT_FINDINGS


__all__ = ["CLEAN_MESSAGE", "execute_check", "register_check_command"]
