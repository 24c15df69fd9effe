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

"""``jslintr engines``: inspect the installed engine scripts."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from jslintr.cli.helpers import echo, register_argument, render_data
from jslintr.core.model_types import DataFormat
from jslintr.engines.loader import EngineLoader

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jslintr.cli.types import SubparserCollection


def register_engines_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``jslintr engines`` command to the CLI."""
    engines = subparsers.add_parser(
        "engines",
        help="Inspect engine scripts",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    engines_sub = engines.add_subparsers(dest="engines_action", required=True)
    engines_list = engines_sub.add_parser(
        "list",
        help="List engine variants and their scripts",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        engines_list,
        "--engine-dir",
        type=Path,
        default=None,
        help="Directory containing jslint.js/jshint.js.",
    )
    register_argument(
        engines_list,
        "--out",
        choices=[fmt.value for fmt in DataFormat],
        default=DataFormat.TEXT.value,
        help="Output format.",
    )


def _handle_list(args: argparse.Namespace) -> int:
    engine_dir: Path | None = getattr(args, "engine_dir", None)
    loader = EngineLoader(engine_dir)
    rows: list[dict[str, object]] = [
        {
            "engine": variant.value,
            "entrypoint": variant.entrypoint,
            "script": str(path or loader.root / variant.script_name),
            "installed": path is not None,
            "sha256": loader.load(variant).digest[:12] if path is not None else "",
        }
        for variant, path in loader.available().items()
    ]
    headers = ("engine", "entrypoint", "installed", "sha256", "script")
    for line in render_data(rows, DataFormat.from_str(args.out), headers=headers):
        echo(line)
    return 0


def execute_engines(args: argparse.Namespace) -> int:
    """Execute the engines subcommand.

    Raises:
        SystemExit: If the requested action is unknown.
    """
    action_value = getattr(args, "engines_action", None)
    if action_value == "list":
        return _handle_list(args)
    msg = f"Unknown engines action '{action_value}'"
    raise SystemExit(msg)


__all__ = ["execute_engines", "register_engines_command"]
