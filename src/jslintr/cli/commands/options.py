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

"""``jslintr options``: show the resolved option set for an engine."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from jslintr.cli.context import build_checker
from jslintr.cli.helpers import echo, register_engine_options, render_data
from jslintr.config.options import option_descriptions
from jslintr.core.model_types import DataFormat

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jslintr.cli.types import SubparserCollection


def register_options_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``jslintr options`` command to the CLI."""
    options = subparsers.add_parser(
        "options",
        help="Show resolved analyzer options",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_engine_options(options)


def execute_options(args: argparse.Namespace) -> int:
    checker = build_checker(args)
    descriptions = option_descriptions(checker.variant)
    rows: list[dict[str, object]] = [
        {"option": name, "value": value, "description": descriptions.get(name, "(passed through)")}
        for name, value in checker.store.snapshot().items()
    ]
    for line in render_data(rows, DataFormat.from_str(args.out), headers=("option", "value", "description")):
        echo(line)
    return 0


__all__ = ["execute_options", "register_options_command"]
