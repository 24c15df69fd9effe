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

"""Argument, parsing and output helpers shared by CLI commands."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol, cast

from jslintr._internal.utils import consume
from jslintr.config.models import InvalidOptionAssignmentError
from jslintr.core.model_types import DataFormat
from jslintr.json import normalize_enums_for_json


class _TextStream(Protocol):
    def write(self, s: str, /) -> int: ...


class ArgumentRegistrar(Protocol):
    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action: ...  # noqa: ANN401


def echo(message: str, *, newline: bool = True, err: bool = False) -> None:
    """Write a message to stdout/stderr."""
    stream: _TextStream = sys.stderr if err else sys.stdout
    consume(stream.write(message))
    if newline:
        consume(stream.write("\n"))


def register_argument(registrar: ArgumentRegistrar, *args: Any, **kwargs: Any) -> None:  # noqa: ANN401
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


def register_engine_options(parser: argparse.ArgumentParser) -> None:
    """Attach the engine selection and configuration flags used by several commands."""
    register_argument(
        parser,
        "-e",
        "--engine",
        default=None,
        help="Engine variant (jslint or jshint). Defaults to the config file, then jshint.",
    )
    register_argument(
        parser,
        "-o",
        "--option",
        dest="options",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override an analyzer option; repeat as needed. Values are parsed as JSON when possible.",
    )
    register_argument(
        parser,
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Explicit jslintr.toml (or pyproject.toml) to read.",
    )
    register_argument(
        parser,
        "--engine-dir",
        type=Path,
        default=None,
        help="Directory containing jslint.js/jshint.js.",
    )
    register_argument(
        parser,
        "--out",
        choices=[fmt.value for fmt in DataFormat],
        default=DataFormat.TEXT.value,
        help="Output format.",
    )


def parse_option_value(raw: str) -> object:
    """Parse a CLI option value: JSON literals when valid, else the raw string."""
    try:
        return cast("object", json.loads(raw))
    except ValueError:
        return raw


def parse_option_assignments(tokens: Sequence[str]) -> dict[str, object]:
    """Turn ``NAME=VALUE`` tokens into an option mapping (later tokens win).

    Raises:
        InvalidOptionAssignmentError: If a token has no ``=`` or an empty name.
    """
    parsed: dict[str, object] = {}
    for token in tokens:
        name, sep, value = token.partition("=")
        name = name.strip()
        if not sep or not name:
            raise InvalidOptionAssignmentError(token)
        parsed[name] = parse_option_value(value.strip())
    return parsed


def stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value)
    return json.dumps(normalize_enums_for_json(value), ensure_ascii=False)


def render_table_rows(rows: Sequence[Mapping[str, object]], headers: Sequence[str]) -> list[str]:
    if not rows:
        return ["<empty>"]
    widths = {header: max(len(header), *(len(stringify(row.get(header))) for row in rows)) for header in headers}
    header_line = " | ".join(header.ljust(widths[header]) for header in headers)
    separator = "-+-".join("-" * widths[header] for header in headers)
    lines = [header_line.rstrip(), separator]
    lines.extend(
        " | ".join(stringify(row.get(header)).ljust(widths[header]) for header in headers).rstrip() for row in rows
    )
    return lines


def render_data(rows: Sequence[Mapping[str, object]], fmt: DataFormat, *, headers: Sequence[str]) -> list[str]:
    """Render rows as a JSON document or an aligned text table."""
    if fmt is DataFormat.JSON:
        return [json.dumps(normalize_enums_for_json(list(rows)), indent=2, ensure_ascii=False)]
    return render_table_rows(rows, headers)


__all__ = [
    "echo",
    "parse_option_assignments",
    "parse_option_value",
    "register_argument",
    "register_engine_options",
    "render_data",
    "render_table_rows",
    "stringify",
]
