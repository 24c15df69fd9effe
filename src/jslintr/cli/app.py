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

"""CLI entry point and orchestration for jslintr commands."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import Final

from jslintr import __version__
from jslintr.cli.commands import check as check_command
from jslintr.cli.commands import engines as engines_command
from jslintr.cli.commands import options as options_command
from jslintr.cli.helpers import echo as _echo
from jslintr.cli.helpers import register_argument as _register_argument
from jslintr.exceptions import JslintrError
from jslintr.logging import LOG_FORMATS, LOG_LEVELS, configure_logging

logger: logging.Logger = logging.getLogger("jslintr.cli")

JSLINTR_VERSION: Final[str] = __version__
EXIT_FAILURE: Final[int] = 2

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the jslintr command-line interface.

    Parses command-line arguments, configures logging, and dispatches to the
    appropriate command handler.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the command handler, or ``2`` when the engine or
            configuration could not be used at all.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"jslintr {JSLINTR_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _ = configure_logging(args.log_format, log_level=args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        return handler(args)
    except (JslintrError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _echo(f"[jslintr] {exc}", err=True)
        return EXIT_FAILURE


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with global flags and every subcommand."""
    common = argparse.ArgumentParser(add_help=False)
    _register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Logging output format (human-readable text or structured JSON). Defaults to $JSLINTR_LOG_FORMAT or text.",
    )
    _register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Verbosity of logged events. Defaults to $JSLINTR_LOG_LEVEL or warning.",
    )
    parser = argparse.ArgumentParser(
        prog="jslintr",
        parents=[common],
        description="Check JavaScript with JSLint or JSHint running in an embedded interpreter.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the jslintr version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    parents = [common]
    check_command.register_check_command(subparsers, parents=parents)
    options_command.register_options_command(subparsers, parents=parents)
    engines_command.register_engines_command(subparsers, parents=parents)
    return parser


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "check": check_command.execute_check,
        "engines": engines_command.execute_engines,
        "options": options_command.execute_options,
    }


__all__ = ["main"]
