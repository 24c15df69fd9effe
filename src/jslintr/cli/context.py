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

"""Build checkers from parsed CLI arguments and config files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jslintr.checker import Checker
from jslintr.config.loader import load_config
from jslintr.core.model_types import LogComponent
from jslintr.logging import structured_extra

from .helpers import parse_option_assignments

if TYPE_CHECKING:
    import argparse

logger: logging.Logger = logging.getLogger("jslintr.cli")


def build_checker(args: argparse.Namespace) -> Checker:
    """Resolve config file, flags and option overrides into a checker.

    Precedence, lowest first: config file, ``--engine-dir``/``--engine``,
    ``--option`` assignments.
    """
    loaded = load_config(getattr(args, "config", None))
    settings = loaded.settings
    engine_dir = getattr(args, "engine_dir", None)
    if engine_dir is not None:
        settings = settings.model_copy(update={"engine_dir": engine_dir.resolve()})
    overrides = parse_option_assignments(getattr(args, "options", None) or [])
    options = {**loaded.options, **overrides}
    checker = Checker(options, getattr(args, "engine", None), settings=settings)
    logger.debug(
        "Using %s with %s option overrides",
        checker.variant,
        len(options),
        extra=structured_extra(
            component=LogComponent.CLI,
            engine=checker.variant,
            path=loaded.path,
            details={"engine_root": str(checker.loader.root)},
        ),
    )
    return checker


__all__ = ["build_checker"]
