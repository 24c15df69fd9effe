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

"""Configuration file discovery and loading for jslintr.

Settings and option overrides can be kept in ``jslintr.toml``,
``.jslintr.toml``, or a ``[tool.jslintr]`` table inside ``pyproject.toml``.
Standalone files use the top-level tables directly::

    engine = "jshint"
    time_limit = 5

    [options]
    strict = false
    predef = ["jQuery"]
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from jslintr._internal.utils import resolve_project_root
from jslintr.core.model_types import LogComponent
from jslintr.logging import structured_extra

from .models import CheckerSettings, ConfigModel, ConfigReadError, InvalidConfigFileError

logger: logging.Logger = logging.getLogger("jslintr.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("jslintr.toml", ".jslintr.toml", "pyproject.toml")


def _default_options() -> dict[str, object]:
    return {}


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        settings: Checker settings with ``engine_dir`` resolved to an absolute path.
        options: Analyzer option overrides from the ``[options]`` table.
        path: File the configuration was loaded from, or None when defaults are used.
    """

    settings: CheckerSettings
    options: dict[str, object] = field(default_factory=_default_options)
    path: Path | None = None


def load_config(explicit_path: Path | None = None, *, start: Path | None = None) -> LoadedConfig:
    """Load jslintr configuration from a TOML file or fall back to defaults.

    The search order is ``jslintr.toml``, ``.jslintr.toml`` then
    ``pyproject.toml`` in the project root discovered from ``start``. A
    ``pyproject.toml`` without a ``[tool.jslintr]`` table is skipped. An
    explicit path is the only candidate considered and must contain
    jslintr configuration.

    Args:
        explicit_path: Optional explicit configuration file.
        start: Directory to begin project-root discovery from (default: cwd).

    Returns:
        LoadedConfig: Settings, option overrides and the source path.
    """
    if explicit_path is not None:
        candidate = explicit_path if explicit_path.is_absolute() else (Path.cwd() / explicit_path).resolve()
        loaded = _load_candidate(candidate, explicit=True)
        if loaded is None:
            raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
        return loaded

    root = resolve_project_root(start)
    for name in CONFIG_FILENAMES:
        loaded = _load_candidate(root / name, explicit=False)
        if loaded is not None:
            return loaded
    return LoadedConfig(settings=CheckerSettings())


def _load_candidate(candidate: Path, *, explicit: bool) -> LoadedConfig | None:
    if not candidate.is_file():
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define jslintr configuration"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    base_dir = candidate.parent.resolve()
    logger.debug(
        "Loaded configuration from %s",
        candidate,
        extra=structured_extra(component=LogComponent.CONFIG, path=candidate, engine=model.engine),
    )
    return LoadedConfig(
        settings=model.to_settings(base_dir=base_dir),
        options=dict(model.options),
        path=candidate.resolve(),
    )


def _extract_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the jslintr table from a parsed TOML document.

    Returns:
        The mapping to validate, or None for a ``pyproject.toml`` without a
        ``[tool.jslintr]`` table.

    Raises:
        InvalidConfigFileError: If ``[tool.jslintr]`` exists but is not a table.
    """
    if candidate.name != "pyproject.toml":
        return raw_map
    tool_section = raw_map.get("tool")
    if not isinstance(tool_section, dict):
        return None
    section = cast("dict[str, object]", tool_section).get("jslintr")
    if section is None:
        return None
    if not isinstance(section, dict):
        message = "[tool.jslintr] must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    return cast("dict[str, object]", section)


__all__ = ["CONFIG_FILENAMES", "LoadedConfig", "load_config"]
