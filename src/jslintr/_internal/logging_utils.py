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

"""Logging setup and structured log payloads for jslintr.

jslintr logs through the standard library under the ``jslintr`` logger tree:

* ``jslintr.engine``: script loading and check orchestration;
* ``jslintr.engine.sandbox``: sandbox lifecycle and timings;
* ``jslintr.config``: option resolution and config files;
* ``jslintr.cli``: command dispatch.

The library itself never installs handlers. The CLI calls
:func:`configure_logging`, which attaches one stream handler rendering
either ``[LEVEL] message`` lines or one JSON object per record. Records carry
their structured context in ``extra`` built by :func:`structured_extra`.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final, Literal, TypedDict, Unpack, cast, override

from jslintr.core.model_types import EngineVariant, LogComponent, LogFormat
from jslintr.json import normalize_enums_for_json

ROOT_LOGGER_NAME: Final[str] = "jslintr"
LOG_FORMAT_ENV: Final[str] = "JSLINTR_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "JSLINTR_LOG_LEVEL"

LogLevelName = Literal["debug", "info", "warning", "error"]

_LEVELS: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
LOG_FORMATS: Final[tuple[str, ...]] = tuple(member.value for member in LogFormat)
LOG_LEVELS: Final[tuple[LogLevelName, ...]] = ("debug", "info", "warning", "error")

STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "engine",
    "duration_ms",
    "diagnostics",
    "skipped",
    "path",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "jslintr.cli",
    "jslintr.config",
    "jslintr.engine",
    "jslintr.engine.sandbox",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """The logging setup selected by :func:`configure_logging`."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record, with any structured fields the record carries."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({name: record.__dict__[name] for name in STRUCTURED_FIELDS if name in record.__dict__})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalize_enums_for_json(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _level_from(raw: str | int) -> tuple[int, str]:
    if isinstance(raw, int):
        return raw, logging.getLevelName(raw).lower()
    name = raw.strip().lower()
    # Unrecognised names fall back to info rather than failing the command.
    if name not in _LEVELS:
        name = "info"
    return _LEVELS[name], name


def _pick(explicit: str | None, env_name: str, fallback: str) -> str:
    if explicit is not None:
        return explicit
    return os.getenv(env_name) or fallback


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Install the jslintr log handler and set logger levels.

    Calling it again replaces the previous handler.

    Args:
        log_format: ``text`` or ``json``. ``None`` reads ``JSLINTR_LOG_FORMAT``
            and falls back to ``text``.
        log_level: Level name or number. ``None`` reads ``JSLINTR_LOG_LEVEL``
            and falls back to ``warning``.

    Returns:
        The applied configuration.

    Raises:
        ValueError: If the format name is not recognised.
    """
    selected_format = (
        log_format if isinstance(log_format, LogFormat) else LogFormat.from_str(_pick(log_format, LOG_FORMAT_ENV, "text"))
    )
    if isinstance(log_level, int):
        level, level_name = _level_from(log_level)
    else:
        level, level_name = _level_from(_pick(log_level, LOG_LEVEL_ENV, "warning"))

    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter() if selected_format is LogFormat.JSON else TextLogFormatter())

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    for name in CHILD_LOGGERS:
        logging.getLogger(name).setLevel(level)
    return LogConfig(format=selected_format, level=level, level_name=level_name)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Fields jslintr attaches to log records through ``extra``."""

    engine: str
    duration_ms: float
    diagnostics: int
    skipped: int
    path: str
    details: dict[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    engine: EngineVariant | str
    duration_ms: float
    diagnostics: int
    skipped: int
    path: str | os.PathLike[str] | None
    details: Mapping[str, object]


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Build the ``extra`` mapping for a jslintr log record.

    ``None`` values and empty ``details`` are left out so formatters only
    emit what is known.

    Args:
        component: Subsystem emitting the record.
        **kwargs: Engine, timing, counts, path and free-form details.

    Returns:
        Mapping to pass as ``extra=``.
    """
    extra: StructuredLogExtra = {"component": component}
    if (engine := kwargs.get("engine")) is not None:
        extra["engine"] = str(engine)
    if (duration := kwargs.get("duration_ms")) is not None:
        extra["duration_ms"] = float(duration)
    if (count := kwargs.get("diagnostics")) is not None:
        extra["diagnostics"] = int(count)
    if (skipped := kwargs.get("skipped")) is not None:
        extra["skipped"] = int(skipped)
    if (path := kwargs.get("path")) is not None:
        extra["path"] = os.fspath(path)
    if details := kwargs.get("details"):
        extra["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = [
    "CHILD_LOGGERS",
    "LOG_FORMATS",
    "LOG_FORMAT_ENV",
    "LOG_LEVELS",
    "LOG_LEVEL_ENV",
    "ROOT_LOGGER_NAME",
    "JSONLogFormatter",
    "LogConfig",
    "StructuredLogExtra",
    "TextLogFormatter",
    "configure_logging",
    "structured_extra",
]
