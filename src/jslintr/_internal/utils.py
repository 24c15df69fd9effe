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

"""Filesystem and miscellaneous helpers for jslintr internals."""

from __future__ import annotations

from pathlib import Path
from typing import Final

ROOT_MARKERS: Final[tuple[str, ...]] = (
    "jslintr.toml",
    ".jslintr.toml",
    "pyproject.toml",
)


def consume(value: object) -> None:
    """Explicitly discard a return value."""
    _ = value


def resolve_project_root(start: Path | None = None) -> Path:
    """Resolve the project root by walking parent directories for markers.

    Args:
        start: Optional starting path (defaults to current working directory).

    Returns:
        The first ancestor containing a config marker, or ``start`` itself
        when none is found.

    Raises:
        FileNotFoundError: If ``start`` is provided but does not exist.
    """
    base = (start or Path.cwd()).resolve()
    if base.is_file():
        base = base.parent
    for candidate in (base, *base.parents):
        if any((candidate / marker).exists() for marker in ROOT_MARKERS):
            return candidate
    if start is not None and not base.exists():
        message = f"Provided project root {start} does not exist."
        raise FileNotFoundError(message)
    return base


__all__ = ["ROOT_MARKERS", "consume", "resolve_project_root"]
