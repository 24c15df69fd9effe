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

"""Engine script discovery and loading.

Engine scripts are plain JavaScript files named after their variant
(``jslint.js``, ``jshint.js``) inside an engine root directory. The root is,
in order of preference, an explicit directory, the ``JSLINTR_ENGINE_DIR``
environment variable, or the ``scripts`` resource directory bundled with this
package. Loading never executes a script.
"""

from __future__ import annotations

import hashlib
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Final

from jslintr.core.model_types import EngineVariant, LogComponent
from jslintr.core.type_aliases import EntryPoint
from jslintr.exceptions import EngineNotFoundError
from jslintr.logging import structured_extra

logger: logging.Logger = logging.getLogger("jslintr.engine")

ENGINE_DIR_ENV: Final[str] = "JSLINTR_ENGINE_DIR"
BUNDLED_SCRIPTS_DIR: Final[str] = "scripts"


@dataclass(slots=True, frozen=True)
class ScriptSource:
    """Immutable engine script text plus the metadata needed to invoke it.

    Attributes:
        variant: Engine variant the script implements.
        entrypoint: Global function the script defines.
        path: File the script was read from.
        text: Script source.
        digest: SHA-256 of the script text, identifying the engine version.
    """

    variant: EngineVariant
    entrypoint: EntryPoint
    path: Path
    text: str
    digest: str


def bundled_engine_root() -> Path:
    """Return the engine directory shipped inside the ``jslintr.engines`` package."""
    return Path(str(resources.files("jslintr.engines").joinpath(BUNDLED_SCRIPTS_DIR)))


def resolve_engine_root(explicit: Path | None = None) -> Path:
    """Pick the engine root: explicit path, then ``JSLINTR_ENGINE_DIR``, then the bundle."""
    if explicit is not None:
        return explicit
    env_value = os.getenv(ENGINE_DIR_ENV)
    if env_value:
        return Path(env_value)
    return bundled_engine_root()


@lru_cache(maxsize=32)
def _read_script(path: Path) -> tuple[str, str]:
    text = path.read_text(encoding="utf-8")
    return text, hashlib.sha256(text.encode("utf-8")).hexdigest()


def clear_script_cache() -> None:
    """Drop cached script text (for tests and long-lived processes that swap engines)."""
    _read_script.cache_clear()


def resolve_variant(name: str | EngineVariant) -> EngineVariant:
    """Match ``name`` case-insensitively against the known variants.

    Raises:
        EngineNotFoundError: If the name is not a known variant. There is no
            fallback to a default variant.
    """
    if isinstance(name, EngineVariant):
        return name
    try:
        return EngineVariant.from_str(name)
    except ValueError as exc:
        raise EngineNotFoundError(name) from exc


class EngineLoader:
    """Locate and read engine scripts beneath one engine root."""

    def __init__(self, root: Path | None = None) -> None:
        self.root: Path = resolve_engine_root(root)

    def script_path(self, variant: str | EngineVariant) -> Path:
        return self.root / resolve_variant(variant).script_name

    def load(self, variant: str | EngineVariant) -> ScriptSource:
        """Read the script for ``variant``.

        Args:
            variant: Variant name (any letter case) or enum member.

        Returns:
            ScriptSource: The script text and its metadata. Text is cached
            process-wide by resolved path, so repeated loads are cheap.

        Raises:
            EngineNotFoundError: If the variant is unknown or its script file
                does not exist under the engine root.
        """
        selected = resolve_variant(variant)
        path = (self.root / selected.script_name).resolve()
        if not path.is_file():
            raise EngineNotFoundError(str(variant), path)
        text, digest = _read_script(path)
        logger.debug(
            "Loaded %s engine script (%s bytes, sha256 %s)",
            selected,
            len(text),
            digest[:12],
            extra=structured_extra(component=LogComponent.ENGINE, engine=selected, path=path),
        )
        return ScriptSource(
            variant=selected,
            entrypoint=selected.entrypoint,
            path=path,
            text=text,
            digest=digest,
        )

    def available(self) -> dict[EngineVariant, Path | None]:
        """Map every known variant to its script path, or None when not installed."""
        found: dict[EngineVariant, Path | None] = {}
        for variant in EngineVariant:
            path = self.root / variant.script_name
            found[variant] = path if path.is_file() else None
        return found


def load_engine(variant: str | EngineVariant, *, root: Path | None = None) -> ScriptSource:
    """Load an engine script with a throwaway loader."""
    return EngineLoader(root).load(variant)


__all__ = [
    "BUNDLED_SCRIPTS_DIR",
    "ENGINE_DIR_ENV",
    "EngineLoader",
    "ScriptSource",
    "bundled_engine_root",
    "clear_script_cache",
    "load_engine",
    "resolve_engine_root",
    "resolve_variant",
]
