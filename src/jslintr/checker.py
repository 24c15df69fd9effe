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

"""The checker: configure once, lint many texts.

Typical use::

    from jslintr import Checker

    checker = Checker({"undef": False, "sub": True}, variant="jshint")
    report = checker.check("var x = 5")
    if report:
        print(report)

``check`` returns ``None`` for a clean input and the formatted report
otherwise. Engine failures raise; they are never reported as clean.

Concurrency: each ``check`` call builds and disposes its own sandbox, so one
checker may be used from several threads. Options are snapshotted at the
start of each call; changing them on a shared checker while another thread
is checking is the caller's responsibility to prevent.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from jslintr.config.models import CheckerSettings
from jslintr.config.store import ConfigStore
from jslintr.core.model_types import LogComponent
from jslintr.engines.collector import format_diagnostics
from jslintr.engines.loader import EngineLoader, resolve_variant
from jslintr.engines.sandbox import SandboxLimits, run_isolated
from jslintr.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jslintr.config.loader import LoadedConfig
    from jslintr.config.options import JSLintOptions
    from jslintr.core.model_types import EngineVariant
    from jslintr.core.types import CheckResult
    from jslintr.engines.loader import ScriptSource

logger: logging.Logger = logging.getLogger("jslintr.engine")


class Checker:
    """A configured JSLint/JSHint checker.

    Args:
        options: Analyzer option overrides. Unknown keys are kept and passed
            to the engine.
        variant: Engine variant name (case-insensitive). Defaults to
            ``settings.engine``, which defaults to ``jshint``.
        settings: Engine location, sandbox limits and malformed-record policy.
        loader: Engine loader to use instead of one built from ``settings``.

    Raises:
        EngineNotFoundError: If ``variant`` is not a known engine variant.
    """

    def __init__(
        self,
        options: Mapping[str, object] | None = None,
        variant: str | EngineVariant | None = None,
        *,
        settings: CheckerSettings | None = None,
        loader: EngineLoader | None = None,
    ) -> None:
        base = settings or CheckerSettings()
        if variant is not None:
            base = base.model_copy(update={"engine": str(variant)})
        self._settings = base
        self._variant = resolve_variant(base.engine)
        self._loader = loader or EngineLoader(base.engine_dir)
        self._store = ConfigStore(self._variant, options)
        self._limits = SandboxLimits.from_settings(base)
        self._script: ScriptSource | None = None
        self._script_lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        loaded: LoadedConfig,
        *,
        options: Mapping[str, object] | None = None,
        variant: str | EngineVariant | None = None,
    ) -> Checker:
        """Build a checker from a loaded config file plus extra overrides."""
        merged = dict(loaded.options)
        if options:
            merged.update(options)
        return cls(merged, variant, settings=loaded.settings)

    @property
    def variant(self) -> EngineVariant:
        return self._variant

    @property
    def settings(self) -> CheckerSettings:
        return self._settings

    @property
    def loader(self) -> EngineLoader:
        return self._loader

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def options(self) -> JSLintOptions:
        """Typed option record; assign attributes to change later checks."""
        return self._store.options

    def get(self, name: str) -> object:
        return self._store.get(name)

    def set(self, name: str, value: object) -> None:
        self._store.set(name, value)

    def __getitem__(self, name: str) -> object:
        return self._store.get(name)

    def __setitem__(self, name: str, value: object) -> None:
        self._store.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def engine_script(self) -> ScriptSource:
        """Load the engine script once per checker; later calls reuse it."""
        with self._script_lock:
            if self._script is None:
                self._script = self._loader.load(self._variant)
            return self._script

    def run(self, text: str) -> CheckResult:
        """Check ``text`` and return structured results.

        Raises:
            EngineNotFoundError: If the engine script is not installed.
            EngineExecutionError: If the engine fails inside its sandbox.
            MalformedDiagnosticError: Under the ``fail`` malformed policy.
        """
        snapshot = self._store.snapshot()
        script = self.engine_script()
        result = run_isolated(
            script,
            snapshot,
            text,
            limits=self._limits,
            policy=self._settings.malformed_policy,
        )
        logger.debug(
            "Checked %s chars with %s: %s diagnostics",
            len(text),
            self._variant,
            len(result.diagnostics),
            extra=structured_extra(
                component=LogComponent.ENGINE,
                engine=self._variant,
                duration_ms=result.duration_ms,
                diagnostics=len(result.diagnostics),
            ),
        )
        return result

    def check(self, text: str) -> str | None:
        """Check ``text`` and return the formatted report, or ``None`` when clean."""
        return format_diagnostics(self.run(text).diagnostics)

    def __repr__(self) -> str:
        return f"Checker(variant={self._variant.value!r}, options={len(self._store)})"


__all__ = ["Checker"]
