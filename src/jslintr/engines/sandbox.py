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

"""Per-check sandboxes that run an engine script in an embedded interpreter.

Every check gets a brand new ``quickjs.Context`` (which owns its own
runtime), so the analyzer's global state never survives from one check to
the next. The interpreter refuses to call into Python while a time limit is
armed, so nothing in the sandbox is a host callable. The host stores plain
string globals and a prelude turns each one into a zero-argument accessor:

* ``jslintrInput()`` returns the text being checked;
* ``jslintrOption_<name>()`` returns the JSON encoding of one option value.

The glue script returns the engine's error list as JSON text, which is the
result of its evaluation and goes straight to the :class:`ResultCollector`.

A context is single-use. It is created on entry, serves one :meth:`run`,
and is dropped on exit whether or not the run succeeded.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Self

import quickjs

from jslintr.core.model_types import LogComponent, MalformedPolicy
from jslintr.core.type_aliases import BindingName
from jslintr.core.types import CheckResult
from jslintr.exceptions import EngineExecutionError, JslintrError
from jslintr.json import encode_option_value
from jslintr.logging import structured_extra

from .collector import ResultCollector

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from types import TracebackType

    from jslintr.config.models import CheckerSettings
    from jslintr.core.types import Diagnostic

    from .loader import ScriptSource

logger: logging.Logger = logging.getLogger("jslintr.engine.sandbox")

INPUT_BINDING: Final[str] = "jslintrInput"
OPTION_BINDING_PREFIX: Final[str] = "jslintrOption_"
_IDENTIFIER_SAFE: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)


@dataclass(slots=True, frozen=True)
class SandboxLimits:
    """Resource ceilings applied to each sandbox.

    Attributes:
        time_limit: Seconds one evaluation may run, ``None`` for no limit.
        memory_limit: Heap bytes the context may allocate, ``None`` for no limit.
        max_stack_size: Interpreter stack bytes, ``None`` for the default.
    """

    time_limit: int | None = None
    memory_limit: int | None = None
    max_stack_size: int | None = None

    @classmethod
    def from_settings(cls, settings: CheckerSettings) -> SandboxLimits:
        return cls(
            time_limit=settings.time_limit,
            memory_limit=settings.memory_limit,
            max_stack_size=settings.max_stack_size,
        )


def option_binding(name: str) -> BindingName:
    """Name the accessor for option ``name``.

    Letters, digits and underscores are kept as they are; any other character
    becomes ``$`` followed by its six-digit hex code point. The result is
    always a valid JavaScript identifier and distinct names never collide.
    """
    escaped = "".join(char if char in _IDENTIFIER_SAFE else f"${ord(char):06x}" for char in name)
    return BindingName(f"{OPTION_BINDING_PREFIX}{escaped}")


def build_accessors(bindings: Iterable[str]) -> str:
    """Build the prelude that wraps each stored global in a zero-argument accessor."""
    lines = ["(function (global) {", "  function accessor(value) { return function () { return value; }; }"]
    lines.extend(f"  global[{json.dumps(name)}] = accessor(global[{json.dumps(name)}]);" for name in bindings)
    lines.append("}(globalThis));")
    return "\n".join(lines)


def build_glue(entrypoint: str, bindings: Mapping[str, str]) -> str:
    """Build the script that invokes the engine from inside the sandbox.

    Option names appear only as JSON string literals and values are read
    through their accessors, so no caller data is spliced into code. The
    script evaluates to the engine's error list encoded as JSON.

    Args:
        entrypoint: Global engine function, e.g. ``JSHINT``.
        bindings: Option name to accessor name, in injection order.

    Returns:
        JavaScript source for one engine invocation.
    """
    lines = ["(function () {", "  var options = {};"]
    lines.extend(f"  options[{json.dumps(name)}] = JSON.parse({binding}());" for name, binding in bindings.items())
    lines.extend([
        f"  {entrypoint}({INPUT_BINDING}(), options);",
        f"  return JSON.stringify({entrypoint}.errors || []);",
        "}());",
    ])
    return "\n".join(lines)


class IsolatedContext:
    """A disposable interpreter context that serves exactly one check.

    Usage::

        with IsolatedContext(limits) as sandbox:
            diagnostics = sandbox.run(script, options, text)
    """

    def __init__(
        self,
        limits: SandboxLimits | None = None,
        *,
        policy: MalformedPolicy = MalformedPolicy.SKIP,
    ) -> None:
        self.limits = limits or SandboxLimits()
        self.policy = policy
        self.skipped = 0
        self._context: quickjs.Context | None = None
        self._used = False

    def __enter__(self) -> Self:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._context is not None

    def open(self) -> None:
        """Create the interpreter context and apply resource limits."""
        if self._used or self._context is not None:
            message = "IsolatedContext instances are single-use"
            raise JslintrError(message)
        context = quickjs.Context()
        if self.limits.memory_limit is not None:
            context.set_memory_limit(self.limits.memory_limit)
        if self.limits.max_stack_size is not None:
            context.set_max_stack_size(self.limits.max_stack_size)
        if self.limits.time_limit is not None:
            context.set_time_limit(self.limits.time_limit)
        self._context = context

    def close(self) -> None:
        """Drop the interpreter context and everything injected into it."""
        self._context = None
        self._used = True

    def run(self, script: ScriptSource, options: Mapping[str, object], text: str) -> list[Diagnostic]:
        """Evaluate ``script`` against ``text`` with ``options`` and collect its findings.

        Args:
            script: Engine script to evaluate.
            options: Resolved option values, one binding each.
            text: Source text to check.

        Returns:
            Diagnostics in engine emission order.

        Raises:
            EngineExecutionError: If evaluation fails, the entry point is
                missing, or the engine never reports its errors.
            JslintrError: If the context is not open or was already used.
        """
        context = self._context
        if context is None or self._used:
            message = "IsolatedContext must be opened before running and can run only once"
            raise JslintrError(message)
        self._used = True
        collector = ResultCollector(script.variant, policy=self.policy)

        self._evaluate(context, script.text, script)
        if self._evaluate(context, f"typeof {script.entrypoint}", script) != "function":
            raise EngineExecutionError(script.variant, f"entry point {script.entrypoint} is not defined")

        bindings = {name: option_binding(name) for name in options}
        context.set(INPUT_BINDING, text)
        for name, binding in bindings.items():
            context.set(binding, encode_option_value(options[name]))
        self._evaluate(context, build_accessors([INPUT_BINDING, *bindings.values()]), script)

        payload = self._evaluate(context, build_glue(script.entrypoint, bindings), script)
        if not isinstance(payload, str):
            raise EngineExecutionError(script.variant, "engine did not report diagnostics")
        collector.receive(payload)
        diagnostics = collector.collect()
        self.skipped = collector.skipped
        return diagnostics

    @staticmethod
    def _evaluate(context: quickjs.Context, code: str, script: ScriptSource) -> object:
        try:
            return context.eval(code)
        except quickjs.JSException as exc:
            raise EngineExecutionError(script.variant, str(exc)) from exc


def run_isolated(
    script: ScriptSource,
    options: Mapping[str, object],
    text: str,
    *,
    limits: SandboxLimits | None = None,
    policy: MalformedPolicy = MalformedPolicy.SKIP,
) -> CheckResult:
    """Run one check in a fresh sandbox and tear it down afterwards.

    Returns:
        CheckResult: Diagnostics plus timing and the count of skipped records.
    """
    logger.debug(
        "Running %s in a fresh sandbox (%s options, %s chars)",
        script.variant,
        len(options),
        len(text),
        extra=structured_extra(component=LogComponent.SANDBOX, engine=script.variant),
    )
    started = time.perf_counter()
    with IsolatedContext(limits, policy=policy) as sandbox:
        diagnostics = sandbox.run(script, options, text)
        skipped = sandbox.skipped
    duration_ms = (time.perf_counter() - started) * 1000.0
    logger.debug(
        "%s run completed: diagnostics=%s skipped=%s",
        script.variant,
        len(diagnostics),
        skipped,
        extra=structured_extra(
            component=LogComponent.SANDBOX,
            engine=script.variant,
            duration_ms=duration_ms,
            diagnostics=len(diagnostics),
            skipped=skipped,
        ),
    )
    return CheckResult(
        engine=script.variant,
        diagnostics=tuple(diagnostics),
        duration_ms=duration_ms,
        skipped=skipped,
    )


__all__ = [
    "INPUT_BINDING",
    "OPTION_BINDING_PREFIX",
    "IsolatedContext",
    "SandboxLimits",
    "build_accessors",
    "build_glue",
    "option_binding",
    "run_isolated",
]
