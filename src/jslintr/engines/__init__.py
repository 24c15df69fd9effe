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

"""Engine adapter for jslintr.

This package loads the analyzer scripts, runs them in per-check sandboxes,
and turns their output into diagnostics and reports. The main entry points
are :class:`EngineLoader`, :func:`run_isolated` and
:func:`format_diagnostics`.
"""

from .collector import ResultCollector, format_diagnostic, format_diagnostics, parse_record
from .loader import (
    ENGINE_DIR_ENV,
    EngineLoader,
    ScriptSource,
    bundled_engine_root,
    clear_script_cache,
    load_engine,
    resolve_engine_root,
    resolve_variant,
)
from .sandbox import IsolatedContext, SandboxLimits, build_glue, run_isolated

__all__ = [
    "ENGINE_DIR_ENV",
    "EngineLoader",
    "IsolatedContext",
    "ResultCollector",
    "SandboxLimits",
    "ScriptSource",
    "build_glue",
    "bundled_engine_root",
    "clear_script_cache",
    "format_diagnostic",
    "format_diagnostics",
    "load_engine",
    "parse_record",
    "resolve_engine_root",
    "resolve_variant",
    "run_isolated",
]
