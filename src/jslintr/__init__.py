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

"""jslintr - JSLint and JSHint for Python.

Runs the JSLint or JSHint analyzer in an embedded JavaScript interpreter and
returns its findings as a line-oriented report::

    >>> from jslintr import Checker
    >>> print(Checker(variant="jslint").check("var x = 5"))
    Error at line 1 character 1: Missing "use strict" statement.
      var x = 5
    Error at line 1 character 10: Missing semicolon.
      var x = 5
"""

from __future__ import annotations

from jslintr.exceptions import (
    EngineExecutionError,
    EngineNotFoundError,
    JslintrError,
    JslintrValidationError,
    MalformedDiagnosticError,
)

from .api import check_files, check_text, render_batch
from .checker import Checker
from .config import CheckerSettings, ConfigStore, JSHintOptions, JSLintOptions, load_config
from .core.model_types import EngineVariant, MalformedPolicy
from .core.types import CheckResult, Diagnostic, FileReport
from .engines import EngineLoader, IsolatedContext, ScriptSource, format_diagnostics, load_engine

__all__ = [
    "__version__",
    "CheckResult",
    "Checker",
    "CheckerSettings",
    "ConfigStore",
    "Diagnostic",
    "EngineExecutionError",
    "EngineLoader",
    "EngineNotFoundError",
    "EngineVariant",
    "FileReport",
    "IsolatedContext",
    "JSHintOptions",
    "JSLintOptions",
    "JslintrError",
    "JslintrValidationError",
    "MalformedDiagnosticError",
    "MalformedPolicy",
    "ScriptSource",
    "check_files",
    "check_text",
    "format_diagnostics",
    "load_config",
    "load_engine",
    "render_batch",
]

__version__ = "0.1.0"
