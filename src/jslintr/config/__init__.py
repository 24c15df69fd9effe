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

"""Configuration layer: option profiles, option storage, and settings files."""

from __future__ import annotations

from .loader import CONFIG_FILENAMES, LoadedConfig, load_config
from .models import (
    CheckerSettings,
    ConfigModel,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    InvalidOptionAssignmentError,
)
from .options import JSHintOptions, JSLintOptions, base_defaults, option_descriptions, variant_extra_defaults
from .store import ConfigStore, profile_defaults, resolve

__all__ = [
    "CONFIG_FILENAMES",
    "CheckerSettings",
    "ConfigModel",
    "ConfigReadError",
    "ConfigStore",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "InvalidOptionAssignmentError",
    "JSHintOptions",
    "JSLintOptions",
    "LoadedConfig",
    "base_defaults",
    "load_config",
    "option_descriptions",
    "profile_defaults",
    "resolve",
    "variant_extra_defaults",
]
