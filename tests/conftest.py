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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from jslintr._internal.logging_utils import CHILD_LOGGERS  # noqa: E402
from jslintr.config.models import CheckerSettings  # noqa: E402
from jslintr.engines.loader import ENGINE_DIR_ENV, clear_script_cache  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

FIXTURE_ENGINES = ROOT / "tests" / "fixtures" / "engines"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (slower, multiple components)",
    )
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "engine: Engine-related tests")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (ENGINE_DIR_ENV, "JSLINTR_LOG_FORMAT", "JSLINTR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    clear_script_cache()
    yield
    clear_script_cache()
    root_logger = logging.getLogger("jslintr")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(logging.NOTSET)


@pytest.fixture
def engine_dir() -> Path:
    """Directory holding the stand-in ``jslint.js`` and ``jshint.js`` engines."""
    return FIXTURE_ENGINES


@pytest.fixture
def engine_settings(engine_dir: Path) -> CheckerSettings:
    return CheckerSettings(engine_dir=engine_dir)


@pytest.fixture
def engine_env(monkeypatch: pytest.MonkeyPatch, engine_dir: Path) -> Path:
    """Point ``JSLINTR_ENGINE_DIR`` at the fixture engines."""
    monkeypatch.setenv(ENGINE_DIR_ENV, str(engine_dir))
    return engine_dir


@pytest.fixture
def make_engine_dir(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a factory that writes one engine script into a fresh directory.

    The factory takes the variant name and the script body and returns the
    directory to use as the engine root.
    """
    counter = iter(range(1_000_000))

    def _make(variant: str, body: str) -> Path:
        root = tmp_path / f"engines-{next(counter)}"
        root.mkdir()
        (root / f"{variant}.js").write_text(body, encoding="utf-8")
        return root

    return _make
