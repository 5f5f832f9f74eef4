"""
Pytest configuration for mdbaccess.

Provides fixtures for:
- Settings isolated from the developer's environment and `.env`
- A fake ToolRunner that replays canned mdbtools output
- A placeholder database file and a client wired to the fake runner
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

import pytest

from mdbaccess import config
from mdbaccess.client import AccessDatabase
from mdbaccess.config import Settings
from mdbaccess.infrastructure.runner import ToolOutput, ToolRunner


@dataclass
class RecordedCall:
    command: str
    args: List[str]
    input_text: Optional[str]
    context: Optional[str]


class FakeRunner(ToolRunner):
    """
    ToolRunner replacement keyed by command name.

    Each entry is a list of output lines, a callable taking the argument list
    and returning lines, or an exception instance to raise.
    """

    def __init__(self, outputs: Optional[Dict[str, Any]] = None) -> None:
        super().__init__()
        self.outputs: Dict[str, Any] = dict(outputs or {})
        self.calls: List[RecordedCall] = []

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        input_text: Optional[str] = None,
        context: Optional[str] = None,
    ) -> ToolOutput:
        self.calls.append(RecordedCall(command, list(args), input_text, context))
        result = self.outputs.get(command, [])
        if isinstance(result, Exception):
            raise result
        if callable(result):
            result = result(list(args))
        return ToolOutput(command=[command, *args], lines=list(result))

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]


_SETTINGS_ENV = (
    "MDBTOOLS_PATH",
    "MDB_DATE_FORMAT",
    "MDB_SQL_FORMAT",
    "MDB_COMMAND_TIMEOUT",
    "MDB_RETRY_ATTEMPTS",
    "MDB_STRICT_ROWS",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch) -> Iterator[None]:
    """
    Hide settings variables from the developer's shell and reset the cached settings.
    """
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with defaults, ignoring any `.env` file.
    """
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """
    Placeholder database file; mdbtools is never run against it.
    """
    path = tmp_path / "example.mdb"
    path.write_bytes(b"\x00\x01\x00\x00Standard Jet DB\x00")
    return path


@pytest.fixture
def make_db(db_file: Path, test_settings: Settings) -> Callable[..., AccessDatabase]:
    """
    Factory building an AccessDatabase over `db_file` with a FakeRunner.

    Keyword arguments other than `outputs` override settings fields.
    """

    def _make(outputs: Optional[Dict[str, Any]] = None, **overrides: Any) -> AccessDatabase:
        settings = test_settings.model_copy(update=overrides) if overrides else test_settings
        return AccessDatabase(db_file, settings=settings, runner=FakeRunner(outputs))

    return _make


@pytest.fixture(scope="session")
def sample_database() -> Path:
    """
    Real Access database for integration tests.

    Skips unless mdbtools is installed and MDBACCESS_TEST_DB names a file.
    """
    if shutil.which("mdb-tables") is None:
        pytest.skip("mdbtools not installed")
    path = os.getenv("MDBACCESS_TEST_DB")
    if not path or not Path(path).exists():
        pytest.skip("MDBACCESS_TEST_DB not set to an existing database")
    return Path(path)
