"""Shared pytest fixtures for papilio tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from papilio.infrastructure.storage import JsonFileStore, MemoryStore
from papilio.services.selection import SelectionController
from papilio.services.task_store import TaskStore
from papilio.services.wheel import WheelService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path: Path) -> JsonFileStore:
    return JsonFileStore(tmp_path / ".papilio")


class SequentialIds:
    """Deterministic id factory: task-1, task-2, ..."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"task-{self.count}"


class TickingClock:
    """Clock that advances one second per call."""

    def __init__(self) -> None:
        self.now = datetime(2026, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def store(memory_store: MemoryStore) -> TaskStore:
    """Empty TaskStore on a memory backend with predictable ids."""
    s = TaskStore(memory_store, id_factory=SequentialIds(), clock=TickingClock())
    s.load()
    return s


@pytest.fixture
def controller(store: TaskStore) -> SelectionController:
    return SelectionController(store)


@pytest.fixture
def service(store: TaskStore) -> WheelService:
    return WheelService(store)


@pytest.fixture
def _isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run CLI commands from an empty temp directory with no config.

    Use via ``@pytest.mark.usefixtures("_isolated_data_dir")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PAPILIO_CONFIG", raising=False)
    yield tmp_path


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """CLI invocations reconfigure logging onto CliRunner streams; undo that."""
    root = logging.getLogger()
    level = root.level
    papilio_level = logging.getLogger("papilio").level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("papilio").setLevel(papilio_level)
