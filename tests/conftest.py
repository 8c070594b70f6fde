"""
Shared pytest fixtures for multidigest tests.

This module provides:
- registry: a fresh HashingAlgorithmRegistry with the built-ins
- notifier: a fresh UnknownAlgorithmEvent
- recorded: a list that collects descriptors published to `notifier`
- recording_logger: an ILogger registered in the container that keeps messages
- automatic reset of the container and default registry between tests
"""

from collections.abc import Iterator
from typing import Any

import pytest

from multidigest.core.bootstrap import reset
from multidigest.core.container import get_container
from multidigest.core.interfaces.logger import ILogger
from multidigest.events import UnknownAlgorithmEvent
from multidigest.hashing.registry import AlgorithmDescriptor, HashingAlgorithmRegistry


class RecordingLogger(ILogger):
    """ILogger that keeps (level, formatted message) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, message: str, *args: Any) -> None:
        self.records.append((level, message % args if args else message))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("info", message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("warning", message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("error", message, *args)

    def set_level(self, level: str) -> None:
        pass

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset the service container and default registry around every test."""
    reset()
    yield
    reset()


@pytest.fixture
def registry() -> HashingAlgorithmRegistry:
    """A private registry so tests can register and deregister freely."""
    return HashingAlgorithmRegistry()


@pytest.fixture
def notifier() -> UnknownAlgorithmEvent:
    return UnknownAlgorithmEvent()


@pytest.fixture
def recorded(notifier: UnknownAlgorithmEvent) -> list[AlgorithmDescriptor]:
    """Descriptors published to `notifier`, in order."""
    seen: list[AlgorithmDescriptor] = []
    notifier.subscribe(seen.append)
    return seen


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Register a RecordingLogger as the container's ILogger."""
    logger = RecordingLogger()
    get_container().register_singleton(ILogger, implementation=logger)  # type: ignore[type-abstract]
    return logger


@pytest.fixture
def hello() -> bytes:
    return b"Hello, world."
