"""Shared test fixtures."""
import logging
import os
from typing import List

import pytest
import structlog

from diagramkit.application.diagram_factory import DiagramFactory


class RecordingConsole:
    """Console collecting written lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()


class RecordingSubscriber:
    """Subscriber collecting received messages."""

    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop the handlers setup_logging() installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DIAGRAMKIT_* variables of the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("DIAGRAMKIT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def subscriber():
    return RecordingSubscriber()


@pytest.fixture
def diagram_factory(console):
    return DiagramFactory(console)
