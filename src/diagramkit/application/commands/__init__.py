"""Undoable commands and their history."""

from .base import Command
from .create_graph import CreateGraphCommand
from .history import CommandHistory

__all__ = ["Command", "CommandHistory", "CreateGraphCommand"]
