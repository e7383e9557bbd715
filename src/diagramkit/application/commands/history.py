"""Undo/redo history of executed commands."""
from typing import List, Optional

from diagramkit.application.commands.base import Command
from diagramkit.infrastructure.logging.logger import get_logger


class CommandHistory:
    """
    Pair of undo and redo stacks.

    Executing a new command clears the redo stack, since the undone chain
    no longer follows from the current state.
    """

    def __init__(self):
        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []
        self._logger = get_logger(__name__)

    def execute(self, command: Command) -> None:
        """Run a new command and record it for undo."""
        command.execute()
        self._undo_stack.append(command)
        self._redo_stack.clear()
        self._logger.debug("Executed command", command=command.describe(), undo_depth=self.undo_depth)

    def undo(self) -> Optional[Command]:
        """Undo the most recent command; returns it, or None if nothing to undo."""
        if not self._undo_stack:
            return None
        command = self._undo_stack.pop()
        command.undo()
        self._redo_stack.append(command)
        self._logger.debug("Undid command", command=command.describe(), redo_depth=self.redo_depth)
        return command

    def redo(self) -> Optional[Command]:
        """Re-execute the most recently undone command; returns it, or None."""
        if not self._redo_stack:
            return None
        command = self._redo_stack.pop()
        command.execute()
        self._undo_stack.append(command)
        self._logger.debug("Redid command", command=command.describe(), undo_depth=self.undo_depth)
        return command

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)
