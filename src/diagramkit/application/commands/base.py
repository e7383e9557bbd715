"""Base command infrastructure."""
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict


class Command(BaseModel, ABC):
    """
    Base class for undoable commands.

    Commands are immutable once created: redo runs the same command again.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @abstractmethod
    def execute(self) -> None:
        """Perform the command."""

    @abstractmethod
    def undo(self) -> None:
        """Report the inverse of the command."""

    def describe(self) -> str:
        """Short human-readable description used in logs."""
        return self.__class__.__name__
