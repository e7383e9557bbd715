"""Console port for user-visible trace output."""
from typing import Protocol


class ConsolePort(Protocol):
    """Sink for the human-readable lines every component writes."""

    def write(self, line: str) -> None:
        """Write one line of output."""
        ...
