"""Draw proxy standing in for a graph's draw call."""
from typing import Protocol

from diagramkit.domain.base.ports import ConsolePort


class DrawProxy(Protocol):
    def draw(self) -> None:
        ...


class GraphDrawProxy:
    """Draws the graphical and textual stub in place of a real graph."""

    LINE = "[Graph Proxy] Drawing graphical + textual stub"

    def __init__(self, console: ConsolePort):
        self._console = console

    def draw(self) -> None:
        self._console.write(self.LINE)
