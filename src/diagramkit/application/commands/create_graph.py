"""Command creating a graph through the graph factory."""
from typing import Any

from pydantic import Field

from diagramkit.application.commands.base import Command
from diagramkit.application.factories.graph_factory import GraphFactory


class CreateGraphCommand(Command):
    """Create a graph of ``kind`` at ``coordinate``; undo only reports it."""

    factory: GraphFactory = Field(exclude=True)
    console: Any = Field(exclude=True)
    kind: str
    coordinate: str

    def execute(self) -> None:
        self.factory.create_graph(self.kind, self.coordinate)

    def undo(self) -> None:
        self.console.write(f"Undo creation of graph: {self.kind}")

    def describe(self) -> str:
        return f"create {self.kind} graph at {self.coordinate}"
