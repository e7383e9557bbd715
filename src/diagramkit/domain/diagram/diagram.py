"""Diagram element - the Graph and Figure kinds share one implementation."""
from __future__ import annotations

from typing import Optional

from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.diagram.subscribers import DrawSubscriber, SubscriberList
from diagramkit.domain.diagram.value_objects import BEHAVIORS, DiagramBehavior, DiagramKind
from diagramkit.domain.diagram.visitor import DiagramVisitor


class Diagram:
    """
    A drawable element.

    Every operation writes the behavior's text for that operation and then
    notifies all attached subscribers with the matching message.
    """

    def __init__(
        self,
        kind: DiagramKind,
        console: ConsolePort,
        behavior: Optional[DiagramBehavior] = None,
    ):
        self.kind = DiagramKind(kind)
        self.behavior = behavior or BEHAVIORS[self.kind]
        self.subscribers = SubscriberList()
        self._console = console

    @classmethod
    def graph(cls, console: ConsolePort) -> Diagram:
        return cls(DiagramKind.GRAPH, console)

    @classmethod
    def figure(cls, console: ConsolePort) -> Diagram:
        return cls(DiagramKind.FIGURE, console)

    def calc(self) -> None:
        self._console.write(self.behavior.calc_text)
        self.subscribers.notify(self.behavior.calc_message)

    def draw(self) -> None:
        self._console.write(self.behavior.draw_text)
        self.subscribers.notify(self.behavior.draw_message)

    def drag(self) -> None:
        self._console.write(self.behavior.drag_text)
        self.subscribers.notify(self.behavior.drag_message)

    def attach_subscriber(self, subscriber: DrawSubscriber) -> None:
        self.subscribers.attach(subscriber)

    def accept(self, visitor: DiagramVisitor) -> None:
        visitor.visit(self)

    def __repr__(self) -> str:
        return f"Diagram(kind={self.kind.value!r}, subscribers={len(self.subscribers)})"
