"""Top-level diagram facade: creation requests, undo and redo."""
from typing import Optional

from diagramkit.application.commands.create_graph import CreateGraphCommand
from diagramkit.application.commands.history import CommandHistory
from diagramkit.application.factories.figure_factory import FigureFactory
from diagramkit.application.factories.graph_factory import GraphFactory
from diagramkit.domain.base.events import EventPublisher
from diagramkit.domain.base.exceptions import UnknownElementCategoryError
from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.diagram.events import (
    FigureCreatedEvent,
    GraphCreatedEvent,
    GraphCreationRedoneEvent,
    GraphCreationUndoneEvent,
)
from diagramkit.domain.diagram.subscribers import ContrastImageSubscriber, RegularSubscriber
from diagramkit.domain.diagram.value_objects import DiagramKind
from diagramkit.domain.figure.flyweight import FlyweightFigure
from diagramkit.infrastructure.logging.logger import get_logger


class DiagramFactory:
    """
    Coordinates graph and figure creation, the command history and the
    subscribers attached to figures.

    Only graph creations are recorded as undoable commands. Every created
    figure gets the regular and the contrast image subscriber attached
    before it is drawn; graphs get none.
    """

    def __init__(
        self,
        console: ConsolePort,
        event_publisher: Optional[EventPublisher] = None,
        graph_factory: Optional[GraphFactory] = None,
        figure_factory: Optional[FigureFactory] = None,
        history: Optional[CommandHistory] = None,
        strict: bool = False,
    ):
        self._console = console
        self._event_publisher = event_publisher
        self._strict = strict
        self.graph_factory = graph_factory or GraphFactory(console, strict=strict)
        self.figure_factory = figure_factory or FigureFactory(console)
        self.history = history or CommandHistory()
        self.regular_subscriber = RegularSubscriber(console)
        self.contrast_subscriber = ContrastImageSubscriber(console)
        self._logger = get_logger(__name__)

    def request(self, element: str, kind: str, coordinate: str) -> None:
        """
        Create an element of the given category ("Graph" or "Figure").

        Unknown categories are ignored unless the facade is strict.

        Raises:
            UnknownElementCategoryError: If strict and element is not a known category
        """
        if element == DiagramKind.GRAPH.value:
            self.create_graph(kind, coordinate)
        elif element == DiagramKind.FIGURE.value:
            self.create_figure(kind, coordinate)
        elif self._strict:
            raise UnknownElementCategoryError(element)
        else:
            self._logger.debug("Ignoring unknown element category", element=element)

    def create_graph(self, kind: str, coordinate: str) -> None:
        command = CreateGraphCommand(
            factory=self.graph_factory, console=self._console, kind=kind, coordinate=coordinate
        )
        self.history.execute(command)
        if self.graph_factory.get_pipeline(kind) is not None:
            self._publish(GraphCreatedEvent(kind=kind, coordinate=coordinate))

    def create_figure(self, kind: str, coordinate: str) -> FlyweightFigure:
        figure = self.figure_factory.create_figure(
            kind, coordinate, self.regular_subscriber, self.contrast_subscriber
        )
        self._publish(
            FigureCreatedEvent(kind=kind, coordinate=coordinate, variant=figure.variant.value)
        )
        return figure

    def undo(self) -> None:
        command = self.history.undo()
        if isinstance(command, CreateGraphCommand):
            self._publish(GraphCreationUndoneEvent(kind=command.kind, coordinate=command.coordinate))

    def redo(self) -> None:
        command = self.history.redo()
        if isinstance(command, CreateGraphCommand):
            self._publish(GraphCreationRedoneEvent(kind=command.kind, coordinate=command.coordinate))

    def _publish(self, event) -> None:
        if self._event_publisher is not None:
            self._event_publisher.publish(event)
