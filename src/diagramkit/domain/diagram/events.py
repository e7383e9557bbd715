"""Diagram domain events."""
from diagramkit.domain.base.events import DomainEvent


class GraphCreatedEvent(DomainEvent):
    """A graph creation command was executed for the first time."""
    kind: str
    coordinate: str


class FigureCreatedEvent(DomainEvent):
    """A figure was drawn from the shared figure pool."""
    kind: str
    coordinate: str
    variant: str


class GraphCreationUndoneEvent(DomainEvent):
    """The most recent graph creation was undone."""
    kind: str
    coordinate: str


class GraphCreationRedoneEvent(DomainEvent):
    """An undone graph creation was executed again."""
    kind: str
    coordinate: str
