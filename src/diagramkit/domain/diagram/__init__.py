"""Diagram bounded context."""

from .diagram import Diagram
from .events import (
    FigureCreatedEvent,
    GraphCreatedEvent,
    GraphCreationRedoneEvent,
    GraphCreationUndoneEvent,
)
from .subscribers import (
    ContrastImageSubscriber,
    DrawSubscriber,
    RegularSubscriber,
    SubscriberList,
)
from .value_objects import (
    FIGURE_BEHAVIOR,
    GRAPH_BEHAVIOR,
    DiagramBehavior,
    DiagramKind,
    GraphKind,
)
from .visitor import DiagramVisitor

__all__ = [
    "ContrastImageSubscriber",
    "Diagram",
    "DiagramBehavior",
    "DiagramKind",
    "DiagramVisitor",
    "DrawSubscriber",
    "FIGURE_BEHAVIOR",
    "FigureCreatedEvent",
    "GRAPH_BEHAVIOR",
    "GraphCreatedEvent",
    "GraphCreationRedoneEvent",
    "GraphCreationUndoneEvent",
    "GraphKind",
    "RegularSubscriber",
    "SubscriberList",
]
