"""Diagram value objects."""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class DiagramKind(str, Enum):
    """Element categories a diagram can belong to."""
    GRAPH = "Graph"
    FIGURE = "Figure"


class GraphKind(str, Enum):
    """Graph kinds with a construction pipeline."""
    BAR = "Bar"
    LINE = "Line"


class DiagramBehavior(BaseModel):
    """
    Text a diagram writes for each operation and the message it then sends
    to its subscribers.
    """
    model_config = ConfigDict(frozen=True)

    calc_text: str
    calc_message: str
    draw_text: str
    draw_message: str
    drag_text: str
    drag_message: str


GRAPH_BEHAVIOR = DiagramBehavior(
    calc_text="Calculating Graph",
    calc_message="Graph calculated",
    draw_text="[Graph] Drawing graphical representation.",
    draw_message="Graph drawn",
    drag_text="Dragging Graph",
    drag_message="Graph dragged",
)

FIGURE_BEHAVIOR = DiagramBehavior(
    calc_text="Calculating Figure",
    calc_message="Figure calculated",
    draw_text="[Figure Stub] Drawing textual stub.",
    draw_message="Figure drawn",
    drag_text="Dragging Figure",
    drag_message="Figure dragged",
)

BEHAVIORS = {
    DiagramKind.GRAPH: GRAPH_BEHAVIOR,
    DiagramKind.FIGURE: FIGURE_BEHAVIOR,
}
