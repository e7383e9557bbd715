"""Flyweight figures and the pool that shares them by key."""
import threading
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.diagram.subscribers import DrawSubscriber, SubscriberList
from diagramkit.infrastructure.logging.logger import get_logger


class FigureVariant(str, Enum):
    """Color variant of a shared figure."""
    COLORED = "Colored"
    BLACK_WHITE = "B/W"


class FigureStyle(BaseModel):
    """Draw text template and notification message of a variant."""
    model_config = ConfigDict(frozen=True)

    draw_template: str
    draw_message: str


COLORED_STYLE = FigureStyle(
    draw_template="[Colored Flyweight] Drawing colored figure of type: {key}",
    draw_message="Colored Figure drawn",
)

BLACK_WHITE_STYLE = FigureStyle(
    draw_template="[B/W Flyweight] Drawing black and white figure of type: {key}",
    draw_message="B/W Figure drawn",
)

STYLES = {
    FigureVariant.COLORED: COLORED_STYLE,
    FigureVariant.BLACK_WHITE: BLACK_WHITE_STYLE,
}


class FlyweightFigure:
    """
    Figure shared by every request for the same pool key.

    Coordinates are extrinsic state and never stored here. Subscribers
    accumulate across every reuse of the instance.
    """

    def __init__(self, key: str, variant: FigureVariant, console: ConsolePort):
        self.key = key
        self.variant = variant
        self.style = STYLES[variant]
        self.subscribers = SubscriberList()
        self._console = console

    def draw(self) -> None:
        self._console.write(self.style.draw_template.format(key=self.key))
        self.subscribers.notify(self.style.draw_message)

    def attach_subscriber(self, subscriber: DrawSubscriber) -> None:
        self.subscribers.attach(subscriber)

    def __repr__(self) -> str:
        return f"FlyweightFigure(key={self.key!r}, variant={self.variant.value!r})"


class FigurePool:
    """
    Flyweight factory: at most one figure per exact key.

    A key containing the colored marker anywhere yields a colored figure,
    any other key a black and white one.
    """

    def __init__(self, console: ConsolePort, colored_marker: str = "Color"):
        self._console = console
        self._colored_marker = colored_marker
        self._figures: Dict[str, FlyweightFigure] = {}
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    def classify(self, key: str) -> FigureVariant:
        """Return the variant a key maps to."""
        if self._colored_marker in key:
            return FigureVariant.COLORED
        return FigureVariant.BLACK_WHITE

    def get_or_create(self, key: str) -> FlyweightFigure:
        """Return the shared figure for key, creating it on first use."""
        with self._lock:
            figure = self._figures.get(key)
            if figure is None:
                figure = FlyweightFigure(key, self.classify(key), self._console)
                self._figures[key] = figure
                self._logger.debug("Created shared figure", key=key, variant=figure.variant.value)
            else:
                self._logger.debug("Reusing shared figure", key=key)
            return figure

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._figures)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._figures

    def __len__(self) -> int:
        with self._lock:
            return len(self._figures)
