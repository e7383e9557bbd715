"""Figure factory - draws figures taken from the shared pool."""
from typing import Optional

from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.diagram.subscribers import DrawSubscriber
from diagramkit.domain.figure.flyweight import FigurePool, FlyweightFigure


class FigureFactory:
    """Hands out shared figures, subscribed and drawn once per request."""

    def __init__(self, console: ConsolePort, pool: Optional[FigurePool] = None):
        self._console = console
        self.pool = pool or FigurePool(console)

    def create_figure(
        self, kind: str, coordinate: str, *subscribers: DrawSubscriber
    ) -> FlyweightFigure:
        """
        Fetch the shared figure for kind, attach subscribers and draw it.

        The coordinate is only echoed; the shared figure never stores it.
        """
        figure = self.pool.get_or_create(kind)
        for subscriber in subscribers:
            figure.attach_subscriber(subscriber)
        self._console.write(f"Coordinates: {coordinate}")
        figure.draw()
        return figure
