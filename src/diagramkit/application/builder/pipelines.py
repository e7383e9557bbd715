"""Graph construction pipelines."""
import threading
from abc import ABC, abstractmethod
from typing import Optional

from diagramkit.application.builder.proxy import DrawProxy, GraphDrawProxy
from diagramkit.domain.base.ports import ConsolePort


class Builder(ABC):
    """Construction steps a director drives, in order."""

    @abstractmethod
    def set_coordinate(self, coordinate: str) -> None:
        pass

    @abstractmethod
    def calc(self) -> None:
        pass

    @abstractmethod
    def draw(self) -> None:
        pass

    @abstractmethod
    def drag(self) -> None:
        pass


class GraphPipeline(Builder):
    """
    Builder for one graph kind (Bar, Line, ...).

    The coordinate is overwritten by every construction, so one pipeline
    holds one coordinate in flight. ``lock`` lets a director keep a whole
    construction sequence on a single coordinate.
    """

    def __init__(self, name: str, console: ConsolePort, proxy: Optional[DrawProxy] = None):
        self.name = name
        self.coordinate: Optional[str] = None
        self.lock = threading.Lock()
        self._console = console
        self._proxy = proxy or GraphDrawProxy(console)

    def set_coordinate(self, coordinate: str) -> None:
        self.coordinate = coordinate

    def calc(self) -> None:
        self._console.write(f"{self.name} calc at {self.coordinate}")

    def draw(self) -> None:
        self._proxy.draw()

    def drag(self) -> None:
        self._console.write(f"Drag {self.name} at {self.coordinate}")

    def __repr__(self) -> str:
        return f"GraphPipeline(name={self.name!r}, coordinate={self.coordinate!r})"
