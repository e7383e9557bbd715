"""Graph factory - maps a graph kind to its construction pipeline."""
from typing import Dict, List, Optional

from diagramkit.application.builder.director import Director
from diagramkit.application.builder.pipelines import GraphPipeline
from diagramkit.domain.base.exceptions import UnknownGraphKindError
from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.diagram.value_objects import GraphKind
from diagramkit.infrastructure.logging.logger import get_logger


class GraphFactory:
    """
    Creates graphs by driving the pipeline registered for their kind.

    Exactly one pipeline exists per kind for the lifetime of the factory;
    every creation of that kind reuses it.
    """

    def __init__(
        self,
        console: ConsolePort,
        director: Optional[Director] = None,
        strict: bool = False,
    ):
        self._director = director or Director()
        self._strict = strict
        self._pipelines: Dict[str, GraphPipeline] = {
            kind.value: GraphPipeline(kind.value, console) for kind in GraphKind
        }
        self._logger = get_logger(__name__)

    @property
    def kinds(self) -> List[str]:
        return list(self._pipelines)

    def get_pipeline(self, kind: str) -> Optional[GraphPipeline]:
        """Return the pipeline for an exact kind name, or None."""
        return self._pipelines.get(kind)

    def create_graph(self, kind: str, coordinate: str) -> None:
        """
        Construct a graph of the given kind at coordinate.

        Unknown kinds are ignored unless the factory is strict.

        Raises:
            UnknownGraphKindError: If strict and no pipeline matches kind
        """
        pipeline = self.get_pipeline(kind)
        if pipeline is None:
            if self._strict:
                raise UnknownGraphKindError(kind)
            self._logger.debug("Ignoring unknown graph kind", kind=kind)
            return

        self._logger.debug("Constructing graph", kind=kind, coordinate=coordinate)
        self._director.construct(pipeline, coordinate)
