"""Export visitor - reports the export format of each diagram kind."""
from typing import Dict, Mapping, Optional

from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.diagram.diagram import Diagram
from diagramkit.domain.diagram.value_objects import DiagramKind
from diagramkit.domain.diagram.visitor import DiagramVisitor

DEFAULT_EXPORT_FORMATS: Dict[str, str] = {
    DiagramKind.GRAPH.value: "PNG",
    DiagramKind.FIGURE.value: "JPG",
}


class ExportVisitor:
    """Writes ``Exporting <Kind> as <FORMAT>...`` for the visited diagram."""

    def __init__(self, console: ConsolePort, formats: Optional[Mapping[str, str]] = None):
        self._console = console
        self._formats = dict(DEFAULT_EXPORT_FORMATS)
        if formats:
            self._formats.update(formats)

    def format_for(self, kind: DiagramKind) -> str:
        return self._formats[DiagramKind(kind).value]

    def visit(self, diagram: Diagram) -> None:
        self._console.write(f"Exporting {diagram.kind.value} as {self.format_for(diagram.kind)}...")
