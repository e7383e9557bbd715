"""Visitor protocol diagrams accept."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from diagramkit.domain.diagram.diagram import Diagram


class DiagramVisitor(Protocol):
    def visit(self, diagram: Diagram) -> None:
        ...
