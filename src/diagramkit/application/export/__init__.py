"""Diagram export."""

from .visitor import DEFAULT_EXPORT_FORMATS, DiagramVisitor, ExportVisitor

__all__ = ["DEFAULT_EXPORT_FORMATS", "DiagramVisitor", "ExportVisitor"]
