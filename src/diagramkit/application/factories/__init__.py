"""Creation factories for graphs and figures."""

from .figure_factory import FigureFactory
from .graph_factory import GraphFactory

__all__ = ["FigureFactory", "GraphFactory"]
