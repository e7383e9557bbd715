"""Graph construction: pipelines, proxy and director."""

from .director import Director
from .pipelines import Builder, GraphPipeline
from .proxy import DrawProxy, GraphDrawProxy

__all__ = ["Builder", "Director", "DrawProxy", "GraphDrawProxy", "GraphPipeline"]
