"""Shared figure instances."""

from .flyweight import (
    BLACK_WHITE_STYLE,
    COLORED_STYLE,
    FigurePool,
    FigureVariant,
    FlyweightFigure,
)

__all__ = [
    "BLACK_WHITE_STYLE",
    "COLORED_STYLE",
    "FigurePool",
    "FigureVariant",
    "FlyweightFigure",
]
