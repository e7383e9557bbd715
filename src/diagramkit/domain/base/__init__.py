"""Base domain layer - shared kernel for diagrams and figures."""

from .events import DomainEvent, EventPublisher
from .exceptions import (
    ConfigurationError,
    DomainException,
    ScriptError,
    UnknownElementCategoryError,
    UnknownGraphKindError,
)

__all__ = [
    "ConfigurationError",
    "DomainEvent",
    "DomainException",
    "EventPublisher",
    "ScriptError",
    "UnknownElementCategoryError",
    "UnknownGraphKindError",
]
