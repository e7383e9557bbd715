"""Domain exception hierarchy."""
from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all diagramkit errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class UnknownElementCategoryError(DomainException):
    """Raised in strict mode when a request names an unknown element category."""

    def __init__(self, category: str):
        super().__init__(f"Unknown element category: {category!r}")
        self.category = category


class UnknownGraphKindError(DomainException):
    """Raised in strict mode when a graph of an unknown kind is requested."""

    def __init__(self, kind: str):
        super().__init__(f"Unknown graph kind: {kind!r}")
        self.kind = kind


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    pass


class ScriptError(DomainException):
    """Raised when a drawing script cannot be loaded or validated."""
    pass
