"""Domain ports - interfaces the infrastructure layer implements."""

from .console_port import ConsolePort

__all__ = ["ConsolePort"]
