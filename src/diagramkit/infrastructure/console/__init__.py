"""Console adapters."""

from .stream_console import StreamConsole

__all__ = ["StreamConsole"]
