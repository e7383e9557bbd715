"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    DiagramConfig,
    EventsConfig,
    EventsMode,
    LogDestination,
    LoggingConfig,
    LogLevel,
)
from .manager import ConfigurationManager

__all__ = [
    'AppConfig',
    'ConfigurationManager',
    'DiagramConfig',
    'EventsConfig',
    'EventsMode',
    'LogDestination',
    'LogLevel',
    'LoggingConfig',
]
