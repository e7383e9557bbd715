"""Configuration schemas."""
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    CONSOLE = "console"
    BOTH = "both"


class EventsMode(str, Enum):
    """Event publishing mode enumeration."""
    LOGGING = "logging"
    SYNC = "sync"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.CONSOLE, description="Where log records go")
    file_path: str = Field("logs/diagramkit.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Rotation settings must be at least 1")
        return v


class EventsConfig(BaseModel):
    """Event publishing configuration."""

    mode: EventsMode = Field(EventsMode.LOGGING, description="Event publishing mode")


class DiagramConfig(BaseModel):
    """Diagram behavior configuration."""

    strict_mode: bool = Field(
        False, description="Raise on unknown element categories and graph kinds"
    )
    colored_marker: str = Field(
        "Color", description="Substring that marks a figure pool key as colored"
    )
    export_formats: Dict[str, str] = Field(
        default_factory=lambda: {"Graph": "PNG", "Figure": "JPG"},
        description="Export format per element kind",
    )

    @field_validator("colored_marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Validate colored marker."""
        if not v:
            raise ValueError("Colored marker must not be empty")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)
    diagram: DiagramConfig = Field(default_factory=DiagramConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as a plain dictionary."""
        return self.model_dump(mode="json")
