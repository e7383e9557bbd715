"""Base event classes and protocols - foundation for audit events."""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Protocol
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class DomainEvent(BaseModel):
    """Base class for all domain events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if 'event_type' not in data or not data['event_type']:
            data['event_type'] = self.__class__.__name__
        super().__init__(**data)


class EventPublisher(Protocol):
    """Protocol for event publishing."""

    def publish(self, event: DomainEvent) -> None:
        """Publish a single domain event."""
        ...

    def register_handler(self, event_type: str, handler: Callable[[DomainEvent], None]) -> None:
        """Register an event handler."""
        ...
