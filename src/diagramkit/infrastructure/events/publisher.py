"""Configurable Event Publisher - Simple, mode-based event publishing."""
from typing import Callable, Dict, List

from diagramkit.config.schemas import EventsMode
from diagramkit.domain.base.events import DomainEvent, EventPublisher
from diagramkit.infrastructure.logging.logger import get_logger


class ConfigurableEventPublisher(EventPublisher):
    """
    Simple, configurable event publisher.

    Modes:
    - "logging": Just log events for an audit trail
    - "sync": Call registered handlers synchronously
    """

    def __init__(self, mode: str = EventsMode.LOGGING.value):
        """Initialize with publishing mode."""
        valid_modes = [m.value for m in EventsMode]
        if mode not in valid_modes:
            raise ValueError(f"Invalid mode '{mode}'. Must be one of: {valid_modes}")

        self.mode = EventsMode(mode)
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}
        self._logger = get_logger(__name__)

    def publish(self, event: DomainEvent) -> None:
        """Publish event based on configured mode."""
        try:
            if self.mode is EventsMode.LOGGING:
                self._log_event(event)
            else:
                self._call_handlers_sync(event)
        except Exception as e:
            # Publishing failures must not break drawing operations
            self._logger.error("Failed to publish event", event_type=event.event_type, error=str(e))

    def register_handler(self, event_type: str, handler: Callable[[DomainEvent], None]) -> None:
        """Register event handler for specific event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Registered handler for {event_type}")

    def _log_event(self, event: DomainEvent) -> None:
        """Log event for audit trail."""
        self._logger.info(
            "Event",
            event_type=event.event_type,
            event_id=event.event_id,
            occurred_at=event.occurred_at.isoformat(),
            **event.model_dump(exclude={"event_type", "event_id", "occurred_at", "metadata"}),
        )

    def _call_handlers_sync(self, event: DomainEvent) -> None:
        """Call handlers synchronously."""
        handlers = self._handlers.get(event.event_type, [])

        if not handlers:
            self._logger.debug(f"No handlers registered for {event.event_type}")
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(f"Event handler failed for {event.event_type}: {e}")
                # Continue with other handlers

    def get_registered_handlers(self) -> Dict[str, int]:
        """Get count of registered handlers by event type (for debugging)."""
        return {event_type: len(handlers) for event_type, handlers in self._handlers.items()}


def create_event_publisher(mode: str = EventsMode.LOGGING.value) -> ConfigurableEventPublisher:
    """Create event publisher with specified mode."""
    return ConfigurableEventPublisher(mode=mode)
