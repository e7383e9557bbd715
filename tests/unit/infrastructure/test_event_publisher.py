"""Tests for the configurable event publisher."""
import pytest

from diagramkit.config import LoggingConfig
from diagramkit.domain.diagram.events import GraphCreatedEvent, GraphCreationUndoneEvent
from diagramkit.infrastructure.events import ConfigurableEventPublisher, create_event_publisher
from diagramkit.infrastructure.logging import setup_logging


class TestConfigurableEventPublisher:
    """Test logging and sync modes."""

    def test_invalid_mode(self):
        with pytest.raises(ValueError, match="Invalid mode"):
            ConfigurableEventPublisher(mode="async")

    def test_sync_mode_calls_handlers_for_event_type(self):
        # Arrange
        publisher = create_event_publisher("sync")
        received = []
        publisher.register_handler("GraphCreatedEvent", received.append)
        event = GraphCreatedEvent(kind="Line", coordinate="(10,20)")

        # Act
        publisher.publish(event)
        publisher.publish(GraphCreationUndoneEvent(kind="Line", coordinate="(10,20)"))

        # Assert
        assert received == [event]

    def test_sync_mode_multiple_handlers(self):
        publisher = create_event_publisher("sync")
        first, second = [], []
        publisher.register_handler("GraphCreatedEvent", first.append)
        publisher.register_handler("GraphCreatedEvent", second.append)

        publisher.publish(GraphCreatedEvent(kind="Bar", coordinate="(1,1)"))

        assert len(first) == 1
        assert len(second) == 1
        assert publisher.get_registered_handlers() == {"GraphCreatedEvent": 2}

    def test_handler_error_does_not_stop_other_handlers(self):
        publisher = create_event_publisher("sync")
        received = []

        def failing(event):
            raise RuntimeError("Handler error")

        publisher.register_handler("GraphCreatedEvent", failing)
        publisher.register_handler("GraphCreatedEvent", received.append)

        # Should not raise exception
        publisher.publish(GraphCreatedEvent(kind="Bar", coordinate="(1,1)"))

        assert len(received) == 1

    def test_logging_mode_does_not_call_handlers(self):
        publisher = create_event_publisher()
        received = []
        publisher.register_handler("GraphCreatedEvent", received.append)

        publisher.publish(GraphCreatedEvent(kind="Bar", coordinate="(1,1)"))

        assert received == []

    def test_logging_mode_logs_event_fields(self, capsys):
        setup_logging(LoggingConfig(level="INFO"))
        publisher = create_event_publisher("logging")

        publisher.publish(GraphCreatedEvent(kind="Line", coordinate="(10,20)"))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "GraphCreatedEvent" in captured.err
        assert "kind=Line" in captured.err
        assert "coordinate=(10,20)" in captured.err


class TestDomainEvents:
    """Test event defaults."""

    def test_event_type_defaults_to_class_name(self):
        event = GraphCreatedEvent(kind="Line", coordinate="(0,0)")

        assert event.event_type == "GraphCreatedEvent"
        assert event.event_id

    def test_events_have_unique_ids(self):
        first = GraphCreatedEvent(kind="Line", coordinate="(0,0)")
        second = GraphCreatedEvent(kind="Line", coordinate="(0,0)")

        assert first.event_id != second.event_id
