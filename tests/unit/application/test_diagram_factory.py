"""Tests for the top-level diagram facade."""
from unittest.mock import Mock

import pytest

from diagramkit.application.diagram_factory import DiagramFactory
from diagramkit.domain.base.exceptions import UnknownElementCategoryError, UnknownGraphKindError
from diagramkit.domain.diagram.events import (
    FigureCreatedEvent,
    GraphCreatedEvent,
    GraphCreationRedoneEvent,
    GraphCreationUndoneEvent,
)


class TestDiagramFactoryRequests:
    """Test request routing."""

    def test_graph_request_runs_pipeline_without_notifications(self, diagram_factory, console):
        diagram_factory.request("Graph", "Line", "(10,20)")

        assert console.lines == [
            "Line calc at (10,20)",
            "[Graph Proxy] Drawing graphical + textual stub",
            "Drag Line at (10,20)",
        ]

    def test_figure_request_notifies_both_subscribers(self, diagram_factory, console):
        diagram_factory.request("Figure", "CircleColor", "(5,5)")

        assert console.lines == [
            "Coordinates: (5,5)",
            "[Colored Flyweight] Drawing colored figure of type: CircleColor",
            "[Regular Subscriber] Colored Figure drawn",
            "[Contrast Image Subscriber] Colored Figure drawn",
        ]
        figure = diagram_factory.figure_factory.pool.get_or_create("CircleColor")
        assert list(figure.subscribers) == [
            diagram_factory.regular_subscriber,
            diagram_factory.contrast_subscriber,
        ]

    def test_repeated_figure_request_accumulates_subscribers(self, diagram_factory, console):
        diagram_factory.request("Figure", "SquareBW", "(2,3)")
        console.clear()

        diagram_factory.request("Figure", "SquareBW", "(4,4)")

        assert console.lines == [
            "Coordinates: (4,4)",
            "[B/W Flyweight] Drawing black and white figure of type: SquareBW",
            "[Regular Subscriber] B/W Figure drawn",
            "[Contrast Image Subscriber] B/W Figure drawn",
            "[Regular Subscriber] B/W Figure drawn",
            "[Contrast Image Subscriber] B/W Figure drawn",
        ]

    @pytest.mark.parametrize("element", ["Chart", "graph", "figure", ""])
    def test_unknown_category_is_silent_noop(self, diagram_factory, console, element):
        diagram_factory.request(element, "Line", "(0,0)")

        assert console.lines == []
        assert diagram_factory.history.undo_depth == 0

    def test_unknown_category_raises_when_strict(self, console):
        factory = DiagramFactory(console, strict=True)

        with pytest.raises(UnknownElementCategoryError):
            factory.request("Chart", "Line", "(0,0)")

    def test_unknown_graph_kind_is_still_recorded(self, diagram_factory, console):
        diagram_factory.request("Graph", "Pie", "(0,0)")
        assert console.lines == []

        diagram_factory.undo()

        assert console.lines == ["Undo creation of graph: Pie"]

    def test_unknown_graph_kind_raises_when_strict(self, console):
        factory = DiagramFactory(console, strict=True)

        with pytest.raises(UnknownGraphKindError):
            factory.request("Graph", "Pie", "(0,0)")
        assert factory.history.undo_depth == 0

    def test_figures_are_not_undoable(self, diagram_factory, console):
        diagram_factory.request("Figure", "CircleColor", "(5,5)")
        console.clear()

        diagram_factory.undo()

        assert console.lines == []


class TestDiagramFactoryUndoRedo:
    """Test undo/redo delegation."""

    def test_undo_redo_last_graph(self, diagram_factory, console):
        diagram_factory.request("Graph", "Line", "(10,20)")
        diagram_factory.request("Graph", "Bar", "(15,30)")
        console.clear()

        diagram_factory.undo()
        diagram_factory.redo()

        assert console.lines == [
            "Undo creation of graph: Bar",
            "Bar calc at (15,30)",
            "[Graph Proxy] Drawing graphical + textual stub",
            "Drag Bar at (15,30)",
        ]

    def test_redo_after_new_request_is_noop(self, diagram_factory, console):
        diagram_factory.request("Graph", "Line", "(1,1)")
        diagram_factory.undo()
        diagram_factory.request("Graph", "Bar", "(2,2)")
        console.clear()

        diagram_factory.redo()

        assert console.lines == []

    def test_figure_request_does_not_clear_redo(self, diagram_factory, console):
        diagram_factory.request("Graph", "Line", "(1,1)")
        diagram_factory.undo()
        diagram_factory.request("Figure", "SquareBW", "(2,2)")
        console.clear()

        diagram_factory.redo()

        assert console.lines[0] == "Line calc at (1,1)"

    def test_empty_undo_and_redo_are_silent(self, diagram_factory, console):
        diagram_factory.undo()
        diagram_factory.redo()

        assert console.lines == []


class TestDiagramFactoryEvents:
    """Test audit events published by the facade."""

    def setup_method(self):
        """Set up test fixtures."""
        self.publisher = Mock()

    def published(self):
        return [c.args[0] for c in self.publisher.publish.call_args_list]

    def test_events_for_each_operation(self, console):
        factory = DiagramFactory(console, event_publisher=self.publisher)

        factory.request("Graph", "Line", "(10,20)")
        factory.request("Figure", "CircleColor", "(5,5)")
        factory.undo()
        factory.redo()

        events = self.published()
        assert [type(e) for e in events] == [
            GraphCreatedEvent,
            FigureCreatedEvent,
            GraphCreationUndoneEvent,
            GraphCreationRedoneEvent,
        ]
        assert events[0].kind == "Line"
        assert events[0].coordinate == "(10,20)"
        assert events[1].variant == "Colored"
        assert events[2].event_type == "GraphCreationUndoneEvent"

    def test_no_events_for_noops(self, console):
        factory = DiagramFactory(console, event_publisher=self.publisher)

        factory.request("Chart", "Line", "(0,0)")
        factory.undo()
        factory.redo()

        self.publisher.publish.assert_not_called()

    def test_unknown_graph_kind_publishes_no_creation_event(self, console):
        factory = DiagramFactory(console, event_publisher=self.publisher)

        factory.request("Graph", "Pie", "(0,0)")

        assert not any(isinstance(e, GraphCreatedEvent) for e in self.published())
