"""Application bootstrap - wires the facade from configuration."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from diagramkit.application.diagram_factory import DiagramFactory
from diagramkit.application.export.visitor import ExportVisitor
from diagramkit.application.factories.figure_factory import FigureFactory
from diagramkit.application.factories.graph_factory import GraphFactory
from diagramkit.application.script import DEMO_SCRIPT, ScriptRunner, ScriptStep
from diagramkit.config.manager import ConfigurationManager
from diagramkit.config.schemas import AppConfig
from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.figure.flyweight import FigurePool
from diagramkit.infrastructure.console.stream_console import StreamConsole
from diagramkit.infrastructure.events.publisher import create_event_publisher
from diagramkit.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """Application context owning every collaborator of one drawing session."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        console: Optional[ConsolePort] = None,
        config: Optional[AppConfig] = None,
    ) -> None:
        if config is None:
            config = ConfigurationManager(config_path, overrides=overrides).app_config
        self.config = config

        setup_logging(self.config.logging)
        self.logger = get_logger(__name__)

        diagram_config = self.config.diagram
        strict = diagram_config.strict_mode

        self.console = console or StreamConsole()
        self.event_publisher = create_event_publisher(self.config.events.mode.value)
        self.factory = DiagramFactory(
            self.console,
            event_publisher=self.event_publisher,
            graph_factory=GraphFactory(self.console, strict=strict),
            figure_factory=FigureFactory(
                self.console, FigurePool(self.console, diagram_config.colored_marker)
            ),
            strict=strict,
        )
        self.exporter = ExportVisitor(self.console, diagram_config.export_formats)
        self.runner = ScriptRunner(self.factory, self.exporter, self.console, strict=strict)

        self.logger.debug(
            "Application initialized",
            strict_mode=strict,
            events_mode=self.config.events.mode.value,
        )

    def run_script(self, steps: List[ScriptStep]) -> None:
        self.runner.run(steps)

    def run_demo(self) -> None:
        self.run_script(DEMO_SCRIPT)
