"""Drawing scripts: ordered requests, undos, redos and exports."""
import json
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from diagramkit.application.diagram_factory import DiagramFactory
from diagramkit.domain.diagram.visitor import DiagramVisitor
from diagramkit.domain.base.exceptions import ScriptError, UnknownElementCategoryError
from diagramkit.domain.base.ports import ConsolePort
from diagramkit.domain.diagram.diagram import Diagram
from diagramkit.domain.diagram.value_objects import DiagramKind
from diagramkit.infrastructure.logging.logger import get_logger


class StepAction(str, Enum):
    REQUEST = "request"
    UNDO = "undo"
    REDO = "redo"
    EXPORT = "export"


class ScriptStep(BaseModel):
    """One step of a drawing script."""
    model_config = ConfigDict(frozen=True)

    action: StepAction
    element: Optional[str] = None
    kind: Optional[str] = None
    coordinate: Optional[str] = None

    @model_validator(mode="after")
    def check_arguments(self) -> "ScriptStep":
        """Request steps need element, kind and coordinate; export steps need element."""
        if self.action is StepAction.REQUEST:
            missing = [
                name for name in ("element", "kind", "coordinate") if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(f"request step is missing: {', '.join(missing)}")
        elif self.action is StepAction.EXPORT and self.element is None:
            raise ValueError("export step is missing: element")
        return self


DEMO_SCRIPT: List[ScriptStep] = [
    ScriptStep(action=StepAction.REQUEST, element="Graph", kind="Line", coordinate="(10,20)"),
    ScriptStep(action=StepAction.REQUEST, element="Graph", kind="Bar", coordinate="(15,30)"),
    ScriptStep(action=StepAction.REQUEST, element="Figure", kind="CircleColor", coordinate="(5,5)"),
    ScriptStep(action=StepAction.REQUEST, element="Figure", kind="SquareBW", coordinate="(2,3)"),
    ScriptStep(action=StepAction.UNDO),
    ScriptStep(action=StepAction.REDO),
    ScriptStep(action=StepAction.EXPORT, element="Graph"),
    ScriptStep(action=StepAction.EXPORT, element="Figure"),
]


def parse_script(data: Any) -> List[ScriptStep]:
    """
    Validate raw script data.

    Steps are mappings, or bare strings for argument-less actions
    (``undo``/``redo``).

    Raises:
        ScriptError: If data is not a list of valid steps
    """
    if not isinstance(data, list):
        raise ScriptError("A script must be a list of steps")

    steps = []
    for index, raw in enumerate(data):
        if isinstance(raw, str):
            raw = {"action": raw}
        try:
            steps.append(ScriptStep.model_validate(raw))
        except ValidationError as e:
            raise ScriptError(f"Invalid step #{index + 1}: {e}", details=e.errors()) from e
    return steps


def load_script(path: str) -> List[ScriptStep]:
    """
    Load a script from a YAML or JSON file.

    Raises:
        ScriptError: If the file is missing, unparsable or invalid
    """
    script_path = Path(path)
    if not script_path.is_file():
        raise ScriptError(f"Script file not found: {path}")

    try:
        with script_path.open("r", encoding="utf-8") as f:
            if script_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ScriptError(f"Failed to parse script {path}: {e}") from e

    return parse_script(data)


class ScriptRunner:
    """Runs script steps against a diagram facade."""

    def __init__(
        self,
        factory: DiagramFactory,
        exporter: DiagramVisitor,
        console: ConsolePort,
        strict: bool = False,
    ):
        self._factory = factory
        self._exporter = exporter
        self._console = console
        self._strict = strict
        self._logger = get_logger(__name__)

    def run(self, steps: Iterable[ScriptStep]) -> None:
        for step in steps:
            self._logger.debug("Running step", action=step.action.value, element=step.element)
            self.run_step(step)

    def run_step(self, step: ScriptStep) -> None:
        if step.action is StepAction.REQUEST:
            self._factory.request(step.element, step.kind, step.coordinate)
        elif step.action is StepAction.UNDO:
            self._factory.undo()
        elif step.action is StepAction.REDO:
            self._factory.redo()
        elif step.action is StepAction.EXPORT:
            self._export(step.element)

    def _export(self, element: str) -> None:
        if element == DiagramKind.GRAPH.value:
            diagram = Diagram.graph(self._console)
        elif element == DiagramKind.FIGURE.value:
            diagram = Diagram.figure(self._console)
        elif self._strict:
            raise UnknownElementCategoryError(element)
        else:
            self._logger.debug("Ignoring export of unknown element category", element=element)
            return
        diagram.accept(self._exporter)
