"""Director driving a builder through its construction steps."""
from diagramkit.application.builder.pipelines import Builder, GraphPipeline


class Director:
    """Always runs set_coordinate, calc, draw and drag, in that order."""

    def construct(self, builder: Builder, coordinate: str) -> None:
        if isinstance(builder, GraphPipeline):
            with builder.lock:
                self._run_steps(builder, coordinate)
        else:
            self._run_steps(builder, coordinate)

    @staticmethod
    def _run_steps(builder: Builder, coordinate: str) -> None:
        builder.set_coordinate(coordinate)
        builder.calc()
        builder.draw()
        builder.drag()
