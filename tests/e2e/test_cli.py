"""End-to-end tests for the command-line interface."""
import json

from diagramkit.cli.main import build_overrides, main, parse_args

DEMO_OUTPUT = """\
Line calc at (10,20)
[Graph Proxy] Drawing graphical + textual stub
Drag Line at (10,20)
Bar calc at (15,30)
[Graph Proxy] Drawing graphical + textual stub
Drag Bar at (15,30)
Coordinates: (5,5)
[Colored Flyweight] Drawing colored figure of type: CircleColor
[Regular Subscriber] Colored Figure drawn
[Contrast Image Subscriber] Colored Figure drawn
Coordinates: (2,3)
[B/W Flyweight] Drawing black and white figure of type: SquareBW
[Regular Subscriber] B/W Figure drawn
[Contrast Image Subscriber] B/W Figure drawn
Undo creation of graph: Bar
Bar calc at (15,30)
[Graph Proxy] Drawing graphical + textual stub
Drag Bar at (15,30)
Exporting Graph as PNG...
Exporting Figure as JPG...
"""


class TestCLI:
    """Test complete CLI runs."""

    def test_demo_is_default_command(self, capsys):
        assert main([]) == 0

        assert capsys.readouterr().out == DEMO_OUTPUT

    def test_demo_command(self, capsys):
        assert main(["demo"]) == 0

        assert capsys.readouterr().out == DEMO_OUTPUT

    def test_demo_with_debug_logging_keeps_stdout_clean(self, capsys):
        assert main(["--log-level", "DEBUG", "demo"]) == 0

        captured = capsys.readouterr()
        assert captured.out == DEMO_OUTPUT
        assert "Application initialized" in captured.err

    def test_request_figure(self, capsys):
        assert main(["request", "Figure", "CircleColor", "(5,5)"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "Coordinates: (5,5)",
            "[Colored Flyweight] Drawing colored figure of type: CircleColor",
            "[Regular Subscriber] Colored Figure drawn",
            "[Contrast Image Subscriber] Colored Figure drawn",
        ]

    def test_unknown_request_is_silent(self, capsys):
        assert main(["request", "Chart", "Line", "(0,0)"]) == 0

        assert capsys.readouterr().out == ""

    def test_unknown_request_fails_when_strict(self, capsys):
        assert main(["--strict", "request", "Chart", "Line", "(0,0)"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unknown element category" in captured.err

    def test_run_script(self, tmp_path, capsys):
        script = tmp_path / "steps.json"
        script.write_text(json.dumps([
            {"action": "request", "element": "Graph", "kind": "Line", "coordinate": "(1,1)"},
            "undo",
            "undo",
            "redo",
        ]))

        assert main(["run", str(script)]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "Line calc at (1,1)",
            "[Graph Proxy] Drawing graphical + textual stub",
            "Drag Line at (1,1)",
            "Undo creation of graph: Line",
            "Line calc at (1,1)",
            "[Graph Proxy] Drawing graphical + textual stub",
            "Drag Line at (1,1)",
        ]

    def test_missing_script_fails(self, tmp_path, capsys):
        assert main(["run", str(tmp_path / "missing.yaml")]) == 1

        assert "Script file not found" in capsys.readouterr().err

    def test_undecodable_script_fails(self, tmp_path, capsys):
        script = tmp_path / "steps.yaml"
        script.write_bytes(b"- \xff\n")

        assert main(["run", str(script)]) == 1

        assert "Failed to parse" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("diagram:\n  export_formats:\n    Graph: SVG\n")
        script = tmp_path / "steps.yaml"
        script.write_text("- action: export\n  element: Graph\n")

        assert main(["--config", str(config), "run", str(script)]) == 0

        assert capsys.readouterr().out == "Exporting Graph as SVG...\n"

    def test_build_overrides(self):
        args = parse_args(["--strict", "--log-level", "INFO", "demo"])

        assert build_overrides(args) == {
            "logging": {"level": "INFO"},
            "diagram": {"strict_mode": True},
        }
