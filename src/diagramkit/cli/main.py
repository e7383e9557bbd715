"""
Main CLI module with argument parsing and command execution.

Commands:
- demo: run the built-in demonstration (default)
- request: create a single Graph or Figure
- run: run a YAML or JSON drawing script
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from diagramkit import __version__
from diagramkit.application.script import load_script
from diagramkit.bootstrap import Application
from diagramkit.domain.base.exceptions import DomainException
from diagramkit.infrastructure.logging.logger import get_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "diagramkit",
        description="diagramkit - design patterns around a simulated drawing tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Run the demonstration
  %(prog)s request Graph Line "(10,20)"     # Create one Line graph
  %(prog)s request Figure CircleColor "(5,5)"
  %(prog)s run steps.yaml                   # Run a drawing script
        """,
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--strict', action='store_true',
                        help='Fail on unknown element categories and graph kinds')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('demo', help='Run the built-in demonstration')

    request_parser = subparsers.add_parser('request', help='Create a single element')
    request_parser.add_argument('element', help='Element category (Graph or Figure)')
    request_parser.add_argument('kind', help='Graph kind (Bar, Line) or figure pool key')
    request_parser.add_argument('coordinate', help='Coordinate, e.g. "(10,20)"')

    run_parser = subparsers.add_parser('run', help='Run a drawing script')
    run_parser.add_argument('script', help='Script file path (JSON or YAML)')

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = 'demo'
    return args


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate global CLI flags into configuration overrides."""
    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides.setdefault('logging', {})['level'] = args.log_level
    if args.strict:
        overrides.setdefault('diagram', {})['strict_mode'] = True
    return overrides


def execute_command(app: Application, args: argparse.Namespace) -> None:
    """Route parsed arguments to the application."""
    if args.command == 'demo':
        app.run_demo()
    elif args.command == 'request':
        app.factory.request(args.element, args.kind, args.coordinate)
    elif args.command == 'run':
        app.run_script(load_script(args.script))


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        app = Application(config_path=args.config, overrides=build_overrides(args))
        execute_command(app, args)
    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
